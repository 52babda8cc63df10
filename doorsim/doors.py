# doorsim/doors.py
"""
PassengerDoor — автоматическое открытие/закрытие раздвижных дверей.

Иерархия сцены:
    Doors (контейнер)
      └─ PassengerDoor (×N)
           ├─ LeftPanel   – модель створки (PrimaryPart + детали)
           └─ RightPanel

Открытие: левая створка +OPEN_OFFSET вдоль оси, правая −OPEN_OFFSET,
Cubic/InOut, общая длительность.
Закрытие: зеркально, длительность каждой створки случайна (независимо).

Вызовы возвращаются сразу после play(); двигает детали AnimationEngine.
Open и Close на одних и тех же дверях не согласуются: последний play()
на детали отменяет предыдущий tween.
"""

from __future__ import annotations
from typing import Iterator
import logging
import math
import numbers
import numpy as np

from . import config as cfg
from .animator import move_model
from .config import DoorMotion
from .scene import MissingPanelError, require_panels
from .transforms import slide

log = logging.getLogger(__name__)


class PassengerDoor:
    def __init__(self, scene, engine,
                 motion: DoorMotion | None = None,
                 rng: np.random.Generator | None = None,
                 seed: int | None = None):
        self.scene = scene
        self.engine = engine
        self.motion = motion if motion is not None else cfg.DEFAULT_MOTION
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    # ── обход ────────────────────────────────────────────────────────────────
    def assemblies(self, container) -> Iterator[object]:
        """Прямые дети контейнера — модели с именем cfg.ASSEMBLY_NAME."""
        for node in self.scene.children(container):
            if self.scene.is_model(node) and self.scene.name(node) == cfg.ASSEMBLY_NAME:
                yield node

    def _panels(self, container):
        """
        Пары (left, right) по всем PassengerDoor. При отсутствии створки —
        предупреждение и конец обхода (или пропуск двери, если
        motion.abort_on_missing_panel = False).
        """
        for door in self.assemblies(container):
            try:
                yield require_panels(self.scene, door, cfg.LEFT_PANEL_NAME, cfg.RIGHT_PANEL_NAME)
            except MissingPanelError as e:
                log.warning("[DOOR] %s", e)
                if self.motion.abort_on_missing_panel:
                    return

    @staticmethod
    def _play_all(tweens) -> list:
        for tw in tweens:
            tw.play()
        return list(tweens)

    # ── длительности ─────────────────────────────────────────────────────────
    def close_duration(self) -> float:
        """Случайная длительность закрытия одной створки (сек)."""
        m = self.motion
        if m.close_dur_int:
            return float(self.rng.integers(int(m.close_dur_min), int(m.close_dur_max) + 1))
        return float(self.rng.uniform(m.close_dur_min, m.close_dur_max))

    # ── публичные вызовы ─────────────────────────────────────────────────────
    def automatic_open(self, container, open_duration: float) -> list:
        """
        Открыть все двери контейнера за open_duration сек.
        Возврат: запущенные tween'ы.
        """
        if not isinstance(open_duration, numbers.Real) or isinstance(open_duration, bool) \
                or not math.isfinite(open_duration) or open_duration <= 0:
            raise ValueError(f"open_duration must be a positive number, got {open_duration!r}")

        m = self.motion
        d_left = slide(m.axis, m.open_offset)
        d_right = slide(m.axis, -m.open_offset)

        started = []
        for left, right in self._panels(container):
            tw_left = move_model(self.scene, self.engine, left, d_left, open_duration,
                                 m.open_style, m.open_direction)
            tw_right = move_model(self.scene, self.engine, right, d_right, open_duration,
                                  m.open_style, m.open_direction)
            started += self._play_all(tw_left)
            started += self._play_all(tw_right)

        log.info("[DOOR] open: %d tweens, dur=%.2fs", len(started), open_duration)
        return started

    def close(self, container) -> list:
        """
        Закрыть все двери контейнера; длительность каждой створки случайна.
        Возврат: запущенные tween'ы.
        """
        m = self.motion
        d_left = slide(m.axis, -m.close_offset)
        d_right = slide(m.axis, m.close_offset)

        started = []
        for left, right in self._panels(container):
            dur_left = self.close_duration()
            dur_right = self.close_duration()
            tw_left = move_model(self.scene, self.engine, left, d_left, dur_left,
                                 m.close_style, m.close_direction)
            tw_right = move_model(self.scene, self.engine, right, d_right, dur_right,
                                  m.close_style, m.close_direction)
            started += self._play_all(tw_left)
            started += self._play_all(tw_right)
            log.debug("[DOOR] close durations: left=%.2fs right=%.2fs", dur_left, dur_right)

        log.info("[DOOR] close: %d tweens", len(started))
        return started


def open_doors(scene, engine, container, open_duration: float = cfg.OPEN_DUR, **kw) -> list:
    """Сокращение: PassengerDoor(scene, engine, **kw).automatic_open(...)."""
    return PassengerDoor(scene, engine, **kw).automatic_open(container, open_duration)


def close_doors(scene, engine, container, **kw) -> list:
    """Сокращение: PassengerDoor(scene, engine, **kw).close(...)."""
    return PassengerDoor(scene, engine, **kw).close(container)
