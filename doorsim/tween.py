# doorsim/tween.py
"""
Tween-движок: покадровая интерполяция позиций деталей.

Публичный API:
    TweenInfo(time, easing_style, easing_direction, repeat_count, reverses, delay_time)
    TweenEngine(scene).create(part, goal, info) → Tween
    Tween.play() / Tween.cancel()
    TweenEngine.step(dt)                  – продвинуть все активные tween'ы
    TweenEngine.run(dt, max_time, …)      – шагать, пока есть активные

Правила:
  • старт фиксируется в момент play() (текущая позиция детали);
  • новый play() на той же детали отменяет предыдущий tween (supersede);
  • позиции пишутся через scene.set_position.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol
import logging
import math
import numpy as np

from . import config as cfg
from .easing import EasingStyle, EasingDirection, ease
from .transforms import as_vec3, lerp

log = logging.getLogger(__name__)


class TweenState(Enum):
    BEGIN = "Begin"
    PLAYING = "Playing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class TweenInfo:
    time: float = 1.0
    easing_style: EasingStyle = EasingStyle.QUAD
    easing_direction: EasingDirection = EasingDirection.OUT
    repeat_count: int = 0
    reverses: bool = False
    delay_time: float = 0.0

    def __post_init__(self):
        if not math.isfinite(self.time) or self.time < 0:
            raise ValueError(f"tween time must be finite and >= 0, got {self.time}")
        if not math.isfinite(self.delay_time) or self.delay_time < 0:
            raise ValueError(f"delay_time must be finite and >= 0, got {self.delay_time}")
        if int(self.repeat_count) != self.repeat_count or self.repeat_count < 0:
            raise ValueError(f"repeat_count must be a non-negative int, got {self.repeat_count}")

    @property
    def cycle_time(self) -> float:
        return self.time * (2.0 if self.reverses else 1.0)

    @property
    def total_time(self) -> float:
        return self.delay_time + (int(self.repeat_count) + 1) * self.cycle_time


class AnimationEngine(Protocol):
    def create(self, part, goal, info: TweenInfo): ...


class Tween:
    def __init__(self, engine: "TweenEngine", part, goal, info: TweenInfo):
        self.engine = engine
        self.part = part
        self.goal = as_vec3(goal)
        self.info = info
        self.state = TweenState.BEGIN
        self.start: Optional[np.ndarray] = None
        self.elapsed = 0.0

    def __repr__(self):
        return (f"Tween(part={self.part!r}, goal={self.goal}, "
                f"time={self.info.time}, state={self.state.value})")

    def play(self):
        self.engine._play(self)
        return self

    def cancel(self):
        if self.state in (TweenState.BEGIN, TweenState.PLAYING):
            self.engine._retire(self, TweenState.CANCELLED)

    # -- вычисление позиции ------------------------------------------------
    def _alpha(self) -> float:
        """Линейный прогресс (до сглаживания) для текущего elapsed."""
        info = self.info
        u = self.elapsed - info.delay_time
        if self._finished():
            return 0.0 if info.reverses else 1.0
        if u <= 0.0:
            return 0.0
        c = math.fmod(u, info.cycle_time)
        if c < info.time:
            return c / info.time
        return 1.0 - (c - info.time) / info.time

    def _finished(self) -> bool:
        info = self.info
        if self.elapsed < info.delay_time:
            return False
        if info.time <= 0.0:
            return True
        return self.elapsed >= info.total_time

    def _position(self) -> np.ndarray:
        s = ease(self._alpha(), self.info.easing_style, self.info.easing_direction)
        return lerp(self.start, self.goal, s)


class TweenEngine:
    """AnimationEngine, который сам двигает детали сцены по step(dt)."""

    def __init__(self, scene):
        self.scene = scene
        self._active: Dict[object, Tween] = {}
        self.time = 0.0

    def create(self, part, goal, info: TweenInfo) -> Tween:
        return Tween(self, part, goal, info)

    def active(self) -> List[Tween]:
        return list(self._active.values())

    def is_idle(self) -> bool:
        return not self._active

    def _play(self, tw: Tween):
        if tw.state is not TweenState.BEGIN:
            log.debug("[TWEEN] play() ignored, state=%s", tw.state.value)
            return
        prev = self._active.get(tw.part)
        if prev is not None:
            log.debug("[TWEEN] superseded tween on %r", tw.part)
            self._retire(prev, TweenState.CANCELLED)
        tw.start = as_vec3(self.scene.get_position(tw.part))
        tw.state = TweenState.PLAYING
        self._active[tw.part] = tw

    def _retire(self, tw: Tween, state: TweenState):
        tw.state = state
        if self._active.get(tw.part) is tw:
            del self._active[tw.part]

    def step(self, dt: float) -> int:
        """Продвинуть активные tween'ы на dt сек. Возврат: число оставшихся."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self.time += dt
        for tw in list(self._active.values()):
            tw.elapsed += dt
            if tw.elapsed < tw.info.delay_time:
                continue
            self.scene.set_position(tw.part, tw._position())
            if tw._finished():
                self._retire(tw, TweenState.COMPLETED)
        return len(self._active)

    def run(self,
            dt: float = cfg.TWEEN_DT,
            max_time: float = cfg.TWEEN_MAX_TIME,
            on_step: Optional[Callable[[float], None]] = None,
            keep_running: Optional[Callable[[], bool]] = None) -> float:
        """
        Шагать по dt, пока есть активные tween'ы (не дольше max_time).
        on_step(dt) вызывается после каждого шага (напр. mj_step + viewer.sync).
        keep_running() проверяется перед каждым шагом (напр. viewer.is_running);
        если вернул False — все активные tween'ы отменяются.
        Возврат: прошедшее время (сек).
        """
        if dt <= 0:
            raise ValueError(f"dt must be > 0, got {dt}")
        t = 0.0
        while self._active and t < max_time:
            if keep_running is not None and not keep_running():
                log.info("[TWEEN] run() interrupted, cancelling %d", len(self._active))
                for tw in self.active():
                    tw.cancel()
                break
            self.step(dt)
            t += dt
            if on_step is not None:
                on_step(dt)
        if self._active:
            log.warning("[TWEEN] run() stopped by max_time=%.1fs with %d active",
                        max_time, len(self._active))
        return t
