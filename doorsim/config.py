"""
Глобальный конфиг дверей / анимации.

Измени здесь имена узлов сцены, величины сдвига, диапазоны длительностей
и профили сглаживания.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from .easing import EasingStyle, EasingDirection

# ── базовые пути ──────────────────────────────────────────────────────────────
_THIS = Path(__file__).resolve()
ROOT  = _THIS.parents[1]
XML   = ROOT / "scene" / "doors.xml"

# ── имена узлов сцены ─────────────────────────────────────────────────────────
CONTAINER_NAME   = "Doors"
ASSEMBLY_NAME    = "PassengerDoor"
LEFT_PANEL_NAME  = "LeftPanel"
RIGHT_PANEL_NAME = "RightPanel"
ANCHOR_NAME      = "Anchor"       # опорная деталь панели (PrimaryPart)

# ── MuJoCo: разбор имён тел ───────────────────────────────────────────────────
PATH_SEP   = "/"                  # Doors/PassengerDoor#1/LeftPanel/Glass
DEDUP_MARK = "#"                  # всё после '#' не участвует в сравнении имён

# ── сдвиг створок ─────────────────────────────────────────────────────────────
SLIDE_AXIS   = np.array([0.0, 0.0, 1.0])   # ось скольжения (Z)
MJ_SLIDE_AXIS = np.array([0.0, 1.0, 0.0])  # в MuJoCo Z — вверх, двери едут по Y
OPEN_OFFSET  = 2.6                          # ед. сцены, левая +, правая −
CLOSE_OFFSET = 2.6                          # ед. сцены, левая −, правая +

# ── открытие ─────────────────────────────────────────────────────────────────
OPEN_STYLE     = EasingStyle.CUBIC
OPEN_DIRECTION = EasingDirection.IN_OUT

# ── закрытие: длительность ~ U[min, max) ─────────────────────────────────────
CLOSE_DUR_MIN   = 3.0             # сек
CLOSE_DUR_MAX   = 6.0             # сек
CLOSE_DUR_INT   = False           # True → целое из [min, max] включительно
CLOSE_STYLE     = EasingStyle.SINE
CLOSE_DIRECTION = EasingDirection.IN_OUT

# Если у PassengerDoor нет одной из створок — прервать ВЕСЬ проход
# (как в исходном поведении), иначе пропустить только эту дверь.
ABORT_ON_MISSING_PANEL = True

# ── tween-движок ──────────────────────────────────────────────────────────────
TWEEN_DT       = 1.0 / 60.0       # сек, шаг по умолчанию для run()
TWEEN_MAX_TIME = 120.0            # сек, предохранитель для run()

# ── runner ────────────────────────────────────────────────────────────────────
OPEN_DUR  = 2.0                   # сек
HOLD_SEC  = 1.0                   # пауза между открытием и закрытием


# ── dataclass для быстрых overrides ───────────────────────────────────────────
@dataclass
class DoorMotion:
    open_offset: float = OPEN_OFFSET
    close_offset: float = CLOSE_OFFSET
    axis: np.ndarray = None
    open_style: EasingStyle = OPEN_STYLE
    open_direction: EasingDirection = OPEN_DIRECTION
    close_dur_min: float = CLOSE_DUR_MIN
    close_dur_max: float = CLOSE_DUR_MAX
    close_dur_int: bool = CLOSE_DUR_INT
    close_style: EasingStyle = CLOSE_STYLE
    close_direction: EasingDirection = CLOSE_DIRECTION
    abort_on_missing_panel: bool = ABORT_ON_MISSING_PANEL

    def __post_init__(self):
        if self.axis is None:
            self.axis = SLIDE_AXIS.copy()
        self.axis = np.asarray(self.axis, float).reshape(3)
        if self.close_dur_min > self.close_dur_max:
            raise ValueError(
                f"close_dur_min={self.close_dur_min} > close_dur_max={self.close_dur_max}"
            )
        if self.close_dur_min < 0:
            raise ValueError("close_dur_min must be >= 0")
        # целый режим: границы — целые секунды, иначе int() вышел бы за диапазон
        if self.close_dur_int and not all(float(b).is_integer()
                                          for b in (self.close_dur_min, self.close_dur_max)):
            raise ValueError(
                f"close_dur_int needs whole-second bounds, got "
                f"[{self.close_dur_min}, {self.close_dur_max}]"
            )


DEFAULT_MOTION = DoorMotion()

# Второй вариант закрытия: целые 2..4 сек и кубическое сглаживание.
INTEGER_CLOSE = DoorMotion(
    close_dur_min=2,
    close_dur_max=4,
    close_dur_int=True,
    close_style=EasingStyle.CUBIC,
    close_direction=EasingDirection.IN_OUT,
)
