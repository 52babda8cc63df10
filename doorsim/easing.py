# doorsim/easing.py
"""
Кривые сглаживания для tween'ов.

Стиль задаёт форму кривой (Linear, Sine, Cubic, …), направление — где
применяется ускорение:
    In    : медленный старт
    Out   : медленный финиш
    InOut : медленно с обеих сторон (симметрично относительно t = 0.5)

Все кривые определены через «In»-форму f(t):
    Out(t)   = 1 − f(1 − t)
    InOut(t) = f(2t)/2                 при t < 0.5
             = 1 − f(2 − 2t)/2         иначе
"""

from __future__ import annotations
from enum import Enum
import math


class EasingStyle(Enum):
    LINEAR = "Linear"
    SINE = "Sine"
    QUAD = "Quad"
    CUBIC = "Cubic"
    QUART = "Quart"
    QUINT = "Quint"
    EXPONENTIAL = "Exponential"
    CIRCULAR = "Circular"
    BACK = "Back"
    BOUNCE = "Bounce"
    ELASTIC = "Elastic"


class EasingDirection(Enum):
    IN = "In"
    OUT = "Out"
    IN_OUT = "InOut"


_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0


def _bounce_out(t: float) -> float:
    n1, d1 = 7.5625, 2.75
    if t < 1.0 / d1:
        return n1 * t * t
    if t < 2.0 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _exponential_in(t: float) -> float:
    return 0.0 if t <= 0.0 else 2.0 ** (10.0 * (t - 1.0))


def _elastic_in(t: float) -> float:
    if t <= 0.0 or t >= 1.0:
        return t
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _ELASTIC_C4)


_IN = {
    EasingStyle.LINEAR: lambda t: t,
    EasingStyle.SINE: lambda t: 1.0 - math.cos(t * math.pi / 2.0),
    EasingStyle.QUAD: lambda t: t ** 2,
    EasingStyle.CUBIC: lambda t: t ** 3,
    EasingStyle.QUART: lambda t: t ** 4,
    EasingStyle.QUINT: lambda t: t ** 5,
    EasingStyle.EXPONENTIAL: _exponential_in,
    EasingStyle.CIRCULAR: lambda t: 1.0 - math.sqrt(max(0.0, 1.0 - t * t)),
    EasingStyle.BACK: lambda t: _BACK_C3 * t ** 3 - _BACK_C1 * t ** 2,
    EasingStyle.BOUNCE: lambda t: 1.0 - _bounce_out(1.0 - t),
    EasingStyle.ELASTIC: _elastic_in,
}


def ease(alpha: float,
         style: EasingStyle = EasingStyle.LINEAR,
         direction: EasingDirection = EasingDirection.OUT) -> float:
    """
    Пересчитать линейный прогресс alpha ∈ [0,1] в сглаженный.
    alpha вне диапазона обрезается; ease(0)=0, ease(1)=1 для всех стилей.
    """
    t = min(1.0, max(0.0, float(alpha)))
    if t == 0.0 or t == 1.0:
        return t

    f = _IN[EasingStyle(style)]
    direction = EasingDirection(direction)
    if direction is EasingDirection.IN:
        return f(t)
    if direction is EasingDirection.OUT:
        return 1.0 - f(1.0 - t)
    # InOut
    if t < 0.5:
        return 0.5 * f(2.0 * t)
    return 1.0 - 0.5 * f(2.0 - 2.0 * t)
