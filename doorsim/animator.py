# doorsim/animator.py
"""
Сдвиг модели целиком: по tween'у на каждую деталь под моделью.
"""

from __future__ import annotations
import logging

from .easing import EasingStyle, EasingDirection
from .scene import MissingAnchorError, require_primary
from .transforms import as_vec3, displaced
from .tween import TweenInfo

log = logging.getLogger(__name__)


def create_tween(engine, part, goal_position, duration: float,
                 easing_style: EasingStyle, easing_direction: EasingDirection):
    """Tween позиции одной детали (без повторов, реверса и задержки)."""
    info = TweenInfo(duration, easing_style, easing_direction, 0, False, 0.0)
    return engine.create(part, goal_position, info)


def move_model(scene, engine, model, displacement, duration: float,
               easing_style: EasingStyle, easing_direction: EasingDirection) -> list:
    """
    Создать tween'ы, сдвигающие каждую деталь model на displacement.

    Детали берутся транзитивно (включая вложенные модели), цель считается
    от ТЕКУЩЕЙ позиции в момент вызова. Tween'ы не запускаются.

    Возврат: список tween'ов (по одному на деталь, в порядке обхода);
    пустой список, если у модели нет опорной детали.
    """
    try:
        require_primary(scene, model)
    except MissingAnchorError as e:
        log.warning("[DOOR] %s", e)
        return []

    d = as_vec3(displacement)
    tweens = []
    for part in scene.descendant_parts(model):
        goal = displaced(scene.get_position(part), d)
        tweens.append(create_tween(engine, part, goal, duration, easing_style, easing_direction))

    log.debug("[DOOR] %s: %d tweens, d=%s, dur=%.2fs",
              scene.name(model), len(tweens), d, duration)
    return tweens
