# doorsim/scene.py
"""
Граф сцены: интерфейс, который ожидают animator/doors, и его
реализация в памяти.

Узлы двух видов:
    Model – группа (контейнер дверей, PassengerDoor, створка, вложенные модели)
    Part  – неделимая деталь с позицией; единица анимации

Любой хост (MuJoCo, игровой движок, USD…) подключается реализацией
протокола SceneGraph — см. mujoco_scene.MjScene.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol, runtime_checkable
import numpy as np

from .transforms import as_vec3


class DoorError(Exception):
    """Базовая ошибка структуры дверей в сцене."""


class MissingAnchorError(DoorError):
    """У модели створки не задана опорная деталь."""


class MissingPanelError(DoorError):
    """В PassengerDoor нет левой и/или правой створки."""


@runtime_checkable
class SceneGraph(Protocol):
    def name(self, node) -> str: ...
    def is_model(self, node) -> bool: ...
    def children(self, node) -> list: ...
    def find_child(self, node, name: str): ...
    def descendant_parts(self, node) -> list: ...
    def primary_part(self, model): ...
    def get_position(self, part) -> np.ndarray: ...
    def set_position(self, part, pos) -> None: ...


# --------------------------------------------------------------------------- #
#  Реализация в памяти
# --------------------------------------------------------------------------- #
@dataclass(eq=False)
class Part:
    name: str
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.position = as_vec3(self.position)


@dataclass(eq=False)
class Model:
    name: str
    children: List[object] = field(default_factory=list)
    primary_part: Optional[Part] = None

    def add(self, node):
        self.children.append(node)
        return node


class InMemoryScene:
    """SceneGraph поверх деревьев Model/Part."""

    def name(self, node) -> str:
        return node.name

    def is_model(self, node) -> bool:
        return isinstance(node, Model)

    def children(self, node) -> list:
        return list(node.children) if isinstance(node, Model) else []

    def find_child(self, node, name: str):
        for ch in self.children(node):
            if ch.name == name:
                return ch
        return None

    def _walk(self, node) -> Iterator[object]:
        for ch in self.children(node):
            yield ch
            yield from self._walk(ch)

    def descendant_parts(self, node) -> list:
        return [n for n in self._walk(node) if isinstance(n, Part)]

    def primary_part(self, model):
        return getattr(model, "primary_part", None)

    def get_position(self, part) -> np.ndarray:
        return part.position.copy()

    def set_position(self, part, pos) -> None:
        part.position = as_vec3(pos)


# --------------------------------------------------------------------------- #
#  Поиск с проверками
# --------------------------------------------------------------------------- #
def require_primary(scene: SceneGraph, model):
    """Опорная деталь модели или MissingAnchorError."""
    part = scene.primary_part(model)
    if part is None:
        raise MissingAnchorError(f"PrimaryPart not set for model {scene.name(model)!r}")
    return part


def require_panels(scene: SceneGraph, assembly, left_name: str, right_name: str):
    """(left, right) модели створок или MissingPanelError."""
    left = scene.find_child(assembly, left_name)
    right = scene.find_child(assembly, right_name)
    if left is None or right is None:
        missing = [n for n, m in ((left_name, left), (right_name, right)) if m is None]
        raise MissingPanelError(
            f"{' and '.join(missing)} not found in {scene.name(assembly)!r}"
        )
    return left, right
