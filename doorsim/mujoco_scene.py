"""
Загрузка MuJoCo модели и граф сцены поверх её mocap-тел.

Соглашение об именах тел (иерархия кодируется в имени, т.к. mocap-тела
в MJCF могут быть только детьми worldbody):

    Doors/PassengerDoor#1/LeftPanel/Anchor
    Doors/PassengerDoor#1/LeftPanel/Glass
    Doors/PassengerDoor#1/LeftPanel/Frame/Handle

  • каждое mocap-тело с '/' в имени — деталь (Part);
  • префиксы пути — модели (Model), узел модели = строка полного пути;
  • всё после '#' в сегменте не участвует в сравнении имён
    (MJCF требует уникальных имён, а дверей может быть несколько);
  • опорная деталь модели — её прямой ребёнок-деталь с именем cfg.ANCHOR_NAME.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List
from pathlib import Path
import logging
import numpy as np
import mujoco
from spatialmath import SE3

from . import config as cfg
from .transforms import as_vec3, pose_from_pos_quat

log = logging.getLogger(__name__)


@dataclass
class MjContext:
    model: mujoco.MjModel
    data: mujoco.MjData


def load_model(xml_path: Path = cfg.XML) -> MjContext:
    model = mujoco.MjModel.from_xml_path(str(xml_path))
    data  = mujoco.MjData(model)
    mujoco.mj_forward(model, data)
    return MjContext(model, data)


def logical_name(segment: str) -> str:
    """'PassengerDoor#1' → 'PassengerDoor'."""
    return segment.split(cfg.DEDUP_MARK, 1)[0]


class MjScene:
    """SceneGraph поверх mocap-тел MuJoCo (узлы: str — модель, int — деталь)."""

    def __init__(self, ctx: MjContext):
        self.ctx = ctx
        self._children: Dict[str, list] = {}
        self._part_path: Dict[int, str] = {}
        self.part_ids: List[int] = []
        self._build()

    @classmethod
    def from_xml(cls, xml_path: Path = cfg.XML) -> "MjScene":
        return cls(load_model(xml_path))

    def _add_child(self, parent: str, node):
        kids = self._children.setdefault(parent, [])
        if node not in kids:
            kids.append(node)

    def _build(self):
        m = self.ctx.model
        for bid in range(m.nbody):
            name = mujoco.mj_id2name(m, mujoco.mjtObj.mjOBJ_BODY, bid) or ""
            if cfg.PATH_SEP not in name:
                continue
            if m.body_mocapid[bid] < 0:
                log.debug("[MJ] body %r is not mocap; skipped", name)
                continue
            segs = name.split(cfg.PATH_SEP)
            # цепочка моделей: '' → 'Doors' → 'Doors/PassengerDoor#1' → …
            parent = ""
            for i in range(1, len(segs)):
                path = cfg.PATH_SEP.join(segs[:i])
                self._add_child(parent, path)
                self._children.setdefault(path, [])
                parent = path
            self._add_child(parent, bid)
            self._part_path[bid] = name
            self.part_ids.append(bid)
        log.info("[MJ] %d mocap parts, %d models", len(self._part_path), sum(1 for k in self._children if k))

    # ── узлы ─────────────────────────────────────────────────────────────────
    def root(self, name: str = cfg.CONTAINER_NAME) -> str:
        """Модель верхнего уровня с данным логическим именем."""
        for node in self._children.get("", []):
            if isinstance(node, str) and logical_name(node) == name:
                return node
        raise KeyError(f"top-level model {name!r} not found")

    def _path(self, node) -> str:
        if isinstance(node, str):
            return node
        try:
            return self._part_path[int(node)]
        except KeyError:
            raise KeyError(f"body id {node} is not a mocap part") from None

    def name(self, node) -> str:
        return logical_name(self._path(node).rsplit(cfg.PATH_SEP, 1)[-1])

    def is_model(self, node) -> bool:
        return isinstance(node, str)

    def children(self, node) -> list:
        return list(self._children.get(node, [])) if isinstance(node, str) else []

    def find_child(self, node, name: str):
        for ch in self.children(node):
            if self.name(ch) == name:
                return ch
        return None

    def descendant_parts(self, node) -> list:
        out = []
        for ch in self.children(node):
            if isinstance(ch, str):
                out.extend(self.descendant_parts(ch))
            else:
                out.append(ch)
        return out

    def primary_part(self, model):
        for ch in self.children(model):
            if not isinstance(ch, str) and self.name(ch) == cfg.ANCHOR_NAME:
                return ch
        return None

    # ── позиции ──────────────────────────────────────────────────────────────
    def _mocap(self, part) -> int:
        self._path(part)
        return int(self.ctx.model.body_mocapid[int(part)])

    def get_position(self, part) -> np.ndarray:
        return np.array(self.ctx.data.mocap_pos[self._mocap(part)], dtype=float)

    def set_position(self, part, pos) -> None:
        self.ctx.data.mocap_pos[self._mocap(part)] = as_vec3(pos)

    def part_pose(self, part) -> SE3:
        """Поза детали (мир) из mocap_pos / mocap_quat."""
        mid = self._mocap(part)
        return pose_from_pos_quat(self.ctx.data.mocap_pos[mid], self.ctx.data.mocap_quat[mid])

    def forward(self):
        mujoco.mj_forward(self.ctx.model, self.ctx.data)
