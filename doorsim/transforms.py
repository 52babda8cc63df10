# doorsim/transforms.py
"""
Векторные утилиты и позы деталей.

Позиции в сцене — np.ndarray формы (3,), float.
Позы (для логов и MuJoCo-адаптера) — spatialmath.SE3.
"""

from __future__ import annotations
import numpy as np
from spatialmath import SE3, UnitQuaternion, SO3


def as_vec3(v) -> np.ndarray:
    """Привести к np.ndarray (3,) float; иначе ValueError."""
    a = np.asarray(v, dtype=float).ravel()
    if a.size != 3:
        raise ValueError(f"expected 3-vector, got shape {np.shape(v)}")
    if not np.all(np.isfinite(a)):
        raise ValueError(f"non-finite vector: {a}")
    return a


def displaced(pos, displacement) -> np.ndarray:
    """Целевая позиция: pos + displacement."""
    return as_vec3(pos) + as_vec3(displacement)


def lerp(a: np.ndarray, b: np.ndarray, s: float) -> np.ndarray:
    """Линейная интерполяция a→b; s может выходить за [0,1] (Back/Elastic)."""
    return (1.0 - s) * a + s * b


def slide(axis, offset: float) -> np.ndarray:
    """Вектор сдвига offset вдоль оси axis (ось нормируется)."""
    axis = as_vec3(axis)
    n = np.linalg.norm(axis)
    if n < 1e-12:
        raise ValueError("slide axis has zero length")
    return axis / n * float(offset)


# --------------------------------------------------------------------------- #
#  Позы
# --------------------------------------------------------------------------- #
def ortho_project(R: np.ndarray) -> np.ndarray:
    """Проецирует произвольную 3×3 на ближайшую ортонормированную SO(3)."""
    R = np.asarray(R, float).reshape(3, 3)
    U, _, Vt = np.linalg.svd(R)
    Rn = U @ Vt
    if np.linalg.det(Rn) < 0:
        U[:, -1] *= -1
        Rn = U @ Vt
    return Rn


def pose_from_pos_quat(pos, quat_wxyz) -> SE3:
    """SE3 из позиции и кватерниона (w x y z, формат MuJoCo)."""
    uq = UnitQuaternion(np.asarray(quat_wxyz, float).ravel())
    T = np.eye(4)
    T[:3, :3] = ortho_project(uq.R)
    T[:3, 3] = as_vec3(pos)
    return SE3(T, check=False)


def safe_uq_from_R(R) -> UnitQuaternion:
    """UnitQuaternion из R c ортогонализацией."""
    return UnitQuaternion(SO3(ortho_project(R), check=False))
