"""
Пересечение ограниченного луча с AABB (метод плит).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from boxtree.geombase.errors import RayBoxInvariantError

if TYPE_CHECKING:
    from boxtree.geombase.aabb import BoundingBox
    from boxtree.geombase.ray import ConstrainedRay


class HitBoxKind(Enum):
    MISS = "miss"
    INSIDE = "inside"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class HitBoxResult:
    """
    Результат пересечения луча с коробкой.

    - MISS: пересечений в диапазоне нет
    - INSIDE: начало луча внутри коробки, near == far == точка выхода
    - OUTSIDE: луч входит в near и выходит в far, near <= far
    """

    kind: HitBoxKind
    near: float = math.nan
    far: float = math.nan

    @staticmethod
    def miss() -> "HitBoxResult":
        return HitBoxResult(HitBoxKind.MISS)

    @staticmethod
    def inside(t: float) -> "HitBoxResult":
        return HitBoxResult(HitBoxKind.INSIDE, t, t)

    @staticmethod
    def outside(t1: float, t2: float) -> "HitBoxResult":
        if t1 < t2:
            return HitBoxResult(HitBoxKind.OUTSIDE, t1, t2)
        return HitBoxResult(HitBoxKind.OUTSIDE, t2, t1)

    @property
    def is_miss(self) -> bool:
        return self.kind is HitBoxKind.MISS


def _projection_inside(box: "BoundingBox", point: np.ndarray, axis: int) -> bool:
    """Точка лежит внутри коробки по всем осям, кроме axis."""
    mask = np.arange(box.DIM) != axis
    return bool(np.all(box.u[mask] <= point[mask]) and np.all(point[mask] <= box.v[mask]))


def _merge_coincident(crossings: list[float]) -> list[float]:
    """Склеивает пересечения через ребро или угол, записанные по нескольким осям."""
    merged: list[float] = []
    for t in sorted(crossings):
        if merged and math.isclose(t, merged[-1], rel_tol=1e-9, abs_tol=1e-12):
            continue
        merged.append(t)
    return merged


def hit_box(box: "BoundingBox", cray: "ConstrainedRay") -> HitBoxResult:
    """
    Пересечение ограниченного луча с коробкой.

    Для каждой оси с ненулевой компонентой направления луч пересекается с
    двумя плоскостями коробки. Пересечение засчитывается, если точка лежит
    в пределах коробки по остальным осям и параметр входит в
    [t_min, t_max]. Ось, параллельная лучу, пересечений не даёт.
    Если пересечений нет, но весь отрезок лежит внутри коробки, результат
    INSIDE(t_max).

    Raises:
        RayBoxInvariantError: больше двух различных пересечений.
    """
    ray = cray.ray
    if ray.dim != box.DIM:
        raise ValueError(f"Ray dimension {ray.dim} does not match box dimension {box.DIM}")

    origin = ray.origin
    direction = ray.direction

    crossings: list[float] = []
    for axis in range(box.DIM):
        if direction[axis] == 0.0:
            continue
        for plane in (box.u[axis], box.v[axis]):
            t = float((plane - origin[axis]) / direction[axis])
            point = origin + direction * t
            if _projection_inside(box, point, axis) and cray.t_min <= t <= cray.t_max:
                crossings.append(t)

    crossings = _merge_coincident(crossings)

    if len(crossings) == 0:
        # Отрезок [t_min, t_max] целиком внутри коробки
        if math.isfinite(cray.t_min) and box.contains_point(ray.point_at(cray.t_min)):
            return HitBoxResult.inside(cray.t_max)
        return HitBoxResult.miss()
    if len(crossings) == 1:
        return HitBoxResult.inside(crossings[0])
    if len(crossings) == 2:
        return HitBoxResult.outside(crossings[0], crossings[1])
    raise RayBoxInvariantError(f"Ray {ray} crosses {box} at {len(crossings)} distinct parameters: {crossings}")
