"""
Содержимое дерева.

Любой объект, умеющий вернуть свою AABB и поддерживающий равенство и
хеш, может храниться в дереве. Один и тот же объект может лежать сразу в
нескольких листьях, поэтому копирование должно быть дешёвым (ссылки).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from boxtree.geombase import BoundingBox, BoundingBox2, BoundingBox3


@runtime_checkable
class TreeContent(Protocol):
    """Объект с собственной AABB."""

    def get_bounding_box(self) -> BoundingBox:
        ...


@dataclass(frozen=True)
class Point2:
    """Точка на плоскости. Её AABB вырождена в саму точку."""

    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def get_bounding_box(self) -> BoundingBox2:
        p = self.as_array()
        return BoundingBox2(p, p)


@dataclass(frozen=True)
class Point3:
    """Точка в пространстве."""

    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def get_bounding_box(self) -> BoundingBox3:
        p = self.as_array()
        return BoundingBox3(p, p)
