"""
Axis-aligned bounding boxes (AABB) в 2D и 3D.

BoundingBox задаёт набор операций, по которым обобщено дерево:
partition, extend, is_contained, intersects, is_sub_scale, hit.
Конкретные реализации: BoundingBox2 и BoundingBox3.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Type

import numpy

from boxtree.geombase.ray_box import HitBoxResult, hit_box

# Коробки с меньшей диагональю не делятся
PARTITION_EPSILON = 1e-8

# Коробки с большей диагональю не растут
GROWTH_CEILING = 1e8


class BoundingBox(ABC):
    """
    Axis-Aligned Bounding Box: область [u, v], u <= v покомпонентно.

    Все операции чистые: возвращают новые коробки и не меняют self.
    """

    DIM: int = 0

    __slots__ = ("u", "v")

    def __init__(self, u, v):
        u = numpy.array(u, dtype=numpy.float64)
        v = numpy.array(v, dtype=numpy.float64)
        if u.shape != (self.DIM,) or v.shape != (self.DIM,):
            raise ValueError(
                f"{type(self).__name__} corners must have {self.DIM} components, got {u.shape} and {v.shape}"
            )
        if numpy.any(u > v):
            raise ValueError(f"Box corner u={u} exceeds v={v}")
        self.u = u
        self.v = v

    @classmethod
    @abstractmethod
    def default(cls) -> "BoundingBox":
        """Единичная коробка [0..0]-[1..1]."""

    @staticmethod
    def of_dim(dim: int) -> Type["BoundingBox"]:
        """Класс коробки для заданной размерности."""
        if dim == 2:
            return BoundingBox2
        if dim == 3:
            return BoundingBox3
        raise ValueError(f"Unsupported box dimension: {dim}")

    @classmethod
    def from_points(cls, points) -> "BoundingBox":
        """Create an AABB that encompasses a set of points."""
        points = numpy.asarray(points, dtype=numpy.float64)
        return cls(numpy.min(points, axis=0), numpy.max(points, axis=0))

    # ----------------------------------------------------------------
    # Размеры
    # ----------------------------------------------------------------

    def size(self) -> numpy.ndarray:
        """Протяжённость по каждой оси."""
        return self.v - self.u

    def center(self) -> numpy.ndarray:
        return (self.u + self.v) * 0.5

    def diagonal(self) -> float:
        """Длина диагонали."""
        return float(numpy.linalg.norm(self.v - self.u))

    def widest_axis(self) -> int:
        """Ось с наибольшей протяжённостью (при равенстве - меньший индекс)."""
        return int(numpy.argmax(self.size()))

    def narrowest_axis(self) -> int:
        """Ось с наименьшей протяжённостью (при равенстве - меньший индекс)."""
        return int(numpy.argmin(self.size()))

    # ----------------------------------------------------------------
    # Деление и рост
    # ----------------------------------------------------------------

    def partition(self, epsilon: float = PARTITION_EPSILON) -> Optional[tuple["BoundingBox", "BoundingBox"]]:
        """
        Делит коробку пополам по самой широкой оси.

        Returns:
            (near, far): near - дальний угол прижат к середине,
            far - ближний угол прижат к середине. None для вырожденной коробки.
        """
        if self.diagonal() < epsilon:
            return None

        axis = self.widest_axis()
        midpoint = 0.5 * (self.u[axis] + self.v[axis])

        near_v = self.v.copy()
        near_v[axis] = midpoint
        far_u = self.u.copy()
        far_u[axis] = midpoint

        return type(self)(self.u, near_v), type(self)(far_u, self.v)

    def extend(self, ceiling: float = GROWTH_CEILING) -> Optional[tuple["BoundingBox", "BoundingBox"]]:
        """
        Удваивает коробку по самой узкой оси.

        Коробка растёт в ту сторону от начала координат, в которую она
        сейчас выступает меньше.

        Returns:
            (sibling, parent): sibling - новая соседняя область,
            parent - объединение self и sibling. None, если диагональ
            больше ceiling.
        """
        if self.diagonal() > ceiling:
            return None

        axis = self.narrowest_axis()
        left = self.u[axis]
        right = self.v[axis]
        dif = right - left

        before_origin = min(left, 0.0)
        after_origin = max(right, 0.0)

        sibling_u = self.u.copy()
        sibling_v = self.v.copy()
        if -before_origin < after_origin:
            sibling_u[axis] -= dif
            sibling_v[axis] -= dif
            sibling = type(self)(sibling_u, sibling_v)
            parent = type(self)(sibling_u, self.v)
        else:
            sibling_u[axis] += dif
            sibling_v[axis] += dif
            sibling = type(self)(sibling_u, sibling_v)
            parent = type(self)(self.u, sibling_v)
        return sibling, parent

    def merge(self, other: "BoundingBox") -> "BoundingBox":
        """Merge this AABB with another AABB and return the resulting AABB."""
        return type(self)(numpy.minimum(self.u, other.u), numpy.maximum(self.v, other.v))

    # ----------------------------------------------------------------
    # Предикаты
    # ----------------------------------------------------------------

    def is_contained(self, other: "BoundingBox") -> bool:
        """self целиком лежит внутри other."""
        return bool(numpy.all(other.u <= self.u) and numpy.all(self.v <= other.v))

    def intersects(self, other: "BoundingBox") -> bool:
        """Check if this AABB intersects with another AABB (границы включительно)."""
        return bool(numpy.all(self.v >= other.u) and numpy.all(self.u <= other.v))

    def is_sub_scale(self, other: "BoundingBox") -> bool:
        """Диагональ self не больше диагонали other."""
        return self.diagonal() <= other.diagonal()

    def contains_point(self, point) -> bool:
        point = numpy.asarray(point, dtype=numpy.float64)
        return bool(numpy.all(self.u <= point) and numpy.all(point <= self.v))

    def hit(self, cray) -> "HitBoxResult":
        """Пересечение с ограниченным лучом, см. ray_box.hit_box."""
        return hit_box(self, cray)

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.DIM == other.DIM and numpy.array_equal(self.u, other.u) and numpy.array_equal(self.v, other.v)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(u={self.u.tolist()}, v={self.v.tolist()})"


class BoundingBox2(BoundingBox):
    """Прямоугольник на плоскости."""

    DIM = 2

    __slots__ = ()

    @classmethod
    def default(cls) -> "BoundingBox2":
        return cls((0.0, 0.0), (1.0, 1.0))


class BoundingBox3(BoundingBox):
    """Параллелепипед в пространстве."""

    DIM = 3

    __slots__ = ()

    @classmethod
    def default(cls) -> "BoundingBox3":
        return cls((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))

