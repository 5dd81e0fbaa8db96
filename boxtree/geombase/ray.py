"""
Лучи в 2D и 3D пространстве.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


class Ray:
    """
    Луч: origin - начало, direction - направление.

    Направление не нормализуется: параметр t измеряется в единицах,
    заданных вызывающим кодом.
    """

    DIM: Optional[int] = None

    __slots__ = ("origin", "direction")

    def __init__(self, origin, direction):
        self.origin = np.asarray(origin, dtype=np.float64)
        self.direction = np.asarray(direction, dtype=np.float64)
        if self.origin.ndim != 1 or self.origin.shape != self.direction.shape:
            raise ValueError(
                f"origin and direction must be vectors of equal length, "
                f"got {self.origin.shape} and {self.direction.shape}"
            )
        if self.DIM is not None and self.origin.shape[0] != self.DIM:
            raise ValueError(f"{type(self).__name__} expects {self.DIM} components, got {self.origin.shape[0]}")

    @property
    def dim(self) -> int:
        return self.origin.shape[0]

    def point_at(self, t: float) -> np.ndarray:
        """
        Возвращает точку на луче при параметре t:
        P(t) = origin + direction * t
        """
        return self.origin + self.direction * float(t)

    def __repr__(self):
        return f"{type(self).__name__}(origin={self.origin}, direction={self.direction})"


class Ray2(Ray):
    """Луч на плоскости."""

    DIM = 2

    __slots__ = ()

    def intersect(self, other: "Ray2") -> Optional[float]:
        """
        Параметр вдоль self, при котором прямые self и other пересекаются.

        None для параллельных лучей.
        """
        d = self.direction
        e = other.direction
        det = d[0] * e[1] - d[1] * e[0]
        if det == 0.0:
            return None

        dif = other.origin - self.origin
        return float((e[1] * dif[0] - e[0] * dif[1]) / det)

    @staticmethod
    def between_points(p1, p2) -> "Ray2":
        """
        Серединный перпендикуляр к отрезку p1-p2.

        Начало в середине отрезка, направление - (p2 - p1), повёрнутое на 90°.
        """
        p1 = np.asarray(p1, dtype=np.float64)
        p2 = np.asarray(p2, dtype=np.float64)
        dif = p2 - p1
        direction = np.array([-dif[1], dif[0]])
        return Ray2((p1 + p2) * 0.5, direction)


class Ray3(Ray):
    """Луч в пространстве."""

    DIM = 3

    __slots__ = ()


class ConstrainedRay:
    """Луч, ограниченный замкнутым диапазоном параметра [t_min, t_max]."""

    __slots__ = ("ray", "t_min", "t_max")

    def __init__(self, ray: Ray, t_min: float = 0.0, t_max: float = math.inf):
        if t_min > t_max:
            raise ValueError(f"t_min must not exceed t_max, got [{t_min}, {t_max}]")
        self.ray = ray
        self.t_min = float(t_min)
        self.t_max = float(t_max)

    @property
    def range(self) -> tuple[float, float]:
        return self.t_min, self.t_max

    def contains(self, t: float) -> bool:
        """Лежит ли параметр t внутри диапазона."""
        return self.t_min <= t <= self.t_max

    def __repr__(self):
        return f"ConstrainedRay(ray={self.ray}, range=[{self.t_min}, {self.t_max}])"
