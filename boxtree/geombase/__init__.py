"""
Базовые геометрические классы (Geometric Base).

Содержит:
- BoundingBox, BoundingBox2, BoundingBox3 - AABB в 2D и 3D
- Ray, Ray2, Ray3, ConstrainedRay - лучи
- hit_box, HitBoxResult - пересечение луча с AABB
"""

from .errors import GeometryError, GrowthLimitError, RayBoxInvariantError
from .ray_box import HitBoxKind, HitBoxResult, hit_box
from .aabb import (
    BoundingBox,
    BoundingBox2,
    BoundingBox3,
    GROWTH_CEILING,
    PARTITION_EPSILON,
)
from .ray import Ray, Ray2, Ray3, ConstrainedRay

__all__ = [
    'BoundingBox',
    'BoundingBox2',
    'BoundingBox3',
    'GROWTH_CEILING',
    'PARTITION_EPSILON',
    'Ray',
    'Ray2',
    'Ray3',
    'ConstrainedRay',
    'HitBoxKind',
    'HitBoxResult',
    'hit_box',
    'GeometryError',
    'GrowthLimitError',
    'RayBoxInvariantError',
]
