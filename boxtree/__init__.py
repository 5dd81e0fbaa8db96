"""
Boxtree - пространственный индекс для геометрических движков.

Основные модули:
- geombase - AABB, лучи и пересечение луча с AABB
- tree - адаптивное дерево ограничивающих объёмов
- settings - параметры дерева
"""

from .geombase import BoundingBox, BoundingBox2, BoundingBox3, Ray2, Ray3, ConstrainedRay
from .settings import TreeSettings
from .tree import BoundingVolumeTree, Point2, Point3

__version__ = '0.1.0'

__all__ = [
    'BoundingBox',
    'BoundingBox2',
    'BoundingBox3',
    'Ray2',
    'Ray3',
    'ConstrainedRay',
    'TreeSettings',
    'BoundingVolumeTree',
    'Point2',
    'Point3',
]
