"""
Адаптивное дерево ограничивающих объёмов.

Содержит:
- BoundingVolumeTree - дерево с ростом корня и ленивым делением листьев
- TreeNode - узел дерева
- TreeContent, Point2, Point3 - содержимое дерева
"""

from .content import TreeContent, Point2, Point3
from .node import TreeNode
from .bv_tree import BoundingVolumeTree, HitFunction

__all__ = [
    'BoundingVolumeTree',
    'HitFunction',
    'TreeNode',
    'TreeContent',
    'Point2',
    'Point3',
]
