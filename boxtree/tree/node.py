"""TreeNode - node of the bounding-volume tree."""

from __future__ import annotations

from typing import Generic, TypeVar

from boxtree.geombase import BoundingBox

B = TypeVar("B", bound=BoundingBox)
C = TypeVar("C")


class TreeNode(Generic[B, C]):
    """
    Node of the bounding-volume tree.

    Either a leaf (no children, arbitrary content) or an internal node
    (no content, exactly two children produced by partitioning enclosure).
    """

    __slots__ = ("enclosure", "content", "children")

    def __init__(self, enclosure: B):
        self.enclosure: B = enclosure
        self.content: list[C] = []
        self.children: list[TreeNode[B, C]] = []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self):
        return f"TreeNode(enclosure={self.enclosure}, content={len(self.content)}, children={len(self.children)})"
