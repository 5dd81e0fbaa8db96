"""
BoundingVolumeTree - адаптивное дерево ограничивающих объёмов.

Дерево отвечает на два запроса над динамическим набором объектов с AABB:
- get_intersection: какие объекты пересекают заданную область;
- get_closest_hit: какой объект луч встречает первым.

Корень растёт при вставке объекта за его пределами, листья делятся
лениво: только при вставке, только после порога заполнения и только если
новый объект не крупнее листа.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Type, TypeVar

from boxtree import log
from boxtree.geombase import (
    BoundingBox,
    BoundingBox3,
    ConstrainedRay,
    GrowthLimitError,
    HitBoxKind,
)
from boxtree.settings import TreeSettings
from boxtree.tree.node import TreeNode

B = TypeVar("B", bound=BoundingBox)
C = TypeVar("C")

HitFunction = Callable[[C, ConstrainedRay], Optional[float]]


class _ClosestHit(Generic[C]):
    """Текущий лучший результат обхода в get_closest_hit."""

    __slots__ = ("distance", "content")

    def __init__(self, distance: float):
        self.distance = distance
        self.content: Optional[C] = None


class BoundingVolumeTree(Generic[B, C]):
    """
    Адаптивное дерево AABB.

    Attributes:
        box_type: Класс коробки (BoundingBox2 или BoundingBox3).
        settings: Параметры деления и роста.
        size: Количество выполненных вставок.

    Не потокобезопасно: вставка меняет узлы, запросы их только читают.
    """

    def __init__(self, box_type: Type[B] = BoundingBox3, settings: Optional[TreeSettings] = None):
        self.box_type = box_type
        self.settings = settings if settings is not None else TreeSettings()
        self._root: Optional[TreeNode[B, C]] = None
        self._size = 0

    @property
    def root(self) -> TreeNode[B, C]:
        """Корень дерева. Создаётся с коробкой по умолчанию при первом обращении."""
        if self._root is None:
            self._root = TreeNode(self.box_type.default())
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    # ----------------------------------------------------------------
    # Вставка
    # ----------------------------------------------------------------

    def add(self, content: C) -> None:
        """
        Добавить объект в дерево.

        Raises:
            GrowthLimitError: корень достиг предельного размера, а AABB
                объекта всё ещё не помещается в него.
        """
        enclosure = content.get_bounding_box()
        self._grow_root(enclosure)
        self._add_to_node(self.root, content, enclosure)
        self._size += 1

    def _grow_root(self, enclosure: B) -> None:
        while not enclosure.is_contained(self.root.enclosure):
            extended = self.root.enclosure.extend(self.settings.growth_ceiling)
            if extended is None:
                log.error(
                    f"[BoundingVolumeTree] Cannot grow root {self.root.enclosure} to contain {enclosure}"
                )
                raise GrowthLimitError(
                    f"Root {self.root.enclosure} exceeds growth ceiling {self.settings.growth_ceiling}"
                )

            sibling_box, parent_box = extended
            new_root: TreeNode[B, C] = TreeNode(parent_box)
            new_root.children.append(TreeNode(sibling_box))
            new_root.children.append(self.root)
            self._root = new_root
            log.debug(f"[BoundingVolumeTree] Root grown to {parent_box}")

    def _add_to_node(self, node: TreeNode[B, C], content: C, enclosure: B) -> None:
        if (
            node.is_leaf
            and len(node.content) > self.settings.split_threshold
            and enclosure.is_sub_scale(node.enclosure)
        ):
            self._split(node)

        if node.is_leaf:
            node.content.append(content)
            return

        for child in node.children:
            if enclosure.intersects(child.enclosure):
                self._add_to_node(child, content, enclosure)

    def _split(self, node: TreeNode[B, C]) -> None:
        halves = node.enclosure.partition(self.settings.partition_epsilon)
        if halves is None:
            return

        children = [TreeNode(box) for box in halves]
        for item in node.content:
            item_box = item.get_bounding_box()
            for child in children:
                if item_box.intersects(child.enclosure):
                    child.content.append(item)

        node.content.clear()
        node.children.extend(children)
        log.debug(f"[BoundingVolumeTree] Split {node.enclosure}")

    # ----------------------------------------------------------------
    # Запросы
    # ----------------------------------------------------------------

    def get_intersection(self, filter_box: B) -> set[C]:
        """Все объекты, чьи AABB пересекают filter_box (без повторов)."""
        result: set[C] = set()
        self._collect_intersection(self.root, filter_box, result)
        return result

    def _collect_intersection(self, node: TreeNode[B, C], filter_box: B, result: set[C]) -> None:
        if not node.enclosure.intersects(filter_box):
            return

        for item in node.content:
            if item.get_bounding_box().intersects(filter_box):
                result.add(item)

        for child in node.children:
            self._collect_intersection(child, filter_box, result)

    def get_closest_hit(self, hit_fn: HitFunction, cray: ConstrainedRay) -> Optional[C]:
        """
        Ближайший объект на луче.

        Args:
            hit_fn: hit_fn(content, cray) -> расстояние попадания или None.
            cray: Луч с диапазоном [t_min, t_max]; попадания дальше t_max
                не учитываются.

        Returns:
            Объект с минимальным расстоянием попадания или None.
        """
        best: _ClosestHit[C] = _ClosestHit(cray.t_max)
        self._closest_hit_in_node(self.root, hit_fn, cray, best)
        return best.content

    def _closest_hit_in_node(
        self,
        node: TreeNode[B, C],
        hit_fn: HitFunction,
        cray: ConstrainedRay,
        best: _ClosestHit[C],
    ) -> None:
        for item in node.content:
            distance = hit_fn(item, cray)
            if distance is not None and distance < best.distance:
                best.distance = distance
                best.content = item

        for child in node.children:
            hit = child.enclosure.hit(cray)
            if hit.kind is HitBoxKind.MISS:
                continue
            if hit.kind is HitBoxKind.OUTSIDE and hit.near > best.distance:
                continue
            self._closest_hit_in_node(child, hit_fn, cray, best)

    # ----------------------------------------------------------------
    # Диагностика
    # ----------------------------------------------------------------

    def depth(self) -> int:
        """Число уровней дерева (один корень - 1)."""
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def nodes(self) -> Iterator[TreeNode[B, C]]:
        """Обход всех узлов в глубину, дети в порядке хранения."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    def leaves(self) -> Iterator[TreeNode[B, C]]:
        return (node for node in self.nodes() if node.is_leaf)

    def __repr__(self):
        return f"BoundingVolumeTree(box_type={self.box_type.__name__}, size={self._size}, root={self.root.enclosure})"
