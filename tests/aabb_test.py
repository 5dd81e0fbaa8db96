"""
Тесты для AABB.
"""

import unittest
import numpy as np

from boxtree.geombase import BoundingBox, BoundingBox2, BoundingBox3


def assert_box_equal(test: unittest.TestCase, box: BoundingBox, u, v):
    np.testing.assert_array_almost_equal(box.u, np.asarray(u, dtype=np.float64))
    np.testing.assert_array_almost_equal(box.v, np.asarray(v, dtype=np.float64))


class BoundingBoxConstructionTest(unittest.TestCase):
    """Тесты создания коробок."""

    def test_default_is_unit_box(self):
        assert_box_equal(self, BoundingBox2.default(), (0, 0), (1, 1))
        assert_box_equal(self, BoundingBox3.default(), (0, 0, 0), (1, 1, 1))

    def test_inverted_corners_rejected(self):
        with self.assertRaises(ValueError):
            BoundingBox2((1.0, 0.0), (0.0, 1.0))

    def test_wrong_dimension_rejected(self):
        with self.assertRaises(ValueError):
            BoundingBox3((0.0, 0.0), (1.0, 1.0))

    def test_base_class_is_abstract(self):
        with self.assertRaises(TypeError):
            BoundingBox((0.0,), (1.0,))

    def test_of_dim(self):
        self.assertIs(BoundingBox.of_dim(2), BoundingBox2)
        self.assertIs(BoundingBox.of_dim(3), BoundingBox3)
        with self.assertRaises(ValueError):
            BoundingBox.of_dim(4)

    def test_from_points(self):
        points = np.array([[1.0, -2.0, 0.5], [-1.0, 3.0, 0.0], [0.0, 0.0, 2.0]])
        box = BoundingBox3.from_points(points)
        assert_box_equal(self, box, (-1, -2, 0), (1, 3, 2))

    def test_corners_are_copied(self):
        u = np.array([0.0, 0.0])
        box = BoundingBox2(u, (1.0, 1.0))
        u[0] = 5.0
        self.assertEqual(box.u[0], 0.0)

    def test_equality(self):
        self.assertEqual(BoundingBox2((0, 0), (1, 2)), BoundingBox2((0.0, 0.0), (1.0, 2.0)))
        self.assertNotEqual(BoundingBox2((0, 0), (1, 2)), BoundingBox2((0, 0), (2, 1)))


class PartitionTest(unittest.TestCase):
    """Тесты деления коробки."""

    def test_square_splits_along_first_axis(self):
        near, far = BoundingBox2.default().partition()
        assert_box_equal(self, near, (0, 0), (0.5, 1))
        assert_box_equal(self, far, (0.5, 0), (1, 1))

    def test_splits_along_widest_axis(self):
        near, far = BoundingBox2((0, 0), (1, 3)).partition()
        assert_box_equal(self, near, (0, 0), (1, 1.5))
        assert_box_equal(self, far, (0, 1.5), (1, 3))

    def test_splits_3d_along_z(self):
        near, far = BoundingBox3((0, 0, 0), (1, 1, 4)).partition()
        assert_box_equal(self, near, (0, 0, 0), (1, 1, 2))
        assert_box_equal(self, far, (0, 0, 2), (1, 1, 4))

    def test_halves_tile_box(self):
        """Половины стыкуются по одной плоскости и вместе дают исходную коробку."""
        box = BoundingBox3((-3.0, 1.0, 2.0), (5.0, 2.5, 4.0))
        near, far = box.partition()
        axis = box.widest_axis()

        self.assertEqual(near.v[axis], far.u[axis])
        self.assertEqual(near.merge(far), box)
        self.assertTrue(near.is_contained(box))
        self.assertTrue(far.is_contained(box))
        np.testing.assert_array_almost_equal(near.size() + far.size() * (np.arange(3) == axis), box.size())

    def test_point_box_is_not_split(self):
        box = BoundingBox2((2.0, 2.0), (2.0, 2.0))
        self.assertIsNone(box.partition())

    def test_tiny_box_is_not_split(self):
        box = BoundingBox3((0, 0, 0), (1e-9, 1e-9, 1e-9))
        self.assertIsNone(box.partition())

    def test_custom_epsilon(self):
        box = BoundingBox2((0, 0), (0.1, 0.1))
        self.assertIsNone(box.partition(epsilon=1.0))
        self.assertIsNotNone(box.partition(epsilon=0.01))


class ExtendTest(unittest.TestCase):
    """Тесты роста коробки."""

    def test_default_grows_towards_negative(self):
        sibling, parent = BoundingBox2.default().extend()
        assert_box_equal(self, sibling, (-1, 0), (0, 1))
        assert_box_equal(self, parent, (-1, 0), (1, 1))

    def test_grows_along_narrowest_axis(self):
        sibling, parent = BoundingBox2((-1, 0), (1, 1)).extend()
        assert_box_equal(self, sibling, (-1, -1), (1, 0))
        assert_box_equal(self, parent, (-1, -1), (1, 1))

    def test_grows_towards_positive_when_box_is_more_negative(self):
        sibling, parent = BoundingBox2((-1, 0), (0, 2)).extend()
        assert_box_equal(self, sibling, (0, 0), (1, 2))
        assert_box_equal(self, parent, (-1, 0), (1, 2))

    def test_symmetric_box_grows_towards_positive(self):
        sibling, parent = BoundingBox2((-1, -1), (1, 1)).extend()
        assert_box_equal(self, sibling, (1, -1), (3, 1))
        assert_box_equal(self, parent, (-1, -1), (3, 1))

    def test_negative_box(self):
        sibling, parent = BoundingBox2((-5, -5), (-4, -4)).extend()
        assert_box_equal(self, sibling, (-4, -5), (-3, -4))
        assert_box_equal(self, parent, (-5, -5), (-3, -4))

    def test_parent_is_union(self):
        box = BoundingBox3((0.5, -2.0, 1.0), (1.5, 3.0, 4.0))
        sibling, parent = box.extend()
        self.assertEqual(box.merge(sibling), parent)
        self.assertTrue(box.is_contained(parent))
        self.assertAlmostEqual(np.prod(parent.size()), 2.0 * np.prod(box.size()))

    def test_ceiling(self):
        box = BoundingBox2((0, 0), (1e9, 1e9))
        self.assertIsNone(box.extend())
        self.assertIsNone(BoundingBox2((0, 0), (20, 20)).extend(ceiling=10.0))


class PredicateTest(unittest.TestCase):
    """Тесты предикатов."""

    def test_is_contained(self):
        outer = BoundingBox2.default()
        self.assertTrue(BoundingBox2((0.2, 0.2), (0.5, 0.5)).is_contained(outer))
        self.assertTrue(outer.is_contained(outer))
        self.assertFalse(BoundingBox2((0.5, 0.5), (1.5, 0.8)).is_contained(outer))
        self.assertFalse(outer.is_contained(BoundingBox2((0.2, 0.2), (0.5, 0.5))))

    def test_intersects(self):
        a = BoundingBox3.default()
        self.assertTrue(a.intersects(BoundingBox3((0.5, 0.5, 0.5), (2, 2, 2))))
        self.assertTrue(a.intersects(BoundingBox3((1, 0, 0), (2, 1, 1))))  # общая грань
        self.assertFalse(a.intersects(BoundingBox3((1.1, 0, 0), (2, 1, 1))))
        self.assertFalse(a.intersects(BoundingBox3((0, 0, -3), (1, 1, -0.5))))

    def test_point_box_intersects_when_on_border(self):
        point = BoundingBox2((1.0, 0.5), (1.0, 0.5))
        self.assertTrue(point.intersects(BoundingBox2.default()))
        self.assertTrue(BoundingBox2.default().intersects(point))

    def test_is_sub_scale(self):
        unit = BoundingBox2.default()
        self.assertTrue(BoundingBox2((5, 5), (6, 6)).is_sub_scale(unit))
        self.assertTrue(BoundingBox2((0, 0), (0, 0)).is_sub_scale(unit))
        self.assertFalse(BoundingBox2((0, 0), (2, 0.5)).is_sub_scale(unit))

    def test_contains_point(self):
        box = BoundingBox3.default()
        self.assertTrue(box.contains_point((0.5, 1.0, 0.0)))
        self.assertFalse(box.contains_point((0.5, 1.01, 0.0)))


if __name__ == "__main__":
    unittest.main()
