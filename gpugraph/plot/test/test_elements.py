#-*- coding: utf-8 -*-

import unittest
from unittest_data_provider import data_provider

import numpy as np

from gpugraph.plot.drawable import LINE_LIST, LINE_STRIP
from gpugraph.plot.elements import (
    axis_drawable, grid_drawable, function_drawable, grid_coordinates, sample_coordinates)
from gpugraph.plot.viewport import Viewport


class TestAxisDrawable(unittest.TestCase):
    def test_both_axes_visible(self):
        d = axis_drawable(Viewport(-10, 10, -10, 10))

        self.assertEqual(LINE_LIST, d.primitive)
        self.assertEqual(4, d.vertex_count)
        self.assertListEqual([-1, 0, 1, 0, 0, -1, 0, 1], d.vertices.tolist())

    def test_vertical_axis_off_screen(self):
        d = axis_drawable(Viewport(5, 15, -10, 10))

        self.assertEqual(4, len(d.vertices))
        self.assertEqual(2, d.vertex_count)
        self.assertListEqual([-1, 0, 1, 0], d.vertices.tolist())

    def test_horizontal_axis_off_screen(self):
        d = axis_drawable(Viewport(-10, 10, 1, 3))

        self.assertEqual(2, d.vertex_count)
        self.assertListEqual([0, -1, 0, 1], d.vertices.tolist())

    def test_no_axis_visible(self):
        d = axis_drawable(Viewport(5, 15, 5, 15))

        self.assertTrue(d.is_empty())
        self.assertEqual(0, d.vertex_count)
        self.assertEqual(LINE_LIST, d.primitive)

    def test_axis_on_border(self):
        d = axis_drawable(Viewport(0, 10, -10, 0))

        self.assertListEqual([-1, 1, 1, 1, -1, -1, -1, 1], d.vertices.tolist())

    def test_axis_follows_pan(self):
        vp = Viewport(-10, 10, -10, 10)
        vp.pan(5, 0)
        d = axis_drawable(vp)

        self.assertListEqual([-0.5, -1, -0.5, 1], d.vertices[4:].tolist())


class TestGridDrawable(unittest.TestCase):
    def test_grid_lines(self):
        vp = Viewport(-2.5, 2.5, -1, 1)
        d = grid_drawable(vp)
        lines = d.vertices.reshape((-1, 4))

        self.assertEqual(LINE_LIST, d.primitive)
        self.assertEqual(8, len(lines))
        self.assertEqual(16, d.vertex_count)

        # 3 horizontal lines followed by 5 vertical lines
        horizontal, vertical = lines[:3], lines[3:]
        np.testing.assert_array_equal(horizontal[:, 0], -1)
        np.testing.assert_array_equal(horizontal[:, 2], 1)
        np.testing.assert_array_equal(horizontal[:, 1], horizontal[:, 3])
        np.testing.assert_array_equal(vertical[:, 1], -1)
        np.testing.assert_array_equal(vertical[:, 3], 1)
        np.testing.assert_array_equal(vertical[:, 0], vertical[:, 2])

        np.testing.assert_allclose(horizontal[:, 1], vp.normalize_y(np.array([-1, 0, 1])))
        np.testing.assert_allclose(vertical[:, 0], vp.normalize_x(np.array([-2, -1, 0, 1, 2])))

    coordinates_data = lambda: (
        (-2.5, 2.5, [-2, -1, 0, 1, 2]),
        (-1, 1, [-1, 0, 1]),
        (0.2, 0.8, []),
        (0.1, 1.0, [1]),
        (-3, -0.5, [-3, -2, -1]),
        (9.999999, 12.000001, [10, 11, 12]),
    )

    @data_provider(coordinates_data)
    def test_grid_coordinates(self, lo, hi, expected):
        self.assertListEqual(expected, grid_coordinates(lo, hi).tolist())

    def test_grid_never_leaves_range(self):
        for lo in np.linspace(-7.3, 3.1, 37):
            coords = grid_coordinates(lo, lo + 4.7)
            self.assertTrue(np.all(coords >= lo))
            self.assertTrue(np.all(coords <= lo + 4.7))

    def test_grid_step(self):
        self.assertListEqual([-0.5, 0.0, 0.5], grid_coordinates(-0.7, 0.7, 0.5).tolist())
        with self.assertRaises(ValueError):
            grid_coordinates(0, 1, 0)

    def test_empty_grid(self):
        d = grid_drawable(Viewport(0.2, 0.8, 0.2, 0.8))
        self.assertTrue(d.is_empty())


class TestFunctionDrawable(unittest.TestCase):
    def test_identity(self):
        vp = Viewport(-1, 1, -1, 1)
        d = function_drawable(lambda x: x, vp, 2)

        self.assertEqual(LINE_STRIP, d.primitive)
        self.assertEqual(5, d.vertex_count)
        self.assertListEqual([[-1, -1], [-0.5, -0.5], [0, 0], [0.5, 0.5], [1, 1]],
                             d.points.tolist())

    def test_samples_cover_both_ends(self):
        xs = sample_coordinates(-1.3, 2.05, 10)

        self.assertEqual(-1.3, xs[0])
        self.assertEqual(2.05, xs[-1])
        self.assertTrue(np.all(np.diff(xs) > 0))
        self.assertTrue(np.all(np.diff(xs) <= 0.1 + 1e-12))

    sample_count_data = lambda: (
        (-10, 10, 100, 2001),
        (-1, 1, 2, 5),
        (0, 1, 1, 2),
        (0, 0.25, 1, 2),
        (-0.3, 0.7, 10, 11),
        (0.1, 0.7, 10, 7),
    )

    @data_provider(sample_count_data)
    def test_sample_count(self, lo, hi, subdivisions, count):
        self.assertEqual(count, len(sample_coordinates(lo, hi, subdivisions)))

    invalid_subdivisions = lambda: (
        (0,),
        (-3,),
        (1.5,),
        (True,),
        ('10',),
    )

    @data_provider(invalid_subdivisions)
    def test_invalid_subdivisions(self, subdivisions):
        with self.assertRaises(ValueError):
            function_drawable(lambda x: x, Viewport(), subdivisions)

    def test_numpy_integer_subdivisions(self):
        d = function_drawable(lambda x: x, Viewport(-1, 1, -1, 1), np.int64(2))
        self.assertEqual(5, d.vertex_count)

    def test_nan_and_inf_are_kept(self):
        vp = Viewport(-1, 1, -1, 1)
        d = function_drawable(lambda x: 1.0 / x if x != 0 else float('inf'), vp, 1)
        ys = d.points[:, 1]

        self.assertEqual(3, d.vertex_count)
        self.assertTrue(np.isinf(ys[1]))

        d = function_drawable(lambda x: float('nan'), vp, 4)
        self.assertEqual(9, d.vertex_count)
        self.assertTrue(np.all(np.isnan(d.points[:, 1])))
        np.testing.assert_allclose(d.points[:, 0], np.linspace(-1, 1, 9))

    def test_follows_viewport(self):
        vp = Viewport(0, 2, 0, 4)
        d = function_drawable(lambda x: x * x, vp, 1)

        self.assertListEqual([[-1, -1], [0, -0.5], [1, 1]], d.points.tolist())

    def test_evaluated_in_order(self):
        seen = []

        def f(x):
            seen.append(x)
            return 0.0

        function_drawable(f, Viewport(0, 1, -1, 1), 4)
        self.assertListEqual([0, 0.25, 0.5, 0.75, 1], seen)


class TestDeterminism(unittest.TestCase):
    def test_same_viewport_same_output(self):
        vp = Viewport(-3.3, 4.1, -2.2, 7.9)
        f = lambda x: np.sin(x) * x

        for emit in (axis_drawable, grid_drawable, lambda v: function_drawable(f, v, 37)):
            a = emit(vp)
            b = emit(vp)
            self.assertEqual(a, b)
            self.assertEqual(a.vertices.tobytes(), b.vertices.tobytes())
