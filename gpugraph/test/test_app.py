#-*- coding: utf-8 -*-

import logging
import unittest
from unittest import mock

from gpugraph.__main__ import main, create_parser
from gpugraph.app import GraphApplication
from gpugraph.config import GRID_COLOR, AXIS_COLOR, FUNCTION_COLOR, DEFAULT_SUBDIVISIONS
from gpugraph.plot.control import keyboard_panzoom
from gpugraph.plot.drawable import LINE_LIST, LINE_STRIP
from gpugraph.plot.elements import axis_drawable, grid_drawable, function_drawable
from gpugraph.plot.function import FunctionEvaluator
from gpugraph.plot.viewport import Viewport


class TestGraphApplication(unittest.TestCase):
    def setUp(self):
        self.handler = keyboard_panzoom('l', 'r', 'u', 'd', '+', '-', pan_speed=0.5, zoom_rate=2.0)
        self.application = GraphApplication(FunctionEvaluator('x'), Viewport(), 4, handler=self.handler)

    def test_layers(self):
        layers = self.application.frame(set(), 0.1)

        self.assertListEqual([GRID_COLOR, AXIS_COLOR, FUNCTION_COLOR], [c for c, d in layers])
        self.assertListEqual([LINE_LIST, LINE_LIST, LINE_STRIP], [d.primitive for c, d in layers])

    def test_emits_from_mutated_viewport(self):
        layers = self.application.frame({'r'}, 1.0)

        vp = Viewport(0, 20, -10, 10)
        self.assertEqual(vp, self.application.viewport)
        self.assertEqual(grid_drawable(vp), layers[0][1])
        self.assertEqual(axis_drawable(vp), layers[1][1])
        self.assertEqual(function_drawable(FunctionEvaluator('x'), vp, 4), layers[2][1])

    def test_viewport_outlives_frames(self):
        self.application.frame({'+'}, 1.0)
        self.application.frame({'+'}, 1.0)
        self.assertEqual(Viewport(-2.5, 2.5, -2.5, 2.5), self.application.viewport)

    def test_same_state_same_frame(self):
        a = self.application.frame(set(), 0.1)
        b = self.application.frame(set(), 0.3)
        for (_, da), (_, db) in zip(a, b):
            self.assertEqual(da, db)

    def test_without_handler(self):
        application = GraphApplication(FunctionEvaluator('x'))
        application.frame({'r'}, 1.0)
        self.assertEqual(Viewport(), application.viewport)
        self.assertEqual(DEFAULT_SUBDIVISIONS, application.subdivisions)

    def test_invalid_subdivisions(self):
        with self.assertRaises(ValueError):
            GraphApplication(FunctionEvaluator('x'), subdivisions=0)


class TestMain(unittest.TestCase):
    def tearDown(self):
        logging.getLogger('gpugraph').handlers.clear()

    def test_parser_defaults(self):
        args = create_parser().parse_args(['sin(x)'])
        self.assertEqual('sin(x)', args.function)
        self.assertEqual(DEFAULT_SUBDIVISIONS, args.subdivisions)

    def test_invalid_expression_exits_before_window(self):
        with mock.patch('gpugraph.app.GraphApplication.run') as run:
            self.assertEqual(1, main(['x +', '--log-level', 'ERROR']))
        run.assert_not_called()

    def test_invalid_subdivisions(self):
        with self.assertRaises(SystemExit):
            main(['x', '--subdivisions', '0', '--log-level', 'ERROR'])

    def test_invalid_viewport(self):
        with self.assertRaises(SystemExit):
            main(['x', '--viewport', '1', '1', '0', '1', '--log-level', 'ERROR'])
