#-*- coding: utf-8 -*-
"""
graph application

ties viewport, keyboard controls, emitters and the gl backend
together. One frame is:

1. measure the elapsed time
2. apply held keys to the viewport (pan/zoom)
3. emit grid, axis and function from the mutated viewport
4. draw grid, axis, function and swap buffers

the viewport is owned by the application and passed into
every call, there is no global camera.
"""
import logging

import numpy as np

from gpugraph.config import (
    DEFAULT_SUBDIVISIONS, GRID_COLOR, AXIS_COLOR, FUNCTION_COLOR, CLEAR_COLOR)
from gpugraph.plot.viewport import Viewport
from gpugraph.plot.control import FrameClock
from gpugraph.plot.elements import axis_drawable, grid_drawable, function_drawable

logger = logging.getLogger(__name__)

__all__ = ['GraphApplication']


class GraphApplication():
    def __init__(self, evaluator, viewport=None, subdivisions=DEFAULT_SUBDIVISIONS,
                 handler=None):
        """
        :param evaluator: callable float -> float
        :param viewport: initial viewport, default rectangle if None
        :param subdivisions: samples per world unit of the curve
        :param handler: input handler(viewport, keys, delta_time)
        """
        if subdivisions < 1:
            raise ValueError('subdivisions must be positive, got {}'.format(subdivisions))

        self.evaluator = evaluator
        self.viewport = viewport if viewport is not None else Viewport()
        self.subdivisions = int(subdivisions)
        self.handler = handler

    def frame(self, keys, delta_time):
        """
        handles the input of one frame and returns the layers to
        draw as [(color, Drawable), ...] in back to front order.
        """
        if self.handler is not None and keys:
            self.handler(self.viewport, keys, delta_time)

        return [
            (GRID_COLOR,     grid_drawable(self.viewport)),
            (AXIS_COLOR,     axis_drawable(self.viewport)),
            (FUNCTION_COLOR, function_drawable(self.evaluator, self.viewport, self.subdivisions)),
        ]

    def run(self, window, renderer, clock=None):
        """
        runs the frame loop until the window is closed.

        :param window: GlfwWindow
        :param renderer: DrawableRenderer with a linked program
        :param clock: FrameClock, by default driven by the window time
        """
        from OpenGL.GL import glClear, glClearColor, GL_COLOR_BUFFER_BIT

        clock = clock or FrameClock(window.time)
        identity = np.identity(4, dtype=np.float32)
        renderer.program.uniform('u_projection', identity)
        renderer.program.uniform('u_view', identity)
        glClearColor(*CLEAR_COLOR)

        logger.info('plotting "%s" on %r', getattr(self.evaluator, 'expression', self.evaluator), self.viewport)
        frames = 0
        while not window.should_close():
            layers = self.frame(window.active_keys, clock.tick())

            glClear(GL_COLOR_BUFFER_BIT)
            for color, drawable in layers:
                renderer.draw(drawable, color=color)

            window.swap()
            frames += 1

        logger.info('window closed after %s frames', frames)
        return frames
