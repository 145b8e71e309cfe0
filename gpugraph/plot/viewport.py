#-*- coding: utf-8 -*-
"""
viewport (2d camera)

A viewport owns the visible world rectangle

    [min_x, max_x] x [min_y, max_y]

and maps world coordinates into normalized device
coordinates [-1, 1].

.. code ::

   viewport = Viewport()
   viewport.pan(1, 0)
   viewport.zoom(0.5)
   nx, ny = viewport.normalize(3.0, 4.0)

The rectangle never collapses or inverts: min < max holds on
both axes at all times. Mutations which would break this are
rejected in place and the methods return False. Nothing is
raised from pan() or zoom() since both are called once per
frame from the input handler.
"""
import logging
import math

from gpugraph.config import DEFAULT_VIEWPORT, MIN_ZOOM_FACTOR, MIN_EXTENT

logger = logging.getLogger(__name__)

__all__ = ['Viewport', 'to_ndc']


def to_ndc(value, lo, hi):
    """ maps **value** from [lo, hi] to [-1, 1] """
    return (value - lo) / (hi - lo) * 2.0 - 1.0


class Viewport():
    """
    visible world rectangle of the plot.

    The viewport is owned by the frame loop and handed to
    every emitter by reference. It is not thread safe: a host
    with several threads must serialize access.
    """
    def __init__(self, min_x=DEFAULT_VIEWPORT[0], max_x=DEFAULT_VIEWPORT[1],
                       min_y=DEFAULT_VIEWPORT[2], max_y=DEFAULT_VIEWPORT[3]):
        """
        :param min_x: left world border
        :param max_x: right world border
        :param min_y: bottom world border
        :param max_y: top world border

        raises ValueError if the rectangle is empty, inverted or not finite.
        """
        bounds = tuple(float(v) for v in (min_x, max_x, min_y, max_y))
        if not all(math.isfinite(v) for v in bounds):
            raise ValueError('viewport bounds must be finite, got {}'.format(bounds))
        if not (bounds[0] < bounds[1] and bounds[2] < bounds[3]):
            raise ValueError('viewport requires min < max on both axes, got {}'.format(bounds))

        self._min_x, self._max_x, self._min_y, self._max_y = bounds

    @classmethod
    def from_bounds(cls, bounds):
        """ creates a viewport from a (min_x, max_x, min_y, max_y) sequence """
        return cls(*bounds)

    # -- accessors --

    @property
    def min_x(self):
        return self._min_x

    @property
    def max_x(self):
        return self._max_x

    @property
    def min_y(self):
        return self._min_y

    @property
    def max_y(self):
        return self._max_y

    @property
    def width(self):
        return self._max_x - self._min_x

    @property
    def height(self):
        return self._max_y - self._min_y

    @property
    def center(self):
        return ((self._min_x + self._max_x) / 2.0,
                (self._min_y + self._max_y) / 2.0)

    @property
    def bounds(self):
        return (self._min_x, self._max_x, self._min_y, self._max_y)

    # -- mapping --

    def normalize_x(self, x):
        """ maps world x into [-1, 1] """
        return to_ndc(x, self._min_x, self._max_x)

    def normalize_y(self, y):
        """ maps world y into [-1, 1] """
        return to_ndc(y, self._min_y, self._max_y)

    def normalize(self, x, y):
        return self.normalize_x(x), self.normalize_y(y)

    # -- mutations --

    def pan(self, dx, dy):
        """ translates the rectangle by (dx, dy). width and height
            are kept. returns False if the translation was rejected. """
        dx, dy = float(dx), float(dy)
        bounds = (self._min_x + dx, self._max_x + dx,
                  self._min_y + dy, self._max_y + dy)

        if not self._accept(bounds):
            logger.debug('rejected pan(%r, %r) on %r', dx, dy, self)
            return False

        self._min_x, self._max_x, self._min_y, self._max_y = bounds
        return True

    def zoom(self, factor):
        """ scales width and height by **factor** around the current
            center. factor < 1 zooms in, factor > 1 zooms out.

            factors which are not finite, not larger than
            MIN_ZOOM_FACTOR or which would shrink an extent
            below MIN_EXTENT are rejected and False is returned. """
        factor = float(factor)
        if not math.isfinite(factor) or factor <= MIN_ZOOM_FACTOR:
            logger.debug('rejected zoom factor %r', factor)
            return False

        if factor == 1.0:
            return True

        center_x, center_y = self.center
        half_width = self.width * factor / 2.0
        half_height = self.height * factor / 2.0
        bounds = (center_x - half_width, center_x + half_width,
                  center_y - half_height, center_y + half_height)

        if factor < 1.0 and min(half_width, half_height) * 2.0 < MIN_EXTENT:
            logger.debug('rejected zoom(%r): extent below %r', factor, MIN_EXTENT)
            return False

        if not self._accept(bounds):
            logger.debug('rejected zoom(%r) on %r', factor, self)
            return False

        self._min_x, self._max_x, self._min_y, self._max_y = bounds
        return True

    @staticmethod
    def _accept(bounds):
        min_x, max_x, min_y, max_y = bounds
        if not all(math.isfinite(v) for v in bounds):
            return False
        return min_x < max_x and min_y < max_y

    # -- misc --

    def copy(self):
        return Viewport(*self.bounds)

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return self.bounds == other.bounds

    def __repr__(self):
        return 'Viewport([{}, {}] x [{}, {}])'.format(*self.bounds)
