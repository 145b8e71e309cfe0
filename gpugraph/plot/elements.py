#-*- coding: utf-8 -*-
"""
geometry emitters

each emitter reads a viewport and returns a fresh Drawable
in normalized device coordinates:

- axis_drawable: the world axes x=0 and y=0 (LINE_LIST)
- grid_drawable: one line per grid step on both axes (LINE_LIST)
- function_drawable: sampled polyline of f(x) (LINE_STRIP)

emitters keep no state between calls, so the same viewport
always yields the same vertices.
"""
import math
import numbers

import numpy as np

from gpugraph.config import GRID_STEP
from gpugraph.plot.drawable import Drawable, LINE_LIST, LINE_STRIP, VERTEX_DTYPE

__all__ = ['axis_drawable', 'grid_drawable', 'function_drawable',
           'grid_coordinates', 'sample_coordinates']


def _in_ndc(value):
    return -1.0 <= value <= 1.0


def axis_drawable(viewport):
    """
    creates the axis lines. the horizontal line (y=0) comes
    first, then the vertical one (x=0). an axis outside of the
    viewport is omitted, so the drawable holds 0, 2 or 4 vertices.
    """
    vertices = []

    ny = viewport.normalize_y(0.0)
    if _in_ndc(ny):
        vertices.extend((-1.0, ny, 1.0, ny))

    nx = viewport.normalize_x(0.0)
    if _in_ndc(nx):
        vertices.extend((nx, -1.0, nx, 1.0))

    return Drawable(vertices, LINE_LIST)


def grid_coordinates(lo, hi, step=GRID_STEP):
    """
    returns all multiples of **step** within [lo, hi] (inclusive).

    the multiples are generated from integer indices, so
    boundary values which coincide with lo or hi are part of
    the result and no value outside [lo, hi] can sneak in.
    """
    if not step > 0:
        raise ValueError('grid step must be positive, got {}'.format(step))

    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    if last < first:
        return np.empty(0, dtype=np.float64)

    coords = np.arange(first, last + 1, dtype=np.float64) * step
    return coords[(coords >= lo) & (coords <= hi)]


def grid_drawable(viewport, step=GRID_STEP):
    """
    creates horizontal grid lines for every multiple of **step**
    in [min_y, max_y] followed by vertical lines for every
    multiple in [min_x, max_x]. every line spans the whole
    ndc range in the other dimension.
    """
    ys = viewport.normalize_y(grid_coordinates(viewport.min_y, viewport.max_y, step))
    xs = viewport.normalize_x(grid_coordinates(viewport.min_x, viewport.max_x, step))

    horizontal = np.empty((len(ys), 4), dtype=VERTEX_DTYPE)
    horizontal[:, 0] = -1.0
    horizontal[:, 1] = ys
    horizontal[:, 2] = 1.0
    horizontal[:, 3] = ys

    vertical = np.empty((len(xs), 4), dtype=VERTEX_DTYPE)
    vertical[:, 0] = xs
    vertical[:, 1] = -1.0
    vertical[:, 2] = xs
    vertical[:, 3] = 1.0

    return Drawable(np.concatenate((horizontal.reshape(-1), vertical.reshape(-1))), LINE_LIST)


def sample_coordinates(lo, hi, subdivisions):
    """
    returns the world x values of a curve sampled with
    **subdivisions** samples per world unit.

    x_i = lo + i / subdivisions, the last sample is pinned to
    **hi** so both ends of [lo, hi] are always covered.
    """
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, numbers.Integral):
        raise ValueError('subdivisions must be an integer, got {!r}'.format(subdivisions))
    if subdivisions < 1:
        raise ValueError('subdivisions must be positive, got {}'.format(subdivisions))

    step = 1.0 / subdivisions

    # the small tolerance keeps a width which is an exact multiple
    # of step from producing an extra sample due to rounding.
    span = (hi - lo) * subdivisions
    count = max(1, int(math.ceil(span - 1e-9 * max(1.0, span))))

    xs = lo + np.arange(count + 1, dtype=np.float64) * step
    xs[-1] = hi
    return xs


def function_drawable(func, viewport, subdivisions):
    """
    samples **func** over [min_x, max_x] and returns the
    connected polyline through all samples.

    :param func: callable float -> float, evaluated once over all
                 samples if it provides evaluate_many(xs)
    :param viewport: the current viewport
    :param subdivisions: samples per world unit (positive int)

    samples where func yields nan or inf are emitted as they are,
    the curve is never split.
    """
    xs = sample_coordinates(viewport.min_x, viewport.max_x, subdivisions)
    if hasattr(func, 'evaluate_many'):
        ys = func.evaluate_many(xs)
    else:
        ys = np.fromiter((func(x) for x in xs), dtype=np.float64, count=len(xs))

    with np.errstate(invalid='ignore', over='ignore'):
        vertices = np.empty((len(xs), 2), dtype=VERTEX_DTYPE)
        vertices[:, 0] = viewport.normalize_x(xs)
        vertices[:, 1] = viewport.normalize_y(ys)

    return Drawable(vertices, LINE_STRIP)
