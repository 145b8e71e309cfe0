#-*- coding: utf-8 -*-
"""
gpugraph.plot

viewport and geometry emitters. Nothing in this package
touches OpenGL, the emitted Drawables are plain numpy data.
"""
from gpugraph.plot.viewport import Viewport
from gpugraph.plot.drawable import Drawable, LINE_LIST, LINE_STRIP
from gpugraph.plot.elements import axis_drawable, grid_drawable, function_drawable
from gpugraph.plot.function import FunctionEvaluator

__all__ = ['Viewport', 'Drawable', 'LINE_LIST', 'LINE_STRIP',
           'axis_drawable', 'grid_drawable', 'function_drawable', 'FunctionEvaluator']
