#-*- coding: utf-8 -*-
"""
defaults and resource paths.

the viewport and emitter defaults are used by the plot package,
window, gl version and colors only by the application.
"""
import os

BASE = os.path.dirname(os.path.abspath(__file__))

# world rectangle (min_x, max_x, min_y, max_y)
DEFAULT_VIEWPORT = (-10.0, 10.0, -10.0, 10.0)

# samples per world unit
DEFAULT_SUBDIVISIONS = 100

# world units between two grid lines
GRID_STEP = 1.0

# fraction of the visible width panned per second
PAN_SPEED = 0.5

# zoom base: holding a zoom key scales by ZOOM_RATE ** dt per frame
ZOOM_RATE = 2.5

# zoom factors at or below this value are rejected
MIN_ZOOM_FACTOR = 1e-6

# smallest width/height a zoom may produce
MIN_EXTENT = 1e-9

WINDOW_SIZE = (640, 480)
WINDOW_TITLE = 'gpugraph'
GL_VERSION = (4, 1)

GRID_COLOR = (0.5, 0.5, 0.5, 1.0)
AXIS_COLOR = (1.0, 1.0, 1.0, 1.0)
FUNCTION_COLOR = (1.0, 0.5, 0.5, 1.0)
CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)

def resource_path(*path):
    return os.path.join(BASE, 'resources', *path)

def load_resource(relative_path):
    with open(resource_path(*relative_path.split('/')), 'r') as content_file:
        content = content_file.read()

    return content
