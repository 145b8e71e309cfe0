#-*- coding: utf-8 -*-
"""
gpugraph

renders a single variable function on a pannable, zoomable
2d plot. The plot package contains the viewport and the geometry
emitters, the gl package contains the OpenGL backend which
uploads and draws the emitted geometry.
"""
__version__ = '0.1.0'
