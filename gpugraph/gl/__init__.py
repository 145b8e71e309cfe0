#-*- coding: utf-8 -*-
"""
gpugraph.gl

OpenGL backend: shader programs, the Drawable renderer
and the glfw window.
"""
