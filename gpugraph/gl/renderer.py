#-*- coding: utf-8 -*-
"""
OpenGL backend for Drawables.

every frame the emitters create new Drawables. The renderer
uploads each one into a vertex array + vertex buffer, draws it
and deletes both gl objects again before the frame ends:

.. code ::

   renderer = DrawableRenderer(program)
   renderer.draw(grid, color=GRID_COLOR)

   with renderer.upload(curve) as handle:
       handle.draw()

a Drawable without vertices does not create any gl object.
"""
import logging
from contextlib import contextmanager
from ctypes import c_void_p

import numpy as np
from OpenGL.GL import (
    GL_ARRAY_BUFFER, GL_STATIC_DRAW, GL_FLOAT, GL_FALSE, GL_LINES, GL_LINE_STRIP,
    glGenVertexArrays, glBindVertexArray, glDeleteVertexArrays,
    glGenBuffers, glBindBuffer, glBufferData, glDeleteBuffers,
    glVertexAttribPointer, glEnableVertexAttribArray, glDrawArrays)

from gpugraph.plot.drawable import LINE_LIST, LINE_STRIP, VERTEX_DTYPE

logger = logging.getLogger(__name__)

__all__ = ['DrawableRenderer', 'GlDrawable', 'GL_MODES']

GL_MODES = {
    LINE_LIST: GL_LINES,
    LINE_STRIP: GL_LINE_STRIP,
}

# attribute location of the vec2 vertex within line.vert.glsl
VERTEX_LOCATION = 0


class GlDrawable():
    """
    gl objects of one uploaded Drawable. Only valid within
    DrawableRenderer.upload().
    """
    def __init__(self, vao, vbo, gl_mode, vertex_count):
        self.vao = vao
        self.vbo = vbo
        self.gl_mode = gl_mode
        self.vertex_count = vertex_count

    @classmethod
    def to_device(cls, drawable):
        data = np.ascontiguousarray(drawable.vertices, dtype=VERTEX_DTYPE)

        vao = glGenVertexArrays(1)
        glBindVertexArray(vao)

        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, data.nbytes, data, GL_STATIC_DRAW)
        glVertexAttribPointer(VERTEX_LOCATION, 2, GL_FLOAT, GL_FALSE, 2 * data.itemsize, c_void_p(0))
        glEnableVertexAttribArray(VERTEX_LOCATION)

        glBindBuffer(GL_ARRAY_BUFFER, 0)
        glBindVertexArray(0)

        return cls(vao, vbo, GL_MODES[drawable.primitive], drawable.vertex_count)

    def draw(self):
        """
        draws the vertex array object
        """
        if self.vao is None:
            raise RuntimeError('gl objects were already deleted')

        glBindVertexArray(self.vao)
        glDrawArrays(self.gl_mode, 0, self.vertex_count)
        glBindVertexArray(0)

    def delete(self):
        if self.vbo is not None:
            glDeleteBuffers(1, [self.vbo])
            self.vbo = None
        if self.vao is not None:
            glDeleteVertexArrays(1, [self.vao])
            self.vao = None


class _EmptyDrawable():
    """ stands for a Drawable without vertices, draws nothing """
    vertex_count = 0

    def draw(self):
        pass


class DrawableRenderer():
    """
    draws Drawables with a linked line program. the program
    must provide a vec4 u_color uniform.
    """
    def __init__(self, program, color_uniform='u_color'):
        self.program = program
        self.color_uniform = color_uniform

    @contextmanager
    def upload(self, drawable):
        """
        uploads **drawable** and yields a handle with a draw()
        method. the gl objects are deleted when the block exits,
        also if it raises.
        """
        if drawable.is_empty():
            yield _EmptyDrawable()
            return

        handle = GlDrawable.to_device(drawable)
        logger.debug('uploaded %r to vao %s', drawable, handle.vao)
        try:
            yield handle
        finally:
            handle.delete()

    def draw(self, drawable, color=None):
        """
        uploads, draws and releases **drawable** in one go.
        """
        if drawable.is_empty():
            return

        if color is not None:
            self.program.uniform(self.color_uniform, color)

        with self.upload(drawable) as handle:
            self.program.use()
            try:
                handle.draw()
            finally:
                self.program.unuse()
