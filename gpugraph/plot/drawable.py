#-*- coding: utf-8 -*-
"""
backend agnostic geometry description.

A Drawable bundles a flat float32 vertex array of (nx, ny)
pairs with a primitive topology. Emitters create a new Drawable
every frame which supersedes the one of the previous frame;
any buffer objects a backend creates for a Drawable belong to
the backend and must be released once the frame was drawn.
"""
import numpy as np

__all__ = ['Drawable', 'LINE_LIST', 'LINE_STRIP', 'PRIMITIVES', 'VERTEX_DTYPE']

# independent segments: every two vertices form a line.
LINE_LIST = 'line_list'

# connected polyline through all vertices.
LINE_STRIP = 'line_strip'

PRIMITIVES = (LINE_LIST, LINE_STRIP)

VERTEX_DTYPE = np.float32


class Drawable():
    """
    vertex data with a primitive topology.

    .. code ::

       d = Drawable([-1, 0, 1, 0], LINE_LIST)
       d.vertex_count # 2
       d.points       # array([[-1., 0.], [1., 0.]], dtype=float32)

    """
    __slots__ = ('_vertices', '_primitive')

    def __init__(self, vertices, primitive):
        """
        :param vertices: flat sequence of scalars nx0, ny0, nx1, ny1, ...
                         or an array of shape (n, 2)
        :param primitive: LINE_LIST or LINE_STRIP
        """
        if primitive not in PRIMITIVES:
            raise ValueError('invalid primitive "{}". Must be one of {}'.format(primitive, PRIMITIVES))

        data = np.array(vertices, dtype=VERTEX_DTYPE).reshape(-1)
        if data.size % 2:
            raise ValueError('vertices must contain (nx, ny) pairs, got {} scalars'.format(data.size))

        data.flags.writeable = False
        self._vertices = data
        self._primitive = primitive

    @classmethod
    def empty(cls, primitive):
        return cls(np.empty(0, dtype=VERTEX_DTYPE), primitive)

    @property
    def vertices(self):
        """ read only flat float32 array """
        return self._vertices

    @property
    def points(self):
        """ vertices as (vertex_count, 2) view """
        return self._vertices.reshape((-1, 2))

    @property
    def primitive(self):
        return self._primitive

    @property
    def vertex_count(self):
        return self._vertices.size // 2

    def is_empty(self):
        return self._vertices.size == 0

    def __len__(self):
        return self.vertex_count

    def __eq__(self, other):
        if not isinstance(other, Drawable):
            return NotImplemented
        return self._primitive == other._primitive \
            and self._vertices.tobytes() == other._vertices.tobytes()

    def __repr__(self):
        return 'Drawable({}, vertex_count={})'.format(self._primitive, self.vertex_count)
