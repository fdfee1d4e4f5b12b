from ..core import Chunk
from .. import fields


class Vertex2D(Chunk):
    SIZE = 8

    x = fields.StructField('f', default=0.0)
    y = fields.StructField('f', default=0.0)

    def __str__(self):
        return '(%g, %g)' % (self.x.value, self.y.value)

    @classmethod
    def at(cls, x, y) -> "Vertex2D":
        vertex = cls()
        vertex.x.value = x
        vertex.y.value = y

        return vertex
