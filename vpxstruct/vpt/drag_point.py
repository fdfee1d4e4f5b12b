from ..biff import BiffData
from ..biff.attributes import (
    BoolAttribute,
    FloatAttribute,
    IntAttribute,
    RecordAttribute,
    StringAttribute,
)
from .vertex import Vertex2D


class DragPointData(BiffData):
    '''One control point of the path or boundary of a shape.'''
    center            = RecordAttribute('VCEN', Vertex2D)
    pos_z             = FloatAttribute('POSZ')
    is_smooth         = BoolAttribute('SMTH')
    is_slingshot      = BoolAttribute('SLNG')
    has_auto_texture  = BoolAttribute('ATEX')
    texture_coord     = FloatAttribute('TEXC')
    calc_height       = FloatAttribute('CALC')
    is_locked         = BoolAttribute('LOCK')
    editor_layer      = IntAttribute('LAYR')
    editor_layer_name = StringAttribute('LANR')
    editor_layer_visibility = BoolAttribute('LVIS', default=True)

    def __str__(self):
        return '%s z=%g%s' % (self.center, self.pos_z, ' smooth' if self.is_smooth else '')
