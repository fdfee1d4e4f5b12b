from ..biff import BiffData
from ..biff.attributes import (
    BoolAttribute,
    FloatAttribute,
    IntAttribute,
    SequenceAttribute,
    StringAttribute,
    WideStringAttribute,
)
from .drag_point import DragPointData


class RubberData(BiffData):
    '''A rubber band stretched along its drag points.

    Material, image and physics material are names, they are resolved
    against the collections of the table by whoever owns the item.'''
    name                  = WideStringAttribute('NAME')
    height                = FloatAttribute('HTTP', default=25.0)
    hit_height            = FloatAttribute('HTHI', default=25.0)
    thickness             = IntAttribute('WDTP', default=8)
    hit_event             = BoolAttribute('HTEV')
    material              = StringAttribute('MATR')
    is_timer_enabled      = BoolAttribute('TMON')
    timer_interval        = IntAttribute('TMIN', default=100)
    image                 = StringAttribute('IMAG')
    is_collidable         = BoolAttribute('CLDR', default=True)
    is_visible            = BoolAttribute('RVIS', default=True)
    is_reflection_enabled = BoolAttribute('REEN', default=True)
    static_rendering      = BoolAttribute('ESTR', default=True)
    show_in_editor        = BoolAttribute('ESIE')
    rot_x                 = FloatAttribute('ROTX')
    rot_y                 = FloatAttribute('ROTY')
    rot_z                 = FloatAttribute('ROTZ')
    physics_material      = StringAttribute('MAPH')
    overwrite_physics     = BoolAttribute('OVPH', default=True)
    elasticity            = FloatAttribute('ELAS', default=0.8)
    elasticity_falloff    = FloatAttribute('ELFO', default=0.3)
    friction              = FloatAttribute('RFCT', default=0.6)
    scatter               = FloatAttribute('RSCT', default=5.0)
    is_locked             = BoolAttribute('LOCK')
    editor_layer          = IntAttribute('LAYR')
    editor_layer_name     = StringAttribute('LANR')
    editor_layer_visibility = BoolAttribute('LVIS', default=True)
    drag_points           = SequenceAttribute('DPNT', DragPointData)
