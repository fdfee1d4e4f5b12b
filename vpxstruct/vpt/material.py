'''
# Materials

The table saves its materials as arrays of fixed-size records, the visual
part ("SaveMaterial") and the physical part ("SavePhysicsMaterial") separately,
both keyed by the material name.

Some single byte fields are followed by three reserved bytes to keep the
next field aligned at four bytes.
'''
from ..core import Chunk
from ..enum import Compliant
from .. import fields


NAME_LENGTH = 32


class MaterialData(Chunk):
    '''Visual part of a material as it's saved in the table file.'''
    SIZE = 76
    DEFAULT_COMPLIANT = Compliant.PADDING

    name                      = fields.NullTerminatedStringField(NAME_LENGTH)
    base_color                = fields.StructField('I')  # can be overridden by the texture of the item
    glossiness                = fields.StructField('I')  # specular of the glossy layer
    clear_coat                = fields.StructField('I')  # specular of the clear coat layer
    wrap_lighting             = fields.StructField('f', default=0.0)  # 0 (off) .. 1 (full)
    is_metal                  = fields.StructField('B')
    reserved_0                = fields.PaddingField(3)
    roughness                 = fields.StructField('f', default=0.0)  # 0 (diffuse) .. 1 (specular)
    glossy_image_lerp         = fields.StructField('B')  # quantized 0 .. 255
    reserved_1                = fields.PaddingField(3)
    edge                      = fields.StructField('f', default=0.0)  # 0 (dark edges) .. 1 (full fresnel)
    thickness                 = fields.StructField('i')  # quantized 0 .. 255
    opacity                   = fields.StructField('f', default=0.0)
    opacity_active_edge_alpha = fields.StructField('B')
    reserved_2                = fields.PaddingField(3)


class PhysicsMaterialData(Chunk):
    SIZE = 48
    DEFAULT_COMPLIANT = Compliant.PADDING

    name                = fields.NullTerminatedStringField(NAME_LENGTH)
    elasticity          = fields.StructField('f', default=0.0)
    elasticity_fall_off = fields.StructField('f', default=0.0)
    friction            = fields.StructField('f', default=0.0)
    scatter_angle       = fields.StructField('f', default=0.0)
