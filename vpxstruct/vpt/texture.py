'''
# Textures

The images of the table. The image is saved either as the original file
(a nested BinaryData record, tagged JPEG whatever the real format is) or as
uncompressed pixels (BITS).
'''
import io
import logging
import math
from typing import Optional

from PIL import Image

from ..biff import BiffData
from ..biff.attributes import (
    BinaryAttribute,
    FloatAttribute,
    IntAttribute,
    NestedAttribute,
    StringAttribute,
)
from ..exceptions import BitmapSizeException
from .binary_data import BinaryBlob, BinaryData, Bitmap


logger = logging.getLogger(__name__)


class TextureData(BiffData):
    name             = StringAttribute('NAME')
    internal_name    = StringAttribute('INME')
    path             = StringAttribute('PATH')
    width            = IntAttribute('WDTH')
    height           = IntAttribute('HGHT')
    alpha_test_value = FloatAttribute('ALTV', default=1.0)
    binary           = NestedAttribute('JPEG', BinaryData)
    bits             = BinaryAttribute('BITS', default=None)
    link             = IntAttribute('LINK')

    def __repr__(self):
        return '<%s(name=%r,path=%r,%dx%d)>' % (self.__class__.__name__, self.name, self.path, self.width, self.height)

    def unpack(self, stream):
        super().unpack(stream)

        if self.bits is not None:
            expected = self.width * self.height * len(Bitmap.MODE)
            if len(self.bits) != expected:
                raise BitmapSizeException(['BITS', self.__class__.__name__], expected, len(self.bits))

        return self

    @property
    def bitmap(self) -> Optional[Bitmap]:
        if self.bits is None:
            return None

        return Bitmap(self.bits, self.width, self.height)

    @bitmap.setter
    def bitmap(self, bitmap: Bitmap):
        self.bits = bitmap.content
        self.width = bitmap.width
        self.height = bitmap.height


class TextureStats(object):
    '''How many pixels are opaque (no alpha), translucent (some alpha) and
    transparent (full alpha).'''

    def __init__(self, opaque: int, translucent: int, transparent: int):
        self.opaque = opaque
        self.translucent_pixels = translucent
        self.transparent_pixels = transparent
        self.total = opaque + translucent + transparent

    def __repr__(self):
        return '<%s(opaque=%d,translucent=%d,transparent=%d)>' % (
            self.__class__.__name__, self.opaque, self.translucent_pixels, self.transparent_pixels)

    def _ratio(self, n):
        return n / self.total if self.total else 0.0

    @property
    def translucent(self) -> float:
        return self._ratio(self.translucent_pixels)

    @property
    def transparent(self) -> float:
        return self._ratio(self.transparent_pixels)

    @property
    def is_opaque(self) -> bool:
        return self.translucent_pixels == 0 and self.transparent_pixels == 0


class Texture(object):
    '''A texture of the table, it owns its image.'''

    HDR_EXTENSIONS = ('.hdr', '.exr')
    GRID = 10

    def __init__(self, data: TextureData):
        self.data = data

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.data!r})>'

    @classmethod
    def from_bytes(cls, raw) -> "Texture":
        return cls(TextureData(raw))

    @classmethod
    def from_resource(cls, name: str, resource) -> "Texture":
        '''Build from an image file shipped with the application, the image is
        kept as uncompressed pixels.'''
        data = TextureData(name=name, internal_name=name.lower())
        data.bitmap = Bitmap.from_image(resource)

        return cls(data)

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def width(self) -> int:
        return self.data.width

    @property
    def height(self) -> int:
        return self.data.height

    @property
    def is_hdr(self) -> bool:
        return self.data.path.lower().endswith(self.HDR_EXTENSIONS)

    def get_binary_data(self) -> Optional[BinaryBlob]:
        return self.data.binary if self.data.binary is not None else self.data.bitmap

    @property
    def content(self) -> Optional[bytes]:
        '''Data as it is read from the table file: bitmaps come without header.'''
        blob = self.get_binary_data()
        return blob.content if blob is not None else None

    @property
    def file_content(self) -> Optional[bytes]:
        '''Data as it would be written to an image file, headers included.'''
        blob = self.get_binary_data()
        return blob.file_content if blob is not None else None

    def pack(self, stream=None):
        return self.data.pack(stream)

    def get_stats(self, threshold: int) -> Optional[TextureStats]:
        '''Sample the alpha channel of the image, only png files are analyzed.

        Returns None when there is nothing that can be decoded.'''
        if not self.data.path.lower().endswith('.png'):
            return None

        image = self.decode()
        if image is None:
            return None

        return self.analyze(image.getchannel('A').tobytes(), image.width, image.height, threshold)

    def decode(self) -> Optional[Image.Image]:
        if self.data.binary is None:
            return None

        try:
            with Image.open(io.BytesIO(self.data.binary.data), formats=['PNG']) as image:
                return image.convert('RGBA')
        except Exception as e:
            logger.debug('cannot decode the image of texture \'%s\': %s', self.name, e)
            return None

    @classmethod
    def analyze(cls, alpha: bytes, width: int, height: int, threshold: int) -> TextureStats:
        '''Visit the pixels in interleaved passes over a GRIDxGRID lattice so
        that stopping early, once more than threshold non-opaque pixels are
        found, still gives a picture of the whole image.'''
        opaque = translucent = transparent = 0
        dx = math.ceil(width / cls.GRID)
        dy = math.ceil(height / cls.GRID)

        for yy in range(dy):
            for xx in range(dx):
                for y in range(0, height, dy):
                    pos_y = y + yy
                    if pos_y >= height:
                        break
                    for x in range(0, width, dx):
                        pos_x = x + xx
                        if pos_x >= width:
                            break

                        a = alpha[pos_y * width + pos_x]
                        if a == 0:
                            transparent += 1
                        elif a == 255:
                            opaque += 1
                        else:
                            translucent += 1

                        if translucent + transparent > threshold:
                            return TextureStats(opaque, translucent, transparent)

        return TextureStats(opaque, translucent, transparent)
