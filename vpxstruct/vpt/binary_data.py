'''
# Binary payloads

An item can own an opaque payload, for textures it's the image itself. Two views
are available

 - content: what the runtime consumes, without any header that is specific
   to how the payload was embedded
 - file_content: the payload as a standalone file, with a valid header,
   useful to export it
'''
import io

from PIL import Image

from ..biff import BiffData
from ..biff.attributes import BinaryAttribute, IntAttribute, StringAttribute


class BinaryBlob(object):

    @property
    def content(self) -> bytes:
        raise NotImplementedError(f"property {self.__class__.__name__}.content not implemented")

    @property
    def file_content(self) -> bytes:
        raise NotImplementedError(f"property {self.__class__.__name__}.file_content not implemented")


class BinaryData(BinaryBlob, BiffData):
    '''A file (usually an image) embedded as it is, the SIZE record is derived
    from the data when packing.'''
    name          = StringAttribute('NAME')
    internal_name = StringAttribute('INME')
    path          = StringAttribute('PATH')
    size          = IntAttribute('SIZE')
    data          = BinaryAttribute('DATA')

    def __repr__(self):
        return '<%s(name=%r,path=%r,size=%d)>' % (self.__class__.__name__, self.name, self.path, len(self.data))

    @property
    def content(self) -> bytes:
        return self.data

    @property
    def file_content(self) -> bytes:
        return self.data

    def pack(self, stream=None):
        self.size = len(self.data)

        return super().pack(stream)


class Bitmap(BinaryBlob):
    '''Uncompressed RGBA pixels, row by row, from the top.'''
    MODE = 'RGBA'

    def __init__(self, data: bytes, width: int, height: int):
        expected = width * height * len(self.MODE)
        if len(data) != expected:
            raise ValueError(f'a {width}x{height} bitmap needs {expected} bytes, got {len(data)}')

        self.data = bytes(data)
        self.width = width
        self.height = height

    def __repr__(self):
        return '<%s(%dx%d)>' % (self.__class__.__name__, self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented

        return (self.width, self.height, self.data) == (other.width, other.height, other.data)

    __hash__ = None

    @classmethod
    def from_image(cls, source) -> "Bitmap":
        '''Build from any image Pillow can open (bytes, a path or a file object).'''
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        with Image.open(source) as image:
            rgba = image.convert(cls.MODE)

        return cls(rgba.tobytes(), rgba.width, rgba.height)

    def to_image(self) -> Image.Image:
        return Image.frombytes(self.MODE, (self.width, self.height), self.data)

    @property
    def content(self) -> bytes:
        return self.data

    @property
    def file_content(self) -> bytes:
        out = io.BytesIO()
        self.to_image().save(out, format='BMP')

        return out.getvalue()
