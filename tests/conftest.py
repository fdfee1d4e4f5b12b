import io
import struct

import pytest
from PIL import Image


class BiffBuilder(object):
    '''Write BIFF records by hand, independently from the library.'''

    def __init__(self):
        self.data = b''

    def __bytes__(self):
        return self.data

    def record(self, tag, payload=b'', length=None):
        length = len(payload) + 4 if length is None else length
        self.data += struct.pack('<i', length) + tag.encode('latin1') + payload
        return self

    def float(self, tag, value):
        return self.record(tag, struct.pack('<f', value))

    def int(self, tag, value):
        return self.record(tag, struct.pack('<i', value))

    def bool(self, tag, value):
        return self.int(tag, int(value))

    def string(self, tag, value):
        encoded = value.encode('latin1')
        return self.record(tag, struct.pack('<i', len(encoded)) + encoded)

    def wide_string(self, tag, value):
        encoded = value.encode('utf-16-le')
        return self.record(tag, struct.pack('<i', len(encoded)) + encoded)

    def vertex(self, tag, x, y):
        return self.record(tag, struct.pack('<ff', x, y))

    def nested(self, tag, builder):
        self.record(tag)
        self.data += bytes(builder)
        return self

    def end(self):
        return self.record('ENDB')


@pytest.fixture
def biff():
    return BiffBuilder


@pytest.fixture
def drag_point_stream():
    def _drag_point(x, y, smooth=False):
        return BiffBuilder().vertex('VCEN', x, y).float('POSZ', 0.0).bool('SMTH', smooth).bool('ATEX', True).end()

    return _drag_point


@pytest.fixture
def rubber_stream(drag_point_stream):
    '''The "Rubber1" item of the reference table.'''
    builder = BiffBuilder()
    builder.wide_string('NAME', 'Rubber1')
    builder.float('HTTP', 25.556)
    builder.float('HTHI', 25.193)
    builder.int('WDTP', 12)
    builder.bool('HTEV', False)
    builder.string('MATR', 'Playfield')
    builder.bool('TMON', False)
    builder.int('TMIN', 100)
    builder.string('IMAG', 'test_pattern')
    builder.bool('CLDR', True)
    builder.bool('RVIS', True)
    builder.bool('REEN', True)
    builder.bool('ESTR', True)
    builder.bool('ESIE', False)
    builder.float('ROTX', 65.23)
    builder.float('ROTY', 75.273)
    builder.float('ROTZ', 70.962)
    builder.string('MAPH', '')
    builder.bool('OVPH', True)
    builder.float('ELAS', 0.832)
    builder.float('ELFO', 0.321)
    builder.float('RFCT', 0.685)
    builder.float('RSCT', 5.225)
    builder.nested('DPNT', drag_point_stream(100.0, 200.0, smooth=True))
    builder.nested('DPNT', drag_point_stream(300.0, 200.0))
    builder.nested('DPNT', drag_point_stream(200.0, 400.0))
    builder.end()

    return bytes(builder)


@pytest.fixture
def material_bytes():
    return (
        b'Playfield'.ljust(32, b'\x00') +
        struct.pack('<IIIf', 0x00ff0000, 0x00101010, 0x00202020, 0.5) +
        b'\x01\x00\x00\x00' +
        struct.pack('<f', 0.25) +
        b'\x80\x00\x00\x00' +
        struct.pack('<fif', 0.75, 128, 1.0) +
        b'\x01\x00\x00\x00'
    )


@pytest.fixture
def png_factory():
    def _png(width, height, color=(255, 0, 0, 255), transparent=()):
        image = Image.new('RGBA', (width, height), color)
        for xy in transparent:
            image.putpixel(xy, (0, 0, 0, 0))

        out = io.BytesIO()
        image.save(out, format='PNG')
        return out.getvalue()

    return _png
