'''
Attributes glue a tag of a BIFF stream to an attribute of a BiffData.

Each kind of attribute knows how to decode the payload of its tag and what to
do with the result: scalars and strings overwrite, sequences append, nested
records build a sub-structure from the records that follow.
'''
import copy
import logging
import struct

from .. import fields
from ..exceptions import (
    ChunkUnpackException,
    MalformedRecordException,
    TruncatedException,
    UnsupportedPayloadException,
)
from ..streams import Stream
from .records import BiffHeader, TAG_SIZE, read_payload, write_record


class BiffAttribute(object):
    '''Base class to subclass from'''

    def __init__(self, tag, default=None):
        if len(tag) != TAG_SIZE:
            raise ValueError(f'tag \'{tag}\' must be {TAG_SIZE} characters long')

        self.tag = tag
        self.default = default
        self.name = None
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.tag})>'

    def contribute_to_chunk(self, cls, name):
        if self.tag in cls._meta.tags:
            raise AttributeError(f'tag \'{self.tag}\' is already used by class {cls.__name__}')

        self.name = name
        cls._meta.attributes.append(name)
        cls._meta.tags[self.tag] = self
        setattr(cls, name, self)

    def value_from_default(self):
        return copy.copy(self.default)

    def is_default(self, value) -> bool:
        return value == self.default

    def decode(self, payload: bytes):
        raise NotImplementedError(f"method {self.__class__.__name__}.decode() not implemented")

    def encode(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.encode() not implemented")

    def apply(self, data, value):
        setattr(data, self.name, value)

    def unpack(self, data, stream, header: BiffHeader):
        payload = read_payload(stream, header)
        self.apply(data, self.decode(payload))

    def pack(self, data, stream):
        value = getattr(data, self.name)

        if self.is_default(value):
            return

        write_record(stream, self.tag, self.encode(value))


class ScalarAttribute(BiffAttribute):
    '''A single value encoded with the struct module.'''

    def __init__(self, tag, format, default=0):
        super().__init__(tag, default=default)
        self.format = format

    def create_field(self):
        return fields.StructField(self.format, default=self.default, name=self.name)

    def decode(self, payload):
        field = self.create_field()
        if len(payload) < field.size:
            raise TruncatedException([self.tag], f'\'{self.tag}\' needs {field.size} bytes, got {len(payload)}')

        field.raw = payload[:field.size]

        return field.value

    def encode(self, value):
        field = self.create_field()
        field.value = value

        return field.raw


class FloatAttribute(ScalarAttribute):

    def __init__(self, tag, default=0.0):
        super().__init__(tag, 'f', default=default)


class IntAttribute(ScalarAttribute):

    def __init__(self, tag, default=0):
        super().__init__(tag, 'i', default=default)


class BoolAttribute(ScalarAttribute):
    '''Booleans are written as 32 bits integers; any non-zero byte reads as true
    so that single byte flags are accepted as well.'''

    def __init__(self, tag, default=False):
        super().__init__(tag, 'i', default=default)

    def decode(self, payload):
        if not payload:
            raise TruncatedException([self.tag], f'\'{self.tag}\' has an empty payload')

        return any(payload)

    def encode(self, value):
        return super().encode(int(bool(value)))


class StringAttribute(BiffAttribute):
    '''Length prefixed string.'''

    def __init__(self, tag, default='', encoding='latin1'):
        super().__init__(tag, default=default)
        self.encoding = encoding

    def decode(self, payload):
        if len(payload) < 4:
            raise TruncatedException([self.tag], f'\'{self.tag}\' is too short to contain a string')

        length, = struct.unpack_from('<i', payload)
        if length < 0 or 4 + length > len(payload):
            raise TruncatedException([self.tag], f'\'{self.tag}\' declares a string of {length} bytes')

        return payload[4:4 + length].decode(self.encoding)

    def encode(self, value):
        try:
            encoded = value.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise UnsupportedPayloadException([], f'{value!r} cannot be encoded as {self.encoding}') from e

        return struct.pack('<i', len(encoded)) + encoded


class WideStringAttribute(StringAttribute):
    '''Length (in bytes) prefixed UTF-16 string, used for the item names.'''

    def __init__(self, tag, default=''):
        super().__init__(tag, default=default, encoding='utf-16-le')


class BinaryAttribute(BiffAttribute):
    '''The payload as it is.'''

    def __init__(self, tag, default=b''):
        super().__init__(tag, default=default)

    def decode(self, payload):
        return payload

    def encode(self, value):
        return bytes(value)


class RecordAttribute(BiffAttribute):
    '''The payload is a fixed-size record (a Chunk) and must be consumed exactly.'''

    def __init__(self, tag, chunk_cls):
        self.chunk_cls = chunk_cls
        super().__init__(tag, default=None)

    def value_from_default(self):
        return self.chunk_cls()

    def is_default(self, value):
        return value == self.chunk_cls()

    def unpack(self, data, stream, header):
        offset = stream.tell()
        payload = read_payload(stream, header)
        record = self.chunk_cls()

        try:
            record.unpack(Stream(payload))
        except MalformedRecordException as e:
            e.offset += offset
            e.chain.append(self.tag)
            raise

        if len(payload) != record.size:
            raise MalformedRecordException([self.tag], self.chunk_cls.__name__, offset, len(payload) - record.size)

        self.apply(data, record)

    def encode(self, value):
        return value.raw


class NestedAttribute(BiffAttribute):
    '''The tag introduces a whole BIFF stream, closed by its own end tag.

    It is written with an empty payload and the nested records follow it
    directly; when reading, a non-empty payload is taken as the nested stream.'''

    def __init__(self, tag, biff_cls):
        self.biff_cls = biff_cls
        super().__init__(tag, default=None)

    def is_default(self, value):
        return value is None

    def unpack(self, data, stream, header):
        item = self.biff_cls()

        if header.payload_length > 0:
            item.unpack(Stream(read_payload(stream, header)))
        elif header.payload_length < 0:
            raise ChunkUnpackException([self.tag], f'\'{self.tag}\' declares a negative length')
        else:
            item.unpack(stream)

        self.apply(data, item)

    def pack_item(self, item, stream):
        write_record(stream, self.tag)
        item.pack(stream)

    def pack(self, data, stream):
        value = getattr(data, self.name)

        if self.is_default(value):
            return

        self.pack_item(value, stream)


class SequenceAttribute(NestedAttribute):
    '''Every occurrence of the tag appends one nested item, the order of the
    stream is the order of the list.'''

    def __init__(self, tag, biff_cls):
        super().__init__(tag, biff_cls)
        self.default = []

    def is_default(self, value):
        return len(value) == 0

    def apply(self, data, value):
        getattr(data, self.name).append(value)

    def pack(self, data, stream):
        for item in getattr(data, self.name):
            self.pack_item(item, stream)
