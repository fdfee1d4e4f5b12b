"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable: fixed-width scalars, fixed-length strings and runs of reserved bytes.
"""
import logging
import struct
from enum import Enum

from .enum import Compliant
from .meta import FieldBase, Endianess
from .streams import Stream
from .exceptions import (
    UnpackException,
    TruncatedException,
    ReservedBytesException,
    UnsupportedPayloadException,
)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, *args, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN, compliant=Compliant.INHERIT):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess
        self.compliant = compliant

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def is_compliant(self, level):
        '''Returns the compliant'''
        instance = self
        while instance is not None:
            if instance.compliant & level:
                return True
            if not instance.compliant & Compliant.INHERIT:
                break

            instance = instance.father

        return False

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        self._value = value

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    def _set_raw(self, value) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}._set_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
        fset=lambda self, value: self._set_raw(value),
    )

    def relayout(self, offset=0):
        self.offset = offset

        return self.size

    def read(self, stream) -> bytes:
        '''Read exactly the bytes this field occupies.'''
        size = self.size
        data = stream.read(size)

        if len(data) != size:
            self.logger.error('field \'%s\' needs %d bytes but only %d are available', self.name, size, len(data))
            raise TruncatedException(chain=[])

        return data

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = self.read(stream)

    def pack(self, stream=None):
        raw = self.raw
        stream = Stream(b'') if stream is None else stream
        stream.write(raw)

        return stream.getvalue()


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers and floats to/from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if self.enum or isinstance(self.value, float):
            return f'<{self.__class__.__name__}({self.value!r})>'

        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def __str__(self):
        if self.enum or isinstance(self.value, float):
            return str(self.value)

        width = self.size * 2
        formatter = '0x%%0%dx' % width
        return formatter % (self.value,)

    def value_from_default(self):
        if not self.enum or isinstance(self.default, Enum):
            return super().value_from_default()

        return self.enum(self.default)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_raw(self) -> bytes:
        value = self.value if not self.enum else self.value.value
        try:
            return struct.pack(self.get_format(), value)
        except (struct.error, OverflowError) as e:
            raise UnsupportedPayloadException(
                [], f'{value!r} cannot be encoded as \'{self.format}\': {e}') from e

    def _set_raw(self, raw: bytes) -> None:
        self.value = self._unpack(raw)

    def _unpack_struct(self, value: bytes):
        try:
            unpacked_value = struct.unpack(self.get_format(), value)[0]
        except struct.error as e:
            self.logger.error(e)
            raise TruncatedException(chain=[]) from e

        return unpacked_value

    def _unpack_enum(self, value: int) -> Enum:
        try:
            return self.enum(value)
        except ValueError as e:
            if self.is_compliant(Compliant.ENUM):
                raise UnpackException([], f'{self.enum.__name__} has no element with value 0x{value:x}') from e

            self.logger.warning(f'enum {self.enum!r} doesn\'t have element with value 0x{value:x} in it')

    def _unpack(self, raw):
        value = self._unpack_struct(raw)
        if self.enum:
            value = self._unpack_enum(value)

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n or len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    def value_from_default(self):
        return b'\x00' * self.length if not self.default else self.default

    def _get_size(self):
        return self.length

    def _set_value(self, value) -> None:
        if len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        super()._set_value(value)

    def _get_raw(self):
        return self.value

    def _set_raw(self, raw):
        self.value = raw


class NullTerminatedStringField(Field):
    """Text stored in a fixed number of bytes.

    Decoding stops at the first zero byte (or at the end of the field), whatever
    comes after the terminator is ignored. Encoding zero-fills up to the fixed
    length and refuses text that would leave no room for the terminator."""

    def __init__(self, n, encoding='latin1', default='', **kw):
        self.length = n
        self.encoding = encoding
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    def _get_size(self):
        return self.length

    def _get_raw(self) -> bytes:
        try:
            encoded = self.value.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise UnsupportedPayloadException(
                [], f'{self.value!r} cannot be encoded as {self.encoding}') from e

        if len(encoded) >= self.length:
            raise UnsupportedPayloadException(
                [], f'{self.value!r} needs {len(encoded)} bytes, field \'{self.name}\' holds {self.length - 1} plus the terminator')

        return encoded.ljust(self.length, b'\x00')

    def _set_raw(self, raw: bytes) -> None:
        self.value = raw.split(b'\x00', 1)[0].decode(self.encoding)


class PaddingField(Field):
    '''Reserved bytes: they are skipped while unpacking and written back as zeros.

    If the record requires Compliant.PADDING a non-zero reserved byte is an error
    and the stream is rewound at the start of the reserved run.'''

    def __init__(self, n, **kw):
        self.length = n
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%d)>' % (self.__class__.__name__, self.length)

    def value_from_default(self):
        return b'\x00' * self.length

    def _get_size(self):
        return self.length

    def _get_raw(self) -> bytes:
        return b'\x00' * self.length

    def _set_raw(self, raw: bytes) -> None:
        self.value = raw

    def unpack(self, stream):
        self.offset = stream.tell()
        raw = self.read(stream)

        if any(raw):
            if self.is_compliant(Compliant.PADDING):
                stream.seek(self.offset)
                raise ReservedBytesException([], f'reserved bytes at offset 0x{self.offset:x} are not zero: {raw!r}')

            self.logger.warning('reserved bytes at offset 0x%x are not zero: %r', self.offset, raw)

        self.raw = raw
