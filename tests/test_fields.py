from enum import Enum, auto

import pytest

from vpxstruct.enum import Compliant
from vpxstruct.exceptions import (
    ReservedBytesException,
    TruncatedException,
    UnpackException,
    UnsupportedPayloadException,
)
from vpxstruct.fields import (
    NullTerminatedStringField,
    PaddingField,
    StringField,
    StructField,
)
from vpxstruct.streams import Stream


def test_structfield_conversion_raw_value():
    """Check that the attributes "value" and "raw" are the analogous
    of the integers and bytes representation for a field."""
    field = StructField('I')

    assert field.size == 4
    assert field.raw == b'\x00\x00\x00\x00'
    assert field.value == 0

    field.value = 0xcafe

    assert field.value == 0xcafe
    assert field.raw == b'\xfe\xca\x00\x00'


def test_structfield_set_raw():
    field = StructField('I')

    field.raw = b'\x01\x02\x03\x04'
    assert field.value == 0x04030201


def test_structfield_float():
    field = StructField('f', default=0.0)

    field.raw = b'\x00\x00\x80\x3f'

    assert field.value == 1.0
    assert field.size == 4


def test_structfield_out_of_range():
    field = StructField('B')
    field.value = 0x100

    with pytest.raises(UnsupportedPayloadException):
        field.raw


def test_structfield_short_read():
    field = StructField('I')

    with pytest.raises(TruncatedException):
        field.unpack(Stream(b'\x01\x02'))


def test_structfield_enum():
    class DummyEnum(Enum):
        NONE = 0
        FIRST = auto()
        SECOND = auto()

    field = StructField('I', enum=DummyEnum, compliant=Compliant.ENUM)

    assert field.value == DummyEnum.NONE

    field.value = DummyEnum.SECOND

    assert field.value == DummyEnum.SECOND
    assert field.raw == b'\x02\x00\x00\x00'

    with pytest.raises(UnpackException):
        field.raw = b'\x04\x00\x00\x00'


def test_structfield_enum_not_compliant():
    class DummyEnum(Enum):
        NONE = 0

    field = StructField('I', enum=DummyEnum)
    field.raw = b'\x04\x00\x00\x00'

    assert field.value is None


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert len(field.raw) == field.size
    assert field.raw == b'\x00' * field.size

    with pytest.raises(ValueError):
        field.value = b'kebab'

    data = bytes(range(0x10))

    field.value = data

    assert field.value == data
    assert field.raw == data


def test_null_terminated_string_padding():
    field = NullTerminatedStringField(8)
    field.value = 'abc'

    assert field.raw == b'abc\x00\x00\x00\x00\x00'

    other = NullTerminatedStringField(8)
    other.raw = field.raw

    assert other.value == 'abc'


def test_null_terminated_string_ignores_after_terminator():
    field = NullTerminatedStringField(8)

    field.raw = b'abc\x00garb'
    assert field.value == 'abc'

    field.raw = b'abcdefgh'
    assert field.value == 'abcdefgh'


@pytest.mark.parametrize('value', ['a' * 8, 'a' * 9, '€'])
def test_null_terminated_string_rejected(value):
    field = NullTerminatedStringField(8)
    field.value = value

    with pytest.raises(UnsupportedPayloadException):
        field.raw


def test_null_terminated_string_fills_capacity():
    field = NullTerminatedStringField(8)
    field.value = 'a' * 7

    assert field.raw == b'aaaaaaa\x00'


def test_padding_lenient():
    field = PaddingField(3)
    stream = Stream(b'\x00\x01\x00')

    field.unpack(stream)

    assert field.value == b'\x00\x01\x00'
    assert field.raw == b'\x00\x00\x00'
    assert stream.tell() == 3


def test_padding_compliant():
    field = PaddingField(2, compliant=Compliant.PADDING)
    stream = Stream(b'\x00\x01')

    with pytest.raises(ReservedBytesException):
        field.unpack(stream)

    assert stream.tell() == 0


def test_structfield_float_overflow():
    field = StructField('f', default=0.0)
    field.value = 1e40

    with pytest.raises(UnsupportedPayloadException):
        field.raw
