import pytest

from vpxstruct.core import Chunk
from vpxstruct.exceptions import MalformedRecordException, ChunkUnpackException
from vpxstruct.fields import StructField, StringField
from vpxstruct.streams import Stream


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    class Dummy(Chunk):
        a = StructField('I', default=0xbad)
        b = StringField(0x10)
        c = StructField('I', default=0xdeadbeef)

    dummy = Dummy()

    assert dummy.a.size == 4
    assert dummy.a.raw == b'\xad\x0b\x00\x00'
    assert dummy.a.value == 0xbad
    assert dummy.a.offset == 0x00
    assert dummy.a.father is dummy

    assert dummy.b.size == 0x10
    assert dummy.b.raw == b'\x00' * 0x10
    assert dummy.b.offset == 0x04

    assert dummy.c.size == 0x4
    assert dummy.c.raw == b'\xef\xbe\xad\xde'
    assert dummy.c.offset == 0x14

    assert dummy.size == 0x18
    assert len(dummy.raw) == dummy.size
    assert dummy.raw == (
        b'\xad\x0b\x00\x00' +
        b'\x00' * 0x10 +
        b'\xef\xbe\xad\xde'
    )


def test_fields_are_not_shared():
    class Dummy(Chunk):
        a = StructField('I')

    first, second = Dummy(), Dummy()
    first.a.value = 1

    assert second.a.value == 0


def test_inheritance():
    '''subclasses inherit fields'''
    class Father(Chunk):
        field_a = StringField(0x10)
        field_b = StructField("I")

    class Son(Father):
        field_c = StringField(0x08)

    son = Son(b'A' * 16 + b'\x01\x02\x03\x04' + b'ABCDEFGH')

    assert [name for name, _ in son.get_fields()] == ['field_a', 'field_b', 'field_c']
    assert son.field_b.value == 0x04030201
    assert son.field_c.value == b'ABCDEFGH'


def test_nested_chunk():
    class Point(Chunk):
        x = StructField('h')
        y = StructField('h')

    class Segment(Chunk):
        start = Point()
        end   = Point()

    segment = Segment(b'\x01\x00\x02\x00\x03\x00\x04\x00')

    assert segment.value == {
        'start': {'x': 1, 'y': 2},
        'end': {'x': 3, 'y': 4},
    }
    assert segment.layout == {
        'start': (0, 4),
        'end': (4, 4),
    }


def test_unpacking_and_packing():
    class Dummy(Chunk):
        fieldA = StructField('I')
        fieldB = StructField('I')

    contents = b'\x01\x02\x03\x04\x0a\x0b\x0c\x0d'

    dummy = Dummy(contents)

    assert dummy.pack() == contents
    assert Dummy(dummy.pack()) == dummy


def test_unpack_from_the_middle_of_a_stream():
    class Dummy(Chunk):
        a = StructField('H')

    stream = Stream(b'\xff\xff\x01\x00\xee')
    stream.seek(2)

    dummy = Dummy()
    dummy.unpack(stream)

    assert dummy.a.value == 1
    assert dummy.offset == 2
    assert stream.tell() == 4


def test_declared_size_not_consumed():
    '''the fields describe less than the declared size'''
    class Broken(Chunk):
        SIZE = 8
        a = StructField('I')

    with pytest.raises(MalformedRecordException) as exc:
        Broken(b'\x01\x00\x00\x00\x00\x00\x00\x00')

    assert exc.value.remaining == 4
    assert exc.value.record == 'Broken'
    assert exc.value.offset == 0

    with pytest.raises(MalformedRecordException) as exc:
        Broken().pack()

    assert exc.value.remaining == 4


def test_short_data_without_declared_size():
    class Dummy(Chunk):
        a = StructField('I')
        b = StructField('I')

    with pytest.raises(ChunkUnpackException) as exc:
        Dummy(b'\x01\x00\x00\x00\x02')

    assert exc.value.chain == ['b']
