import struct

import pytest

from vpxstruct.biff import BiffData
from vpxstruct.exceptions import (
    ChunkUnpackException,
    UnsupportedItemException,
    UnsupportedPayloadException,
)
from vpxstruct.streams import Stream
from vpxstruct.vpt import pack_game_item, unpack_game_item
from vpxstruct.vpt.enum import ItemType
from vpxstruct.vpt.rubber import RubberData


def test_game_item(rubber_stream):
    item_type, rubber = unpack_game_item(struct.pack('<I', 21) + rubber_stream)

    assert item_type == ItemType.RUBBER
    assert isinstance(rubber, RubberData)
    assert rubber.name == 'Rubber1'
    assert len(rubber.drag_points) == 3


def test_game_item_pack():
    rubber = RubberData(name='Rubber2', thickness=10)

    raw = pack_game_item(rubber)

    assert raw[:4] == struct.pack('<I', 21)

    item_type, decoded = unpack_game_item(raw)

    assert item_type == ItemType.RUBBER
    assert decoded == rubber


def test_game_item_not_supported(rubber_stream):
    with pytest.raises(UnsupportedItemException) as exc:
        unpack_game_item(struct.pack('<I', 1) + rubber_stream)

    assert exc.value.chain == ['type']


def test_game_item_invalid_type(rubber_stream):
    with pytest.raises(ChunkUnpackException) as exc:
        unpack_game_item(struct.pack('<I', 99) + rubber_stream)

    assert exc.value.chain == ['type']


def test_game_item_pack_unknown_class():
    class Other(BiffData):
        pass

    with pytest.raises(UnsupportedItemException):
        pack_game_item(Other())


def test_game_item_pack_failure():
    rubber = RubberData(name='R', height=30.0, timer_interval=2 ** 40)
    stream = Stream(b'')

    with pytest.raises(UnsupportedPayloadException) as exc:
        pack_game_item(rubber, stream)

    assert exc.value.chain == ['TMIN', 'RubberData']
    assert stream.getvalue() == b''
