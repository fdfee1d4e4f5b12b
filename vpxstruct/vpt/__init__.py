'''
# Table items

Every item of a table is saved in its own stream

  .-----------------------------.
  | item type (int32)           |
  | BIFF records ... ENDB       |
  '-----------------------------'

the item type selects the class the records are decoded with.
'''
import logging
from typing import Tuple

from ..biff import BiffData
from ..core import Chunk
from ..enum import Compliant
from ..exceptions import UnsupportedItemException
from ..streams import Stream
from .. import fields
from .enum import ItemType
from .rubber import RubberData


logger = logging.getLogger(__name__)


ITEM_CLASSES = {
    ItemType.RUBBER: RubberData,
}


class GameItemHeader(Chunk):
    SIZE = 4

    type = fields.StructField('I', enum=ItemType, default=ItemType.INVALID, compliant=Compliant.ENUM)


def get_item_type(item: BiffData) -> ItemType:
    for item_type, cls in ITEM_CLASSES.items():
        if type(item) is cls:
            return item_type

    raise UnsupportedItemException([], f'{item.__class__.__name__} is not a game item')


def unpack_game_item(source) -> Tuple[ItemType, BiffData]:
    stream = source if isinstance(source, Stream) else Stream(source)

    header = GameItemHeader()
    header.unpack(stream)

    item_type = header.type.value
    cls = ITEM_CLASSES.get(item_type)

    if cls is None:
        raise UnsupportedItemException(['type'], f'items of type {item_type.name} are not supported')

    logger.debug('unpacking item of type %s', item_type.name)

    item = cls()
    item.unpack(stream)

    return item_type, item


def pack_game_item(item: BiffData, stream=None) -> bytes:
    stream = Stream(b'') if stream is None else stream

    header = GameItemHeader()
    header.type.value = get_item_type(item)
    records = item.pack()

    header.pack(stream)
    stream.write(records)

    return stream.getvalue()
