'''
Every record of a BIFF stream starts with the same eight bytes

  .------------------------------.
  | length (int32, includes tag) |
  | tag    (4 ASCII bytes)       |
  '------------------------------'

followed by length - 4 bytes of payload.
'''
from ..core import Chunk
from .. import fields
from ..exceptions import ChunkUnpackException


END_TAG = 'ENDB'
TAG_SIZE = 4


class BiffHeader(Chunk):
    SIZE = 8

    length = fields.StructField('i', default=TAG_SIZE)
    tag    = fields.StringField(TAG_SIZE, default=END_TAG.encode('latin1'))

    @classmethod
    def for_tag(cls, tag: str, payload_length: int = 0) -> "BiffHeader":
        header = cls()
        header.length.value = payload_length + TAG_SIZE
        header.tag.value = tag.encode('latin1')

        return header

    @property
    def tag_name(self) -> str:
        return self.tag.value.decode('latin1')

    @property
    def payload_length(self) -> int:
        return self.length.value - TAG_SIZE


def read_payload(stream, header: BiffHeader) -> bytes:
    '''Read the payload declared by the header, refusing lengths that
    don't fit into what is left of the stream.'''
    length = header.payload_length

    if length < 0 or length > stream.remaining():
        raise ChunkUnpackException(
            [header.tag_name],
            f'record \'{header.tag_name}\' at offset 0x{header.offset:x} declares {length} bytes of payload'
            f' but {stream.remaining()} are available',
        )

    return stream.read(length)


def write_record(stream, tag: str, payload: bytes = b''):
    BiffHeader.for_tag(tag, len(payload)).pack(stream)
    stream.write(payload)
