'''
# BIFF streams

The table items are saved as a sequence of tagged records

  .-----------------.
  | length | tag    | payload ...
  | length | tag    | payload ...
    ...
  | 4      | ENDB   |
  '-----------------'

A BiffData class declares which tags it understands through its attributes,
the mapping from tag to attribute is built once by the metaclass so decoding
a record is a single lookup. Records with a tag nobody declared are skipped
using their length: files written by newer versions can still be read (but
what is not understood is lost when writing them back).
'''
import logging
from typing import List, Tuple

from ..meta import MetaChunk
from ..streams import Stream
from ..exceptions import (
    ChunkUnpackException,
    MalformedRecordException,
    UnpackException,
    UnsupportedPayloadException,
)
from .attributes import BiffAttribute
from .records import BiffHeader, END_TAG, read_payload, write_record


class BiffData(metaclass=MetaChunk):
    '''Base class for the items saved as BIFF streams.'''

    def __init__(self, source=None, **kwargs):
        self.logger = logging.getLogger(__name__)
        self.offset = None

        for name, attribute in self.get_attributes():
            setattr(self, name, attribute.value_from_default())

        for name, value in kwargs.items():
            if name not in self._meta.attributes:
                raise AttributeError(f'{self.__class__.__name__} has no attribute named \'{name}\'')
            setattr(self, name, value)

        if source is not None:
            self.unpack(source if isinstance(source, Stream) else Stream(source))

    @classmethod
    def get_attributes(cls) -> List[Tuple[str, BiffAttribute]]:
        return [(_, getattr(cls, _)) for _ in cls._meta.attributes]

    @property
    def value(self):
        return {name: getattr(self, name) for name in self._meta.attributes}

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        return self.value == other.value

    __hash__ = None

    def __repr__(self):
        msg = []
        for name in self._meta.attributes:
            msg.append('%s=%r' % (name, getattr(self, name)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for name in self._meta.attributes:
            msg += '%s: %r\n' % (name, getattr(self, name))
        return msg

    def unpack(self, stream):
        '''Read records until the end tag (or the end of the stream).

        The order of the records doesn't matter, except for the sequences
        where it's the order of the resulting list.'''
        self.offset = stream.tell()

        while not stream.is_eof():
            header = BiffHeader()
            header.unpack(stream)

            tag = header.tag_name

            if tag == END_TAG:
                read_payload(stream, header)
                self.logger.debug('%s: end tag at offset 0x%x', self.__class__.__name__, header.offset)
                return self

            attribute = self._meta.tags.get(tag)

            if attribute is None:
                self.logger.debug('%s: skipping unknown tag \'%s\' (%d bytes)', self.__class__.__name__, tag, header.payload_length)
                read_payload(stream, header)
                continue

            self.logger.debug('%s: unpacking \'%s\' into \'%s\'', self.__class__.__name__, tag, attribute.name)

            try:
                attribute.unpack(self, stream, header)
            except MalformedRecordException as e:
                e.chain.append(self.__class__.__name__)
                raise
            except (UnpackException, ChunkUnpackException) as e:
                raise ChunkUnpackException(
                    e.chain + [self.__class__.__name__],
                    f'{self.__class__.__name__}.{attribute.name} (\'{tag}\') at offset 0x{header.offset:x}: {e}',
                ) from e

        self.logger.debug('%s: stream ended without \'%s\'', self.__class__.__name__, END_TAG)

        return self

    def pack(self, stream=None):
        '''Write one record for each attribute not at its default value, in
        declaration order, then the end tag.

        The records are encoded apart and written only once all of them are,
        a value that cannot be encoded leaves the stream untouched.'''
        stream = Stream(b'') if stream is None else stream
        records = Stream(b'')

        for name, attribute in self.get_attributes():
            self.logger.debug('packing %s.%s' % (self.__class__.__name__, name))
            try:
                attribute.pack(self, records)
            except UnsupportedPayloadException as e:
                e.chain.extend([attribute.tag, self.__class__.__name__])
                raise

        write_record(records, END_TAG)

        self.offset = stream.tell()
        stream.write(records.getvalue())

        return stream.getvalue()
