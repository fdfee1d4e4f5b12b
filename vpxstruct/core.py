"""
Core module for the abstraction of a fixed-size record

"""
from typing import Tuple, List, Dict

from .fields import Field
from .enum import Compliant
from .meta import MetaChunk
from .streams import Stream
from .exceptions import (
    ChunkUnpackException,
    UnpackException,
    TruncatedException,
    ReservedBytesException,
    MalformedRecordException,
    UnsupportedPayloadException,
)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a Chunk is an
    ordered sequence of fields, each one following the previous.

    A Chunk can contain sub-chunks.

    If SIZE is declared the record has a fixed length: unpacking must leave the
    cursor exactly SIZE bytes after where it started, otherwise MalformedRecordException
    is raised carrying the number of bytes left unconsumed.
    """
    SIZE = None
    DEFAULT_COMPLIANT = Compliant.INHERIT

    def __init__(self, filepath=None, **kwargs):
        kwargs.setdefault('compliant', self.DEFAULT_COMPLIANT)
        if filepath is not None and not isinstance(filepath, Stream):
            filepath = Stream(filepath)
        self.stream = filepath
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if self.stream:
            self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, self.stream))
            self.unpack(self.stream)
        else:
            self.relayout()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, str(field))
        return msg

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        return self.value == other.value

    __hash__ = None

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self) -> Dict[str, object]:
        return {name: field.value for name, field in self.get_fields()}

    def _set_value(self, value) -> None:
        for name, field_value in value.items():
            getattr(self, name).value = field_value

    def _get_size(self):
        '''the size is derived from the subchunks'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    def _get_raw(self) -> bytes:
        value = b''
        for field_name, field_instance in self.get_fields():
            try:
                field_raw = field_instance.raw
            except UnsupportedPayloadException as e:
                e.chain.append(field_name)
                raise
            self.logger.debug("field '{}' raw={}".format(field_name, field_raw))
            value += field_raw

        return value

    def _set_raw(self, raw: bytes) -> None:
        self.unpack(Stream(raw))

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def relayout(self, offset=0):
        '''Reset the offsets of the children starting from the given one.'''
        self.offset = offset

        size = 0
        for field_name, field_instance in self.get_fields():
            self.logger.debug('relayouting %s.%s' % (self.__class__.__name__, field_name))
            size += field_instance.relayout(offset=offset + size)

        return size

    def pack(self, stream=None):
        '''Encode the record and append it to the stream.

        The whole record is encoded before anything is written so that a value
        that doesn't fit leaves the stream untouched.'''
        raw = self.raw

        if self.SIZE is not None and len(raw) != self.SIZE:
            raise MalformedRecordException(
                [], self.__class__.__name__, self.offset or 0, self.SIZE - len(raw))

        stream = Stream(b'') if stream is None else stream
        self.relayout(offset=stream.tell())
        stream.write(raw)

        return stream.getvalue()

    def _malformed(self, chain, start, stream):
        return MalformedRecordException(
            chain,
            self.__class__.__name__,
            start,
            self.SIZE - (stream.tell() - start),
        )

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The fields are read in declaration order starting from the actual
        position of the stream.'''
        start = stream.tell()
        self.offset = start

        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except MalformedRecordException as e:
                e.chain.append(field_name)
                raise
            except (TruncatedException, ReservedBytesException) as e:
                chain = e.chain + [field_name]
                if self.SIZE is not None:
                    raise self._malformed(chain, start, stream) from e
                raise ChunkUnpackException(chain, str(e)) from e
            except (UnpackException, ChunkUnpackException) as e:
                raise ChunkUnpackException(e.chain + [field_name], str(e)) from e

        if self.SIZE is not None and stream.tell() - start != self.SIZE:
            raise self._malformed([], start, stream)

        return self
