class VPXStructException(Exception):
    '''Base class to extend in order to throw exception in vpxstruct.

    It takes a single argument that represents the chain of the layer that
    caused the exception (innermost first).
    '''

    def __init__(self, chain, *args):
        self.chain = chain
        super().__init__(*args)

    @property
    def path(self):
        return '.'.join(self.chain[::-1])


class UnpackException(VPXStructException):
    pass


class TruncatedException(UnpackException):
    '''The stream ended before the field could be read.'''
    pass


class ChunkUnpackException(VPXStructException):
    pass


class ReservedBytesException(UnpackException):
    '''Reserved bytes that should be zero are not.'''
    pass


class MalformedRecordException(VPXStructException):
    '''A fixed-size record was not consumed exactly.

    The cursor position past this point cannot be trusted, so this is never
    recovered from: the decode of the whole stream must be abandoned.'''

    def __init__(self, chain, record, offset, remaining):
        self.record = record
        self.offset = offset
        self.remaining = remaining
        super().__init__(chain)

    def __str__(self):
        where = f" (field '{self.path}')" if self.chain else ''
        return f'{self.record} at offset 0x{self.offset:x}{where}: there are still {self.remaining} bytes left to read'


class UnsupportedPayloadException(VPXStructException):
    '''The value does not fit into the space the format reserves for it.'''
    pass


class UnsupportedItemException(VPXStructException):
    pass


class BitmapSizeException(ChunkUnpackException):
    '''The uncompressed pixels don't cover the declared size of the image.'''

    def __init__(self, chain, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(chain, f'{expected} bytes of pixels expected, got {actual} ({actual - expected:+d})')
