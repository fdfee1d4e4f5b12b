import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file objects to
    uniform their properties: the codec only needs sequential reads and
    writes plus the occasional seek() for reserved bytes.'''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.flags = flags
        self.obj = obj
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' cannot be used as a stream' % self.obj.__class__.__name__)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.obj.close()

    def __del__(self):
        close = getattr(self.__dict__.get('obj'), 'close', None)
        if close is not None:
            close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def seek(self, offset, whence=io.SEEK_SET):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset, whence)

        return self

    def skip(self, n):
        '''Advance the cursor by n bytes without interpreting them.'''
        self.obj.seek(n, io.SEEK_CUR)

        return self

    def read_all(self):
        return self.obj.read()

    def is_eof(self):
        self.save()
        data = self.obj.read(1)
        self.restore()

        return len(data) == 0

    def remaining(self):
        '''Number of bytes between the cursor and the end of the stream.'''
        self.save()
        position = self.obj.tell()
        end = self.obj.seek(0, io.SEEK_END)
        self.restore()

        return end - position

    def write(self, data):
        return self.obj.write(data)

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
