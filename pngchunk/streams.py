import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around the in-memory buffer a chunk is unpacked
    from: mainly we need to know how many bytes are left so that a field
    can take "everything but the last n bytes".'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise TypeError('\'%s\' is the wrong kind of buffer to use' % self.obj.__class__.__name__)

        init_method()

        self.obj.seek(0, io.SEEK_END)
        self.size = self.obj.tell()
        self.obj.seek(0)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(size=%d, offset=%d)>' % (self.__class__.__name__, self.size, self.tell())

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def remaining(self):
        return self.size - self.tell()

    def read_until_tail(self, n):
        '''Read everything from the actual offset leaving out the last n bytes
        of the buffer.'''
        count = max(self.remaining() - n, 0)
        logger.debug('reading %d bytes leaving a tail of %d' % (count, n))
        return self.read(count)
