class ChunkException(Exception):
    '''Base class to extend in order to throw exception in pngchunk.'''
    pass


class InvalidTypeCodeException(ChunkException):
    '''The value used to build a type code is not made of 4 ASCII letters.'''

    def __init__(self, value):
        self.value = value
        super().__init__(f'{value!r} is not a valid type code (4 ASCII letters are needed)')


class UnpackException(ChunkException):
    '''Raised when a buffer doesn't represent a valid chunk.

    It takes the chain of the fields that caused the exception together
    with the value expected by the format and the one actually found.
    '''

    def __init__(self, chain, expected, actual):
        self.chain = chain
        self.expected = expected
        self.actual = actual
        super().__init__(self.describe())

    def describe(self):
        where = '.'.join(self.chain) or 'buffer'
        return f'{where}: expected {self.expected!r}, found {self.actual!r}'


class BufferTooShortException(UnpackException):
    pass


class LengthMismatchException(UnpackException):
    pass


class CRCMismatchException(UnpackException):
    pass


class TextDecodeException(ChunkException):
    '''The data of a chunk is not valid UTF-8.'''

    def __init__(self, raw, reason):
        self.raw = raw
        self.reason = reason
        super().__init__(f'data is not valid UTF-8: {reason}')


class TextRenderException(ChunkException):
    '''The raw bytes of a type code can't be rendered as text.'''

    def __init__(self, raw, reason):
        self.raw = raw
        self.reason = reason
        super().__init__(f'type code {raw!r} is not valid UTF-8: {reason}')
