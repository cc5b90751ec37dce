"""
A Field is "fundamental" datatype from the format point of view: it knows its size
and how to translate a value to and from its binary representation.

Fields don't hold any value, the chunk owns the values and uses the fields
declared as class attributes to describe its layout.
"""
import copy
import logging
import struct

from .enum import Endianess
from .exceptions import BufferTooShortException


class Field(object):
    """Base class to subclass from"""

    def __init__(self, name=None, endianess=Endianess.BIG_ENDIAN):
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.endianess = endianess

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def pack(self, value) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack_raw(self, raw):
        raise NotImplementedError('you need to implement this in the subclass')

    def read(self, stream) -> bytes:
        '''Read exactly size bytes from the stream: a short read means
        the buffer does not contain the field at all.'''
        raw = stream.read(self.size)
        self.logger.debug('reading %s from %r' % (self.name, raw))

        if len(raw) != self.size:
            raise BufferTooShortException(chain=[self.name], expected=self.size, actual=len(raw))

        return raw

    def unpack(self, stream):
        return self.unpack_raw(self.read(stream))


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, **kw):
        self.format = format
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s, %s)>' % (self.__class__.__name__, self.name, self.get_format())

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def swapped(self):
        '''Return the same field with the opposite byte order.'''
        field = copy.copy(self)
        field.endianess = Endianess.BIG_ENDIAN \
            if self.endianess == Endianess.LITTLE_ENDIAN else Endianess.LITTLE_ENDIAN
        return field

    def pack(self, value) -> bytes:
        return struct.pack(self.get_format(), value)

    def unpack_raw(self, raw: bytes) -> int:
        try:
            unpacked_value = struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            self.logger.error(e)
            raise BufferTooShortException(chain=[self.name], expected=self.size, actual=len(raw)) from e

        return unpacked_value


class StringField(Field):
    """Represent a contiguous chunk of bytes of fixed length."""

    def __init__(self, n, **kw):
        self.length = n
        super().__init__(**kw)

    def __len__(self):
        return self.length

    def _get_size(self):
        return self.length

    def pack(self, value) -> bytes:
        if len(value) != self.length:
            raise ValueError(f"field '{self.name}' can only accept binary strings of length {self.length}")

        return bytes(value)

    def unpack_raw(self, raw: bytes) -> bytes:
        return raw


class PaddingField(Field):
    '''Takes as much stream as possible, leaving out only the bytes
    needed by the fields that follow (the "tail").'''

    def __init__(self, tail=0, **kw):
        self.tail = tail
        super().__init__(**kw)

    def _get_size(self):
        raise AttributeError(f"field '{self.name}' doesn't have a fixed size")

    def pack(self, value) -> bytes:
        return bytes(value)

    def unpack(self, stream):
        raw = stream.read_until_tail(self.tail)
        self.logger.debug('unpacking %s: %d bytes' % (self.name, len(raw)))
        return raw
