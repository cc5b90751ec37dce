"""
Core module for the chunk, the record format used by PNG-style containers

"""
import logging
from typing import List, Tuple

from . import fields
from .common import crc
from .enum import Compliant
from .streams import Stream
from .typecode import TypeCode, TYPE_CODE_SIZE
from .exceptions import (
    BufferTooShortException,
    CRCMismatchException,
    InvalidTypeCodeException,
    LengthMismatchException,
    TextDecodeException,
    TextRenderException,
)


logger = logging.getLogger(__name__)


class Record(object):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into a file. Each integer field is intended big-endian.

    Only the type code and the data are stored: the length and the crc are
    derived from them every time they are needed.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    Building a record directly doesn't check the type code, the validation
    happens when a record is unpacked from a buffer.
    '''
    length_field = fields.StructField('I', name='length')  # big endian
    type_field   = fields.StringField(TYPE_CODE_SIZE, name='type')
    data_field   = fields.PaddingField(tail=4, name='data')
    crc_field    = crc.CRCField(['type', 'data'], name='crc')  # network byte order

    MIN_SIZE = length_field.size + type_field.size + crc_field.size

    def __init__(self, type_code: TypeCode, data):
        self._type_code = type_code
        self._data = memoryview(data).tobytes()

    @property
    def type_code(self) -> TypeCode:
        return self._type_code

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def crc(self) -> int:
        return self.crc_field.calculate(self)

    @property
    def size(self) -> int:
        return self.MIN_SIZE + self.length

    def data_as_str(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextDecodeException(self._data, str(e)) from e

    def get_fields(self) -> List[Tuple[str, bytes]]:
        '''It returns a list of couples (name, raw) for each field but the crc,
        that is computed from them.'''
        return [
            (self.length_field.name, self.length_field.pack(self.length)),
            (self.type_field.name, self.type_field.pack(self._type_code.raw)),
            (self.data_field.name, self.data_field.pack(self._data)),
        ]

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented

        return (self._type_code, self._data) == (other._type_code, other._data)

    def __hash__(self):
        return hash((self._type_code, self._data))

    def __repr__(self):
        return '<%s(type=%r,length=%d)>' % (self.__class__.__name__, self._type_code, self.length)

    def __str__(self):
        try:
            type_text = str(self._type_code)
        except TextRenderException:
            # a type code unpacked without checks can hold any byte
            type_text = repr(self._type_code.raw)

        msg = ''
        msg += 'length: %d\n' % self.length
        msg += 'type: %s %s\n' % (type_text, list(self._type_code.raw))
        msg += 'data: %d bytes\n' % self.length
        msg += 'crc: %d\n' % self.crc
        return msg

    def pack(self) -> bytes:
        '''Encode the chunk: length, type, data and at the end the crc
        of type and data.'''
        value = b''
        for field_name, field_raw in self.get_fields():
            logger.debug('packing %s.%s (%d bytes)' % (self.__class__.__name__, field_name, len(field_raw)))
            value += field_raw

        return value + self.crc_field.pack(self.crc)

    @classmethod
    def unpack(cls, buffer, compliant=Compliant.NONE) -> "Record":
        '''Parse the first 4 bytes as the length of the data, the next 4 bytes as
        the type code; everything up to the last 4 bytes is the data and the last 4
        bytes are the crc.

        The declared length and crc are checked against the actual ones and, unless
        Compliant.BYTE_ORDER is requested, they can be in any byte order.
        With Compliant.TYPE_CODE the type code must be a valid one.
        '''
        stream = Stream(buffer)

        if stream.size < cls.MIN_SIZE:
            raise BufferTooShortException(chain=[], expected=cls.MIN_SIZE, actual=stream.size)

        logger.debug('unpacking \'%s\' from %r' % (cls.__name__, stream))

        raw_length = cls.length_field.read(stream)
        type_code = TypeCode(cls.type_field.unpack(stream))
        data = cls.data_field.unpack(stream)
        raw_crc = cls.crc_field.read(stream)

        record = cls(type_code, data)

        cls._validate(cls.length_field, raw_length, record.length, LengthMismatchException, compliant)
        cls._validate(cls.crc_field, raw_crc, record.crc, CRCMismatchException, compliant)

        if compliant & Compliant.TYPE_CODE and not type_code.is_valid():
            raise InvalidTypeCodeException(type_code.raw)

        return record

    @staticmethod
    def _validate(field, raw, actual, exc, compliant):
        declared = field.unpack_raw(raw)

        if declared == actual:
            return

        if not compliant & Compliant.BYTE_ORDER and field.swapped().unpack_raw(raw) == actual:
            logger.warning('field \'%s\' matches only as little endian' % field.name)
            return

        raise exc(chain=[field.name], expected=declared, actual=actual)


def to_bytes(record: Record) -> bytes:
    return record.pack()


def parse(buffer, compliant=Compliant.NONE) -> Record:
    return Record.unpack(buffer, compliant=compliant)
