'''
# Chunk type codes

A type code is made of four bytes, restricted to the ASCII letters A-Z and a-z
so that it can be read by humans.

Four bits of the type code, namely bit 5 (value 32) of each byte, are used
to convey chunk properties: since it's the bit that switches an ASCII letter
from upper to lower case, the properties can be read looking at the case of
each letter

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .exceptions import InvalidTypeCodeException, TextRenderException


TYPE_CODE_SIZE = 4

# index of bit 5 inside a byte when bits are numbered from the most significant one
_PROPERTY_BIT = 2


class TypeCode(object):
    '''Immutable four bytes identifier of a chunk.

    Building it from raw bytes doesn't check anything but the size, use
    from_str() to have the letters checked.'''

    __slots__ = ('_raw', '_bits')

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != TYPE_CODE_SIZE:
            raise ValueError(f'a type code must be {TYPE_CODE_SIZE} bytes long, not {len(raw)}')

        object.__setattr__(self, '_raw', raw)
        object.__setattr__(self, '_bits', Bits(raw))

    @classmethod
    def from_str(cls, text: str) -> "TypeCode":
        '''Note that we are only checking if the supplied bytes are letters, not if the
        reserved bit is actually valid.'''
        raw = text.encode('utf-8')
        if len(raw) != TYPE_CODE_SIZE:
            raise InvalidTypeCodeException(text)

        code = cls(raw)

        if not code.is_alphanumeric_code():
            raise InvalidTypeCodeException(text)

        return code

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __eq__(self, other):
        if not isinstance(other, TypeCode):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __str__(self):
        try:
            return self._raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextRenderException(self._raw, str(e)) from e

    @staticmethod
    def is_valid_byte(byte: int) -> bool:
        return 65 <= byte <= 90 or 97 <= byte <= 122

    def is_alphanumeric_code(self) -> bool:
        return all(TypeCode.is_valid_byte(_) for _ in self._raw)

    def is_valid(self) -> bool:
        return self.is_alphanumeric_code() and self.is_reserved_bit_valid()

    def _property_bit(self, index: int) -> bool:
        return self._bits[index * 8 + _PROPERTY_BIT]

    def is_critical(self) -> bool:
        # first byte holds the ancillary bit
        return not self._property_bit(0)

    def is_public(self) -> bool:
        # second byte holds the private bit
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)
