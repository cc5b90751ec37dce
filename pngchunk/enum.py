from enum import Enum, Flag, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE       = 0
    BYTE_ORDER = 1 << 0  # length and crc only in network byte order
    TYPE_CODE  = 1 << 1  # reserved bit and letters checked on the type code
    STRICT     = BYTE_ORDER | TYPE_CODE
