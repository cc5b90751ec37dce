"""
# PNG chunks for humans.

A chunk is the self-describing record PNG-style containers are made of

    offset  size  field
    0       4     length: number of bytes of data, big-endian
    4       4     type code: 4 ASCII letters
    8       N     data
    8+N     4     crc: CRC-32 of type code and data, big-endian

Two basic main operations are defined for a chunk:

 1. unpack(): reading the binary data, checking length and crc, and
    building a high-level representation of that.

 2. pack(): encode the high-level representation into binary data.

Length and crc are never stored, they are derived from the type code and
the data every time they are needed.

"""
from .core import Record, to_bytes, parse
from .enum import Compliant, Endianess
from .typecode import TypeCode
from .exceptions import (
    ChunkException,
    InvalidTypeCodeException,
    UnpackException,
    BufferTooShortException,
    LengthMismatchException,
    CRCMismatchException,
    TextDecodeException,
    TextRenderException,
)
