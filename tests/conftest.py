import logging
import os
import struct

import pytest


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_raw_chunk(length, type_code, data, crc, length_format='>I', crc_format='>I'):
    return struct.pack(length_format, length) + type_code + data + struct.pack(crc_format, crc)


@pytest.fixture
def message():
    return MESSAGE


@pytest.fixture
def raw_chunk():
    """The serialized chunk of type 'RuSt' carrying MESSAGE."""
    return build_raw_chunk(len(MESSAGE), b'RuSt', MESSAGE, MESSAGE_CRC)


@pytest.fixture
def message_crc():
    return MESSAGE_CRC


@pytest.fixture
def build_chunk():
    return build_raw_chunk
