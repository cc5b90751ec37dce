import pytest

from pngchunk.exceptions import InvalidTypeCodeException, TextRenderException
from pngchunk.typecode import TypeCode


def test_typecode_from_bytes():
    code = TypeCode([82, 117, 83, 116])

    assert code.raw == bytes([82, 117, 83, 116])
    assert bytes(code) == b'RuSt'


def test_typecode_from_str():
    assert TypeCode.from_str('RuSt') == TypeCode(b'RuSt')
    assert TypeCode.from_str('RuSt') != TypeCode(b'RUST')


def test_typecode_from_bytes_is_structural_only():
    """Any four bytes are accepted when building from raw bytes, only the size is checked."""
    code = TypeCode(b'\x00\x01\xff1')

    assert not code.is_alphanumeric_code()
    assert not code.is_valid()

    with pytest.raises(ValueError):
        TypeCode(b'RuStX')

    with pytest.raises(ValueError):
        TypeCode(b'Ru')


@pytest.mark.parametrize('text', ['Ru1t', 'RuS', 'RuStt', '', 'Rüst', 'Ru t'])
def test_typecode_from_str_invalid(text):
    with pytest.raises(InvalidTypeCodeException) as e:
        TypeCode.from_str(text)

    assert e.value.value == text


def test_typecode_properties():
    code = TypeCode.from_str('RuSt')

    assert code.is_critical()
    assert not code.is_public()
    assert code.is_reserved_bit_valid()
    assert code.is_safe_to_copy()
    assert code.is_valid()


def test_typecode_single_property_bits():
    """Each property depends only on the case of its own letter."""
    assert not TypeCode.from_str('ruSt').is_critical()
    assert TypeCode.from_str('RUSt').is_public()
    assert not TypeCode.from_str('Rust').is_reserved_bit_valid()
    assert not TypeCode.from_str('RuST').is_safe_to_copy()


def test_typecode_reserved_bit_is_not_checked_from_str():
    code = TypeCode.from_str('Rust')

    assert code.is_alphanumeric_code()
    assert not code.is_valid()


def test_typecode_well_known():
    ihdr = TypeCode.from_str('IHDR')
    assert ihdr.is_critical() and ihdr.is_public() and not ihdr.is_safe_to_copy()

    text = TypeCode.from_str('tEXt')
    assert not text.is_critical() and text.is_public() and text.is_safe_to_copy()


def test_typecode_is_valid_byte():
    assert TypeCode.is_valid_byte(ord('A'))
    assert TypeCode.is_valid_byte(ord('z'))
    assert not TypeCode.is_valid_byte(ord('@'))
    assert not TypeCode.is_valid_byte(ord('['))
    assert not TypeCode.is_valid_byte(ord('`'))
    assert not TypeCode.is_valid_byte(ord('{'))


def test_typecode_str():
    assert str(TypeCode.from_str('RuSt')) == 'RuSt'
    assert repr(TypeCode(b'RuSt')) == "<TypeCode(b'RuSt')>"


def test_typecode_str_not_utf8():
    code = TypeCode(b'\xffRuS')

    with pytest.raises(TextRenderException) as e:
        str(code)

    assert e.value.raw == b'\xffRuS'
    # the representation is always available
    assert repr(code) == "<TypeCode(b'\\xffRuS')>"


def test_typecode_is_immutable_and_hashable():
    code = TypeCode.from_str('RuSt')

    with pytest.raises(AttributeError):
        code._raw = b'IEND'

    assert len({code, TypeCode(b'RuSt'), TypeCode(b'IEND')}) == 2


def test_typecode_property_bits_from_raw():
    """The property bits are read the same whatever bytes-like builds the code."""
    for raw in (b'RuSt', bytearray(b'RuSt'), [82, 117, 83, 116]):
        code = TypeCode(raw)

        assert code.is_critical()
        assert not code.is_public()
        assert code.is_reserved_bit_valid()
        assert code.is_safe_to_copy()

    code = TypeCode(b'\x00\xff\x20\x20')
    assert code.is_critical()
    assert not code.is_public()
    assert not code.is_reserved_bit_valid()
    assert code.is_safe_to_copy()
