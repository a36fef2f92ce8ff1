import pytest

from bitlab.binary.codecs.addressor import locate
from bitlab.binary.codecs.bitview import BitView, pack_integer, unpack_integer
from bitlab.binary.reader import bit_string, extract, read_field, sign_extend
from bitlab.binary.writer import write_field
from bitlab.models.address import BitAddress
from bitlab.models.common import IntType


def test_read_three_bits_unsigned_and_signed():
    view = BitView(bytes([0b1101_1111]))
    addr = BitAddress(start_byte=0, start_bit=1, width=3)
    assert read_field(view, addr) == 0b101
    assert extract(view, addr, IntType.U8) == 5
    assert extract(view, addr, IntType.I8) == -3
    assert bit_string(view, addr) == "101"


def test_sign_extend():
    assert sign_extend(0b101, 3) == -3
    assert sign_extend(0b011, 3) == 3
    assert sign_extend(0xFF, 8) == -1
    assert sign_extend(1, 1) == -1
    assert sign_extend(1 << 63, 64) == -(1 << 63)


def test_read_64_bits_across_nine_bytes():
    data = bytes([0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC, 0xDE, 0xF0, 0x11])
    addr = locate(len(data) * 8, 0, 4, 64, 64)
    expected = (int.from_bytes(data, "big") >> 4) & ((1 << 64) - 1)
    assert read_field(BitView(data), addr) == expected


def test_write_preserves_neighbouring_bits():
    data = bytearray(b"\xff\xff\xff")
    write_field(BitView(data), locate(24, 0, 5, 10, 64), 0)
    assert int.from_bytes(data, "big") == 0xFFFFFF & ~(0x3FF << 9)


def test_write_truncates_value_to_width():
    data = bytearray(1)
    write_field(BitView(data), BitAddress(start_byte=0, start_bit=0, width=4), 0xFF)
    assert data[0] == 0xF0

    data = bytearray(1)
    write_field(BitView(data), BitAddress(start_byte=0, start_bit=2, width=3), -1)
    assert data[0] == 0b0011_1000


def test_write_into_readonly_source_fails_untouched():
    data = b"\x00\x00"
    with pytest.raises(TypeError):
        write_field(BitView(data), BitAddress(start_byte=0, start_bit=4, width=8), 0xFF)
    assert data == b"\x00\x00"


def test_set_then_get_keeps_other_bits():
    pattern = bytes([0xA5] * 10)
    total = len(pattern) * 8
    for start in range(16):
        for width in (1, 7, 9, 17, 33, 64):
            data = bytearray(pattern)
            view = BitView(data)
            addr = locate(total, 0, start, width, 64)
            value = 0x0123456789ABCDEF & ((1 << width) - 1)
            write_field(view, addr, value)
            assert read_field(view, addr) == value

            mask = ((1 << width) - 1) << (total - start - width)
            before = int.from_bytes(pattern, "big")
            after = int.from_bytes(data, "big")
            assert (before ^ after) & ~mask == 0

            if width >= 4:
                write_field(view, addr, -5)
                assert extract(view, addr, IntType.I64) == -5


def test_pack_integer_range():
    assert pack_integer(IntType.I16, -2) == bytearray(b"\xff\xfe")
    assert unpack_integer(IntType.I16, b"\xff\xfe") == -2
    with pytest.raises(ValueError):
        pack_integer(IntType.U8, 256)
    with pytest.raises(ValueError):
        pack_integer(IntType.I8, -129)
