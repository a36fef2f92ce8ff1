from __future__ import annotations
from typing import Union

from .codecs.addressor import locate
from .codecs.bitview import BitView, byte_length
from .reader import extract, read_field
from .writer import write_field
from bitlab.models.address import BitAddress
from bitlab.models.common import IntType, MAX_WIDTH

Buffer = Union[bytes, bytearray, memoryview]

# Byte-sequence access. ``bit_offset`` may exceed 7; it carries into the
# following bytes. Writers need a mutable buffer and change it in place.


def address_of(data: Buffer, byte_offset: int, bit_offset: int, width: int,
               capacity: int = MAX_WIDTH) -> tuple[BitView, BitAddress]:
    # validate before taking an export of the caller's buffer
    address = locate(byte_length(data) * 8, byte_offset, bit_offset, width, capacity)
    return BitView(data), address


def get_bit(data: Buffer, byte_offset: int, bit_offset: int) -> bool:
    view, address = address_of(data, byte_offset, bit_offset, 1)
    return bool(read_field(view, address))

def set_bit(data: Buffer, byte_offset: int, bit_offset: int) -> None:
    view, address = address_of(data, byte_offset, bit_offset, 1)
    write_field(view, address, 1)

def clear_bit(data: Buffer, byte_offset: int, bit_offset: int) -> None:
    view, address = address_of(data, byte_offset, bit_offset, 1)
    write_field(view, address, 0)


def get(data: Buffer, target: IntType | str, byte_offset: int, bit_offset: int, width: int) -> int:
    target = IntType(target)
    view, address = address_of(data, byte_offset, bit_offset, width, target.bits)
    return extract(view, address, target)

def get_u8(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int:  return get(data, IntType.U8, byte_offset, bit_offset, width)
def get_u16(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.U16, byte_offset, bit_offset, width)
def get_u32(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.U32, byte_offset, bit_offset, width)
def get_u64(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.U64, byte_offset, bit_offset, width)
def get_i8(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int:  return get(data, IntType.I8, byte_offset, bit_offset, width)
def get_i16(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.I16, byte_offset, bit_offset, width)
def get_i32(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.I32, byte_offset, bit_offset, width)
def get_i64(data: Buffer, byte_offset: int, bit_offset: int, width: int) -> int: return get(data, IntType.I64, byte_offset, bit_offset, width)


def set_bits(data: Buffer, byte_offset: int, bit_offset: int, width: int, value: int) -> None:
    """Overwrite ``width`` bits (at most 64) with the low bits of ``value``."""
    view, address = address_of(data, byte_offset, bit_offset, width)
    write_field(view, address, value)
