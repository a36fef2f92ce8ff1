from __future__ import annotations

from .codecs.addressor import locate
from .codecs.bitview import BitView, pack_integer, unpack_integer
from .reader import extract, read_field
from .writer import write_field
from bitlab.models.common import IntType


class Integral:
    """
    A fixed-width integer addressed as bits, MSB first.

    Offsets count from the most significant bit of the value's big-endian
    representation. Setters return the new value; the instance is never
    modified.
    """
    __slots__ = ("kind", "value")

    def __init__(self, kind: IntType | str, value: int):
        self.kind = IntType(kind)
        pack_integer(self.kind, value)
        self.value = value

    def __repr__(self) -> str:
        return f"Integral({self.kind.value}, {self.value})"

    def _view(self) -> BitView:
        return BitView(pack_integer(self.kind, self.value))

    def _get(self, target: IntType, start: int, width: int) -> int:
        address = locate(self.kind.bits, 0, start, width, target.bits)
        view = self._view()
        return extract(view, address, target)

    def _put(self, start: int, width: int, field: int) -> int:
        address = locate(self.kind.bits, 0, start, width, self.kind.bits)
        view = self._view()
        write_field(view, address, field)
        return unpack_integer(self.kind, view.buf)

    # single bits
    def get_bit(self, offset: int) -> bool:
        address = locate(self.kind.bits, 0, offset, 1, 1)
        return bool(read_field(self._view(), address))

    def set_bit(self, offset: int) -> int: return self._put(offset, 1, 1)
    def clear_bit(self, offset: int) -> int: return self._put(offset, 1, 0)

    # fields
    def get_u8(self, start: int, width: int) -> int:  return self._get(IntType.U8, start, width)
    def get_u16(self, start: int, width: int) -> int: return self._get(IntType.U16, start, width)
    def get_u32(self, start: int, width: int) -> int: return self._get(IntType.U32, start, width)
    def get_u64(self, start: int, width: int) -> int: return self._get(IntType.U64, start, width)
    def get_i8(self, start: int, width: int) -> int:  return self._get(IntType.I8, start, width)
    def get_i16(self, start: int, width: int) -> int: return self._get(IntType.I16, start, width)
    def get_i32(self, start: int, width: int) -> int: return self._get(IntType.I32, start, width)
    def get_i64(self, start: int, width: int) -> int: return self._get(IntType.I64, start, width)

    def get(self, target: IntType | str, start: int, width: int) -> int:
        return self._get(IntType(target), start, width)

    def set(self, start: int, width: int, field: int) -> int:
        """Return the value with ``width`` bits at ``start`` replaced by ``field``."""
        return self._put(start, width, field)


def set_u8(value: int, start: int, width: int, field: int) -> int:  return Integral(IntType.U8, value).set(start, width, field)
def set_u16(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.U16, value).set(start, width, field)
def set_u32(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.U32, value).set(start, width, field)
def set_u64(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.U64, value).set(start, width, field)
def set_i8(value: int, start: int, width: int, field: int) -> int:  return Integral(IntType.I8, value).set(start, width, field)
def set_i16(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.I16, value).set(start, width, field)
def set_i32(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.I32, value).set(start, width, field)
def set_i64(value: int, start: int, width: int, field: int) -> int: return Integral(IntType.I64, value).set(start, width, field)
