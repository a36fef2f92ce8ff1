from __future__ import annotations
from enum import Enum

class IntType(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value[0] == "i"

    @property
    def fmt(self) -> str:
        """Big-endian struct format for one value of this type."""
        return _STRUCT_FORMATS[self]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


_STRUCT_FORMATS = {
    IntType.U8: ">B", IntType.I8: ">b",
    IntType.U16: ">H", IntType.I16: ">h",
    IntType.U32: ">I", IntType.I32: ">i",
    IntType.U64: ">Q", IntType.I64: ">q",
}

# Widest field any request can address.
MAX_WIDTH = 64
