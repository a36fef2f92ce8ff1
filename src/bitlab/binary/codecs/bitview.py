from __future__ import annotations
import struct
from bitlab.models.common import IntType

class BitView:
    """Bit-addressable view over a contiguous byte buffer (no copy)."""
    __slots__ = ("buf",)

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data).cast("B")

    def __len__(self) -> int: return len(self.buf)
    def bit_length(self) -> int: return len(self.buf) * 8

    @property
    def readonly(self) -> bool: return self.buf.readonly

    def byte(self, index: int) -> int: return self.buf[index]

    def put(self, index: int, value: int) -> None:
        if self.buf.readonly: raise TypeError("cannot write into a read-only source")
        self.buf[index] = value & 0xFF


def byte_length(data: bytes | bytearray | memoryview) -> int:
    """Size in bytes, without keeping an export of ``data``."""
    with memoryview(data) as mv:
        return mv.nbytes


# single integers are addressed through their big-endian bytes
def pack_integer(kind: IntType, value: int) -> bytearray:
    try:
        return bytearray(struct.pack(kind.fmt, value))
    except struct.error as e:
        raise ValueError(f"{value} does not fit in {kind.value} ({kind.min}..{kind.max})") from e

def unpack_integer(kind: IntType, raw: bytes | bytearray | memoryview) -> int:
    return struct.unpack(kind.fmt, raw)[0]
