from __future__ import annotations

from pathlib import Path
from typing import Union

from .codecs.bitview import BitView
from bitlab.models.address import BitAddress
from bitlab.models.common import IntType

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()


def read_field(view: BitView, address: BitAddress) -> int:
    """
    Collect the field's bits into an unsigned integer, first bit most
    significant. Touches only the bytes the field spans.
    """
    acc = 0
    pos, end = address.absolute, address.end
    while pos < end:
        index, offset = divmod(pos, 8)
        take = min(8 - offset, end - pos)
        shift = 8 - offset - take
        acc = (acc << take) | ((view.byte(index) >> shift) & ((1 << take) - 1))
        pos += take
    return acc


def sign_extend(raw: int, width: int) -> int:
    """Two's-complement value of a ``width``-bit field."""
    sign = 1 << (width - 1)
    return (raw & (sign - 1)) - (raw & sign)


def extract(view: BitView, address: BitAddress, target: IntType) -> int:
    raw = read_field(view, address)
    return sign_extend(raw, address.width) if target.signed else raw


def bit_string(view: BitView, address: BitAddress) -> str:
    return format(read_field(view, address), f"0{address.width}b")
