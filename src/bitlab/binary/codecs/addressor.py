from __future__ import annotations
import logging
from bitlab.models.address import BitAddress

logger = logging.getLogger(__name__)


class BitRangeError(ValueError):
    """Base class for rejected field requests."""


class StartOffsetTooBig(BitRangeError):
    """The first bit of the field does not exist in the source."""


class NumberOfBitsTooBigForOutputType(BitRangeError):
    """The field is wider than the requested integer type."""


class OutOfRange(BitRangeError):
    """The field runs past the end of the source."""


def locate(
    bit_length: int,
    start_byte: int,
    start_bit: int,
    width: int,
    capacity: int,
) -> BitAddress:
    """
    Validate a field request against a source of ``bit_length`` bits and a
    target type of ``capacity`` bits. Returns the normalised address
    (``start_bit`` folded into 0..7) or raises a BitRangeError subclass.
    """
    start = start_byte * 8 + start_bit
    if start_byte < 0 or start_bit < 0 or start >= bit_length:
        logger.debug("rejected start byte=%d bit=%d in %d bits", start_byte, start_bit, bit_length)
        raise StartOffsetTooBig(
            f"start byte {start_byte} bit {start_bit} is outside a {bit_length}-bit source"
        )
    if width > capacity:
        logger.debug("rejected width %d for %d-bit output", width, capacity)
        raise NumberOfBitsTooBigForOutputType(
            f"{width} bits do not fit a {capacity}-bit output type"
        )
    if width < 1:
        logger.debug("rejected empty field width %d", width)
        raise OutOfRange(f"field width must be at least 1, got {width}")
    if start + width > bit_length:
        logger.debug("rejected field %d+%d past %d bits", start, width, bit_length)
        raise OutOfRange(
            f"bits {start}..{start + width - 1} run past the end of a {bit_length}-bit source"
        )
    return BitAddress(start_byte=start // 8, start_bit=start % 8, width=width)
