from __future__ import annotations
import logging

from .codecs.bitview import BitView
from bitlab.models.address import BitAddress

logger = logging.getLogger(__name__)


def write_field(view: BitView, address: BitAddress, value: int) -> None:
    """
    Store the low ``address.width`` bits of ``value`` (two's complement for
    negative values) into the field. Bits outside the field keep their
    current value.
    """
    if view.readonly:
        raise TypeError("cannot write into a read-only source")

    value &= (1 << address.width) - 1
    pos, end = address.absolute, address.end
    while pos < end:
        index, offset = divmod(pos, 8)
        take = min(8 - offset, end - pos)
        shift = 8 - offset - take
        mask = ((1 << take) - 1) << shift
        bits = (value >> (end - pos - take)) & ((1 << take) - 1)
        view.put(index, (view.byte(index) & ~mask) | ((bits << shift) & mask))
        pos += take

    logger.debug(
        "patched bits %d..%d (bytes %d..%d) with %#x",
        address.absolute, end - 1, address.start_byte, address.last_byte, value,
    )
