from __future__ import annotations
import logging
from pydantic import BaseModel, Field

from bitlab.binary import sequence
from bitlab.binary.reader import BytesLike, load_bytes

logger = logging.getLogger(__name__)

HEADER_SIZE = 13  # 6-byte header + 7-byte logical screen descriptor
PACKED_OFFSET = 10


class GifFormatError(ValueError):
    pass


class ScreenDescriptor(BaseModel):
    version: str
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    global_color_table: bool
    color_resolution: int = Field(..., ge=0, le=7, description="bits per primary colour minus one")
    sorted: bool
    color_table_size: int = Field(..., ge=0, le=7, description="table has 2**(n+1) entries")
    background_index: int = Field(..., ge=0, le=255)
    pixel_aspect_ratio: int = Field(..., ge=0, le=255)

    @property
    def color_table_entries(self) -> int:
        return 1 << (self.color_table_size + 1) if self.global_color_table else 0


def read_screen_descriptor(inp: BytesLike) -> ScreenDescriptor:
    """
    Decode the GIF header and logical screen descriptor.
    The packed byte at offset 10 holds, MSB first: global colour table flag (1),
    colour resolution (3), sort flag (1), colour table size (3).
    """
    raw = load_bytes(inp)
    if len(raw) < HEADER_SIZE:
        raise GifFormatError(f"need {HEADER_SIZE} header bytes, have {len(raw)}")
    if raw[:3] != b"GIF":
        raise GifFormatError(f"bad signature {raw[:3]!r}")
    version = raw[3:6].decode("ascii", errors="replace")
    if version not in ("87a", "89a"):
        logger.warning("Unknown GIF version %r, decoding anyway", version)

    desc = ScreenDescriptor(
        version=version,
        width=int.from_bytes(raw[6:8], "little"),
        height=int.from_bytes(raw[8:10], "little"),
        global_color_table=sequence.get_bit(raw, PACKED_OFFSET, 0),
        color_resolution=sequence.get_u8(raw, PACKED_OFFSET, 1, 3),
        sorted=sequence.get_bit(raw, PACKED_OFFSET, 4),
        color_table_size=sequence.get_u8(raw, PACKED_OFFSET, 5, 3),
        background_index=raw[11],
        pixel_aspect_ratio=raw[12],
    )
    logger.debug("GIF %s %dx%d packed=%#04x", version, desc.width, desc.height, raw[PACKED_OFFSET])
    return desc
