from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from .common import MAX_WIDTH

class BitAddress(BaseModel):
    """A validated field position: ``start_bit`` 0 is the MSB of ``start_byte``."""
    model_config = ConfigDict(frozen=True)

    start_byte: int = Field(..., ge=0)
    start_bit: int = Field(..., ge=0, le=7)
    width: int = Field(..., ge=1, le=MAX_WIDTH)

    @property
    def absolute(self) -> int:
        return self.start_byte * 8 + self.start_bit

    @property
    def end(self) -> int:
        """One past the last bit of the field."""
        return self.absolute + self.width

    @property
    def last_byte(self) -> int:
        return (self.end - 1) // 8
