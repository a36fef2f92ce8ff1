from __future__ import annotations
from pydantic import BaseModel, Field
from .address import BitAddress
from .common import IntType

class FieldReading(BaseModel):
    address: BitAddress
    type: IntType
    value: int
    bits: str = Field(..., description="field bits, MSB first")
