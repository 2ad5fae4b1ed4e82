from __future__ import annotations
from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field

class DensityUnits(IntEnum):
    NONE = 0            # aspect ratio only
    DOTS_PER_INCH = 1
    DOTS_PER_CM = 2

class Density(BaseModel):
    model_config = ConfigDict(frozen=True)

    units: int = Field(0, ge=0, le=0xFF)
    x: int = Field(0, ge=0, le=0xFFFF)
    y: int = Field(0, ge=0, le=0xFFFF)

    @property
    def unit_name(self) -> str | None:
        try:
            return DensityUnits(self.units).name.lower()
        except ValueError:
            return None

class Thumbnail(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(0, ge=0, le=0xFF)
    y: int = Field(0, ge=0, le=0xFF)
