from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from .common import Density, Thumbnail
from .segment import Segment
from ..binary.codecs.marker import Marker

class JfifFile(BaseModel):
    segments: List[Segment] = Field(default_factory=list)
    is_conforming: bool = False
    major_version: int = Field(0, ge=0, le=0xFF)
    minor_version: int = Field(0, ge=0, le=0xFF)
    density: Density = Field(default_factory=Density)
    thumbnail: Thumbnail = Field(default_factory=Thumbnail)

    @model_validator(mode="after")
    def _check_invariants(self) -> "JfifFile":
        segs = self.segments
        for i, seg in enumerate(segs):
            if seg.sequence_index != i:
                raise ValueError(f"segment {i} has sequence_index {seg.sequence_index}")
            if i > 0 and seg.marker_code == Marker.SOI:
                raise ValueError(f"SOI marker at segment {i}")
        if segs:
            if segs[0].marker_code != Marker.SOI:
                raise ValueError("first segment is not SOI")
            if segs[-1].marker_code != Marker.EOI:
                raise ValueError("last segment is not EOI")
        if not self.is_conforming and (
            self.major_version or self.minor_version
            or self.density != Density() or self.thumbnail != Thumbnail()
        ):
            raise ValueError("JFIF header fields set on a non-conforming file")
        return self

    # Flat accessors for the header fields
    @property
    def density_units(self) -> int: return self.density.units
    @property
    def density_x(self) -> int: return self.density.x
    @property
    def density_y(self) -> int: return self.density.y
    @property
    def thumbnail_x(self) -> int: return self.thumbnail.x
    @property
    def thumbnail_y(self) -> int: return self.thumbnail.y

    @property
    def version(self) -> str:
        return f"{self.major_version}.{self.minor_version:02d}"

    def rows(self) -> List[Tuple[str, Optional[str], int]]:
        """(id_string, description, byte_offset) for every segment, in stream order."""
        return [seg.row() for seg in self.segments]

    def find(self, marker_code: int) -> List[Segment]:
        return [seg for seg in self.segments if seg.marker_code == marker_code]

    @classmethod
    def from_binary(cls, data: bytes | bytearray | memoryview | str | Path) -> "JfifFile":
        from ..binary.reader import parse_file
        return parse_file(data)

    @classmethod
    def from_cursor(cls, source) -> "JfifFile":
        from ..binary.reader import parse
        return parse(source)
