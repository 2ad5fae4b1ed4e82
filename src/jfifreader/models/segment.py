from __future__ import annotations
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..binary.codecs.marker import MARKER_MIN, MARKER_MAX, describe_marker, marker_id_string

class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    marker_code: int = Field(..., ge=MARKER_MIN, le=MARKER_MAX)
    byte_offset: int = Field(..., ge=0)
    sequence_index: int = Field(..., ge=0)
    payload: bytes = b""

    @field_serializer("payload", when_used="json")
    def _payload_hex(self, payload: bytes) -> str:
        return payload.hex()

    @property
    def description(self) -> Optional[str]:
        return describe_marker(self.marker_code)

    @property
    def id_string(self) -> str:
        return marker_id_string(self.marker_code)

    @property
    def size(self) -> int:
        return len(self.payload)

    def row(self) -> Tuple[str, Optional[str], int]:
        return self.id_string, self.description, self.byte_offset
