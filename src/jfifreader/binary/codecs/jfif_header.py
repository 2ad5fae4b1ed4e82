from __future__ import annotations
import struct
from typing import Optional

from jfifreader.models.common import Density, Thumbnail
from jfifreader.models.segment import Segment

JFIF_HEADER_SIZE = 14
JFIF_SEGMENT_INDEX = 1

# "JF" "IF" \0, then version (2), units, density x/y, thumbnail x/y
_JFIF_STRUCT = struct.Struct(">HHBBBBHHBB")
_JF = 0x4A46
_IF = 0x4946


def is_valid_jfif_app0(segment: Segment) -> bool:
    """
    Second segment of the stream carrying the "JFIF\\0" identifier and at
    least the 14-byte fixed header. The marker code itself is not checked.
    """
    if segment.sequence_index != JFIF_SEGMENT_INDEX or len(segment.payload) < JFIF_HEADER_SIZE:
        return False
    jf, if_, nul = struct.unpack_from(">HHB", segment.payload)
    return jf == _JF and if_ == _IF and nul == 0


def decode_jfif_header(segment: Segment) -> Optional[dict]:
    """
    Decode the fixed JFIF APP0 header. Returns None when the segment does not
    qualify; never raises for a malformed payload.
    """
    if not is_valid_jfif_app0(segment):
        return None
    (_, _, _, major, minor, units,
     dens_x, dens_y, thumb_x, thumb_y) = _JFIF_STRUCT.unpack_from(segment.payload)
    return {
        "is_conforming": True,
        "major_version": major,
        "minor_version": minor,
        "density": Density(units=units, x=dens_x, y=dens_y),
        "thumbnail": Thumbnail(x=thumb_x, y=thumb_y),
    }
