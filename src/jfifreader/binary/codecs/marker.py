from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

from .bytecursor import ByteSource

class Marker:
    SOI = 0xFFD8
    EOI = 0xFFD9
    SOS = 0xFFDA
    APP0 = 0xFFE0

MARKER_MIN = 0xFF01
MARKER_MAX = 0xFFFE

# Table slots are keyed by code - 0xFFC0 (slot 0x00 == SOF0 ... slot 0x3F == 0xFFFF).
DESCRIPTION_BASE = 0xFFC0

_RESTART = "Restart"
_APP_EXT = "[Reserved: application extension]"
_JPG_EXT = "[Reserved: JPEG extension]"

def _build_descriptions() -> Mapping[int, str]:
    table = {
        0x00: "Baseline DCT; Huffman",
        0x01: "Extended sequential DCT; Huffman",
        0x02: "Progressive DCT; Huffman",
        0x03: "Spatial lossless; Huffman",
        0x04: "Huffman table",
        0x05: "Differential sequential DCT; Huffman",
        0x06: "Differential progressive DCT; Huffman",
        0x07: "Differential spatial; Huffman",
        0x08: _JPG_EXT,
        0x09: "Extended sequential DCT; Arithmetic",
        0x0A: "Progressive DCT; Arithmetic",
        0x0B: "Spatial lossless; Arithmetic",
        0x0C: "Arithmetic coding conditioning",
        0x0D: "Differential sequential DCT; Arithmetic",
        0x0E: "Differential progressive DCT; Arithmetic",
        0x0F: "Differential spatial; Arithmetic",
        0x18: "Start of Image (SOI)",
        0x19: "End of Image (EOI)",
        0x1A: "Start of Scan (SOS)",
        0x1B: "Quantisation table",
        0x1C: "Number of lines",
        0x1D: "Restart interval",
        0x1E: "Hierarchical progression",
        0x1F: "Expand reference components",
        0x20: "JFIF Header",
        0x3E: "Comment",
        0x3F: "[Invalid]",
    }
    table.update({slot: _RESTART for slot in range(0x10, 0x18)})   # RST0..RST7
    table.update({slot: _APP_EXT for slot in range(0x21, 0x30)})   # APP1..APP15
    table.update({slot: _JPG_EXT for slot in range(0x30, 0x3E)})   # JPG0..JPG13
    return MappingProxyType(dict(sorted(table.items())))

DESCRIPTIONS: Mapping[int, str] = _build_descriptions()


def is_valid_marker(code: int) -> bool:
    return MARKER_MIN <= code <= MARKER_MAX

def describe_marker(code: int) -> Optional[str]:
    """Human-readable label for a marker code, or None when unmapped."""
    return DESCRIPTIONS.get(code - DESCRIPTION_BASE)

def marker_id_string(code: int) -> str:
    return f"0x{code:X}"


def _read_u16(src: ByteSource) -> Optional[int]:
    scratch = bytearray(2)
    if src.read(scratch, 2) != 2:
        return None
    return int.from_bytes(scratch, "big")

def decode_marker(src: ByteSource) -> Optional[int]:
    """
    2-byte big-endian marker code at the current position.
    Returns None when fewer than 2 bytes are left.
    """
    return _read_u16(src)

def decode_length(src: ByteSource) -> Optional[int]:
    """2-byte big-endian segment length (counts itself). None on short read."""
    return _read_u16(src)
