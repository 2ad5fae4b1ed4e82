from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Union

from .codecs.bytecursor import ByteCursor, ByteSource
from .codecs.marker import Marker, decode_length, decode_marker, describe_marker, is_valid_marker
from .codecs.jfif_header import decode_jfif_header
from .errors import (
    DecodeError,
    InvalidMarker,
    MissingStartOfImage,
    TruncatedLength,
    TruncatedMarker,
    UnexpectedStartOfImage,
)

from jfifreader.models.file import JfifFile
from jfifreader.models.segment import Segment

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _scan_payload(src: ByteSource) -> bytes:
    """
    Entropy-coded data after SOS: everything up to the last 2 bytes of the
    buffer, which are left for the EOI marker.
    """
    start = src.tell()
    src.seek(-2, os.SEEK_END)
    end = src.tell()
    if end < start:
        # not even room for the EOI marker
        raise TruncatedMarker(offset=start)
    return src.underlying_buffer()[start:end].tobytes()


def _length_payload(src: ByteSource, code: int) -> bytes:
    field_at = src.tell()
    seg_len = decode_length(src)
    if seg_len is None:
        raise TruncatedLength(code=code, offset=field_at)
    size = seg_len - 2
    if size <= 0:
        return b""
    start = src.tell()
    payload = src.underlying_buffer()[start:start + size].tobytes()
    src.seek(size, os.SEEK_CUR)
    return payload


# -----------------------------
# Segment walk
# -----------------------------

def _walk(src: ByteSource) -> List[Segment]:
    segments: List[Segment] = []
    src.rewind()

    while True:
        offset = src.tell()
        code = decode_marker(src)
        if code is None:
            raise TruncatedMarker(offset=offset)
        if not is_valid_marker(code):
            raise InvalidMarker(code=code, offset=offset)

        index = len(segments)
        if index == 0 and code != Marker.SOI:
            raise MissingStartOfImage(code=code, offset=offset)
        if index != 0 and code == Marker.SOI:
            raise UnexpectedStartOfImage(offset=offset)

        if code in (Marker.SOI, Marker.EOI):
            payload = b""
        elif code == Marker.SOS:
            payload = _scan_payload(src)
        else:
            payload = _length_payload(src, code)

        segments.append(Segment(marker_code=code, byte_offset=offset, sequence_index=index, payload=payload))
        logger.debug("segment %d: 0x%X (%s) at %d, %d payload bytes",
                     index, code, describe_marker(code), offset, len(payload))

        if code == Marker.EOI:
            return segments


def parse(source: ByteSource) -> JfifFile:
    """
    Walk the marker segments of an in-memory JPEG/JFIF stream.
    Raises a DecodeError subclass on the first structural violation; the JFIF
    APP0 header is decoded only when present and never fails the parse.
    """
    segments = _walk(source)

    header = decode_jfif_header(segments[1]) if len(segments) > 1 else None
    if header is None:
        logger.debug("no JFIF APP0 header in segment 1; not conforming")
        return JfifFile(segments=segments)

    logger.debug("JFIF %d.%02d, density units %d",
                 header["major_version"], header["minor_version"], header["density"].units)
    return JfifFile(segments=segments, **header)


def try_parse(source: ByteSource) -> Union[JfifFile, DecodeError]:
    """Like parse(), but hands back the DecodeError instead of raising it."""
    try:
        return parse(source)
    except DecodeError as e:
        return e


def parse_file(data: BytesLike) -> JfifFile:
    """Full parse from raw bytes or a file path."""
    return parse(ByteCursor(load_bytes(data)))
