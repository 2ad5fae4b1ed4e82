from __future__ import annotations
from enum import Enum
from typing import ClassVar, Optional


class DecodeErrorKind(str, Enum):
    TRUNCATED_MARKER = "TruncatedMarker"
    INVALID_MARKER = "InvalidMarker"
    MISSING_SOI = "MissingStartOfImage"
    UNEXPECTED_SOI = "UnexpectedStartOfImage"
    TRUNCATED_LENGTH = "TruncatedLength"


class DecodeError(ValueError):
    """
    Structural violation found while walking the marker segments.
    `offset` is the byte position of the offending marker or field.
    """
    kind: ClassVar[DecodeErrorKind]

    def __init__(self, message: str, *, offset: int, code: Optional[int] = None):
        super().__init__(message)
        self.offset = offset
        self.code = code

    def __repr__(self) -> str:
        code = "" if self.code is None else f", code=0x{self.code:X}"
        return f"{type(self).__name__}(offset={self.offset}{code})"


class TruncatedMarker(DecodeError):
    kind = DecodeErrorKind.TRUNCATED_MARKER

    def __init__(self, *, offset: int):
        super().__init__("Unexpected result when reading marker", offset=offset)


class InvalidMarker(DecodeError):
    kind = DecodeErrorKind.INVALID_MARKER

    def __init__(self, *, code: int, offset: int):
        super().__init__(f"Invalid marker 0x{code:X} at position {offset}", offset=offset, code=code)


class MissingStartOfImage(DecodeError):
    kind = DecodeErrorKind.MISSING_SOI

    def __init__(self, *, code: int, offset: int = 0):
        super().__init__("SOI marker not found", offset=offset, code=code)


class UnexpectedStartOfImage(DecodeError):
    kind = DecodeErrorKind.UNEXPECTED_SOI

    def __init__(self, *, offset: int):
        super().__init__("Unexpected SOI marker", offset=offset, code=0xFFD8)


class TruncatedLength(DecodeError):
    kind = DecodeErrorKind.TRUNCATED_LENGTH

    def __init__(self, *, code: int, offset: int):
        super().__init__("Unexpected result when reading payload length", offset=offset, code=code)
