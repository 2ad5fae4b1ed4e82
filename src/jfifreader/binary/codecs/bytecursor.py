from __future__ import annotations
import os
from typing import Protocol


class ByteSource(Protocol):
    """Anything the segment walker can pull bytes from."""

    def read(self, dest: bytearray | memoryview, count: int) -> int: ...
    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None: ...
    def tell(self) -> int: ...
    def rewind(self) -> None: ...
    def underlying_buffer(self) -> memoryview: ...


class ByteCursor:
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"ByteCursor expects a bytes-like buffer, got {type(data).__name__}")
        # private read-only view; the caller's buffer is never written through it
        self.buf = memoryview(data).cast("B").toreadonly()
        self.pos = 0

    def __len__(self) -> int: return len(self.buf)

    @property
    def length(self) -> int: return len(self.buf)

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos
    def rewind(self) -> None: self.pos = 0

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        if whence == os.SEEK_SET:
            pos = offset
        elif whence == os.SEEK_END:
            pos = len(self.buf) + offset
        elif whence == os.SEEK_CUR:
            pos = self.pos + offset
        else:
            raise ValueError(f"bad whence {whence!r}")
        # clamp, never raise on range
        self.pos = min(max(pos, 0), len(self.buf))

    def read(self, dest: bytearray | memoryview, count: int) -> int:
        """
        Copy up to `count` bytes from the current position into dest[0:].
        Returns the number copied; 0 means end of data (or count <= 0).
        """
        n = min(count, len(self.buf) - self.pos, len(dest))
        if n <= 0:
            return 0
        dest[0:n] = self.buf[self.pos:self.pos + n]
        self.pos += n
        return n

    def underlying_buffer(self) -> memoryview:
        return self.buf
