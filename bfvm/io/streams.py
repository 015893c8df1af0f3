"""
Byte streams the interpreter reads from and writes to.

ByteInput and ByteOutput are @runtime_checkable Protocols so callers and
tests can supply any object with the right methods. Two families are
provided: BinaryInput/BinaryOutput wrap binary file objects (standard
input and output by default), BufferInput/BufferOutput work in memory.
"""

from __future__ import annotations

import io
import sys
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ByteInput(Protocol):
    """Source of single bytes. ``read_byte`` returns None at end of stream."""

    def read_byte(self) -> int | None: ...


@runtime_checkable
class ByteOutput(Protocol):
    """Sink for single bytes."""

    def write_byte(self, value: int) -> None: ...

    def flush(self) -> None: ...


class BinaryInput:
    """Reads one byte at a time from a binary file object.

    Blocks until a byte is available or the stream ends. OSError from the
    underlying file propagates to the caller.
    """

    def __init__(self, fileobj: BinaryIO | None = None) -> None:
        self._fileobj = fileobj if fileobj is not None else sys.stdin.buffer

    def read_byte(self) -> int | None:
        chunk = self._fileobj.read(1)
        if not chunk:
            return None
        return chunk[0]


class BinaryOutput:
    """Writes one byte at a time to a binary file object."""

    def __init__(self, fileobj: BinaryIO | None = None) -> None:
        self._fileobj = fileobj if fileobj is not None else sys.stdout.buffer

    def write_byte(self, value: int) -> None:
        self._fileobj.write(bytes((value,)))

    def flush(self) -> None:
        self._fileobj.flush()


class BufferInput:
    """Serves bytes from an in-memory buffer."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def read_byte(self) -> int | None:
        if self._position >= len(self._data):
            return None
        value = self._data[self._position]
        self._position += 1
        return value


class BufferOutput:
    """Collects written bytes in memory."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def write_byte(self, value: int) -> None:
        self._buffer.write(bytes((value,)))

    def flush(self) -> None:
        pass

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()
