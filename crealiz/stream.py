"""Byte streams that serializers write to and read from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class StreamError(Exception):
    """Raised when a stream cannot write or read the requested bytes."""


class SerStream(ABC):
    """A sink and source of raw bytes."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes."""


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


class FileStream(SerStream):
    """A stream over a binary file object."""

    def __init__(self, file: BinaryIO) -> None:
        self.file = file

    def write(self, data: bytes) -> int:
        written = self.file.write(data)
        if written is not None and written != len(data):
            raise StreamError(f"short write: {written} of {len(data)} bytes")
        return len(data)

    def read(self, size: int) -> bytes:
        _check_size(size)
        data = self.file.read(size)
        if data is None or len(data) != size:
            got = 0 if data is None else len(data)
            raise StreamError(f"short read: {got} of {size} bytes")
        return data


class BufferStream(SerStream):
    """A stream over a fixed-capacity in-memory buffer."""

    def __init__(self, buffer: bytes | bytearray | None = None, capacity: int | None = None) -> None:
        if buffer is None:
            if capacity is None:
                raise ValueError("either a buffer or a capacity is required")
            buffer = bytearray(capacity)
        elif not isinstance(buffer, bytearray):
            buffer = bytearray(buffer)
        if capacity is None:
            capacity = len(buffer)
        if capacity < 0 or capacity > len(buffer):
            raise ValueError(f"capacity {capacity} does not fit a buffer of {len(buffer)} bytes")
        self._buffer = buffer
        self._capacity = capacity
        self._offset = 0

    def write(self, data: bytes) -> int:
        end = self._offset + len(data)
        if end > self._capacity:
            raise StreamError(
                f"buffer overflow: cannot write {len(data)} bytes at offset "
                f"{self._offset} (capacity {self._capacity})"
            )
        self._buffer[self._offset:end] = data
        self._offset = end
        return len(data)

    def read(self, size: int) -> bytes:
        _check_size(size)
        end = self._offset + size
        if end > self._capacity:
            raise StreamError(
                f"buffer underflow: cannot read {size} bytes at offset "
                f"{self._offset} (capacity {self._capacity})"
            )
        data = bytes(self._buffer[self._offset:end])
        self._offset = end
        return data

    def getvalue(self) -> bytes:
        """Return the buffer's contents up to its capacity."""
        return bytes(self._buffer[: self._capacity])

    @property
    def offset(self) -> int:
        """Current read/write position."""
        return self._offset


class CounterStream(SerStream):
    """A stream that only counts the bytes written to it."""

    def __init__(self) -> None:
        self._count = 0

    def write(self, data: bytes) -> int:
        self._count += len(data)
        return len(data)

    def read(self, size: int) -> bytes:
        _check_size(size)
        return bytes(size)

    @property
    def count(self) -> int:
        """Number of bytes written so far."""
        return self._count