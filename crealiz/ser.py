"""Top-level serialization entry points."""

from __future__ import annotations

from typing import Any

from crealiz.stream import BufferStream, CounterStream, SerStream
from crealiz.types import SerType


def serialize(obj: Any, out: SerStream, type_: SerType) -> None:
    """Write ``obj`` to ``out`` as described by ``type_``."""
    type_.serialize(obj, out)


def deserialize(inp: SerStream, type_: SerType) -> Any:
    """Read a value described by ``type_`` from ``inp``."""
    return type_.deserialize(inp)


def serialized_size(obj: Any, type_: SerType) -> int:
    """Return how many bytes ``obj`` takes when serialized."""
    counter = CounterStream()
    serialize(obj, counter, type_)
    return counter.count


def serialize_to_bytes(obj: Any, type_: SerType) -> bytes:
    """Serialize ``obj`` into a buffer of exactly the needed size."""
    stream = BufferStream(capacity=serialized_size(obj, type_))
    serialize(obj, stream, type_)
    return stream.getvalue()


def deserialize_from_bytes(data: bytes, type_: SerType) -> Any:
    """Deserialize a value described by ``type_`` from ``data``."""
    return deserialize(BufferStream(data), type_)