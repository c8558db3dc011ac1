"""Type descriptions that know how to serialize and deserialize values."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from crealiz.stream import SerStream

DEFAULT_ALIGNMENT = 8


class SerType(ABC):
    """Base of all serializable type descriptions."""

    name: str
    size: int

    @abstractmethod
    def serialize(self, value: Any, out: SerStream) -> None:
        """Write ``value`` to ``out``."""

    @abstractmethod
    def deserialize(self, inp: SerStream) -> Any:
        """Read a value from ``inp`` and return it."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} size={self.size}>"


def _encode_char(value: Any) -> bytes:
    if isinstance(value, str):
        try:
            value = value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"character {value!r} does not fit in one byte") from exc
    if not isinstance(value, (bytes, bytearray)) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return bytes(value)


class PrimitiveType(SerType):
    """A fixed-size scalar written as little-endian bytes."""

    def __init__(self, name: str, fmt: str) -> None:
        self.name = name
        self._struct = struct.Struct("<" + fmt)
        self.size = self._struct.size
        self._is_char = fmt == "c"

    def serialize(self, value: Any, out: SerStream) -> None:
        if self._is_char:
            value = _encode_char(value)
        try:
            packed = self._struct.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot serialize {value!r} as {self.name}: {exc}") from exc
        out.write(packed)

    def deserialize(self, inp: SerStream) -> Any:
        (value,) = self._struct.unpack(inp.read(self.size))
        if self._is_char:
            return value.decode("latin-1")
        return value


class ArrayType(SerType):
    """A fixed number of elements of one subtype."""

    def __init__(self, subtype: SerType, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self.name = "array"
        self.subtype = subtype
        self.count = count
        self.size = subtype.size * count

    def serialize(self, value: Sequence[Any], out: SerStream) -> None:
        if len(value) != self.count:
            raise ValueError(f"expected {self.count} elements, got {len(value)}")
        for element in value:
            self.subtype.serialize(element, out)

    def deserialize(self, inp: SerStream) -> list[Any]:
        return [self.subtype.deserialize(inp) for _ in range(self.count)]


class PointerType(SerType):
    """An optional reference: a null flag, then the value if present."""

    _flag = struct.Struct("<?")

    def __init__(self, subtype: SerType) -> None:
        self.name = "pointer"
        self.subtype = subtype
        self.size = struct.calcsize("P")

    def serialize(self, value: Any, out: SerStream) -> None:
        is_null = value is None
        out.write(self._flag.pack(is_null))
        if not is_null:
            self.subtype.serialize(value, out)

    def deserialize(self, inp: SerStream) -> Any:
        (is_null,) = self._flag.unpack(inp.read(self._flag.size))
        if is_null:
            return None
        return self.subtype.deserialize(inp)


@dataclass(frozen=True)
class Field:
    """One named member of a struct, at a byte offset."""

    name: str
    offset: int
    type: SerType


def _align_up(value: int, alignment: int) -> int:
    return (value + alignment - 1) & ~(alignment - 1)


def _field_value(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value[name]
    return getattr(value, name)


class StructType(SerType):
    """Named fields serialized in declaration order."""

    def __init__(self, *args: Field | tuple[str, int, SerType]) -> None:
        fields = []
        for arg in args:
            field = arg if isinstance(arg, Field) else Field(*arg)
            if field.offset < 0:
                raise ValueError(f"field {field.name!r} has a negative offset")
            fields.append(field)
        self.name = "struct"
        self.fields: tuple[Field, ...] = tuple(fields)
        end = max((f.offset + f.type.size for f in self.fields), default=0)
        self.size = _align_up(end, DEFAULT_ALIGNMENT)

    def serialize(self, value: Any, out: SerStream) -> None:
        for field in self.fields:
            field.type.serialize(_field_value(value, field.name), out)

    def deserialize(self, inp: SerStream) -> dict[str, Any]:
        return {field.name: field.type.deserialize(inp) for field in self.fields}


@lru_cache(maxsize=None)
def int_type() -> PrimitiveType:
    """The shared 32-bit signed integer type."""
    return PrimitiveType("int", "i")


@lru_cache(maxsize=None)
def float_type() -> PrimitiveType:
    """The shared single-precision float type."""
    return PrimitiveType("float", "f")


@lru_cache(maxsize=None)
def double_type() -> PrimitiveType:
    """The shared double-precision float type."""
    return PrimitiveType("double", "d")


@lru_cache(maxsize=None)
def bool_type() -> PrimitiveType:
    """The shared one-byte boolean type."""
    return PrimitiveType("bool", "?")


@lru_cache(maxsize=None)
def char_type() -> PrimitiveType:
    """The shared one-byte character type."""
    return PrimitiveType("char", "c")


def array_of(subtype: SerType, count: int) -> ArrayType:
    """Describe an array of ``count`` elements of ``subtype``."""
    return ArrayType(subtype, count)


def pointer_to(subtype: SerType) -> PointerType:
    """Describe an optional reference to a ``subtype`` value."""
    return PointerType(subtype)


def struct_of(*args: Field | tuple[str, int, SerType]) -> StructType:
    """Describe a struct from ``(name, offset, type)`` fields."""
    return StructType(*args)