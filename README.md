# crealiz

A small library for describing the layout of a value once and turning it
into bytes and back. A layout is built from primitive types and combined
with arrays, optional pointers and structs; the same description drives
both serialization and deserialization.

## Installation

```
pip install crealiz
```

For running the test suite:

```
pip install "crealiz[test]"
pytest
```

## Types

All types live in `crealiz.types` and derive from `SerType`, which has
`serialize(value, out)` and `deserialize(inp)` methods and `name` and
`size` attributes.

Primitive types, each shared (the same object is returned on every call)
and written little-endian:

- `int_type()` – 32-bit signed integer.
- `float_type()` – single-precision float.
- `double_type()` – double-precision float.
- `bool_type()` – one-byte boolean.
- `char_type()` – one byte; takes a one-character `str` (Latin-1) or a
  one-byte `bytes` value and reads back a `str`.

Custom primitives can be made with `PrimitiveType(name, fmt)`, where
`fmt` is a `struct` format character.

Combinators:

- `array_of(subtype, count)` (`ArrayType`) – exactly `count` elements of
  one type; reads back a `list`. A sequence of the wrong length raises
  `ValueError`.
- `pointer_to(subtype)` (`PointerType`) – a value that may be `None`; a
  one-byte null flag is written first, followed by the value when there
  is one.
- `struct_of(*fields)` (`StructType`) – named fields, each given as a
  `Field(name, offset, type)` or a `(name, offset, type)` tuple, written
  in the order they are declared. Values are taken from a mapping by key
  or from an object by attribute; a struct reads back as a `dict`. The
  offsets only determine the struct's `size` (the end of the last field,
  rounded up to 8); they do not affect the encoding.

## Usage

```python
from crealiz.ser import deserialize_from_bytes, serialize_to_bytes, serialized_size
from crealiz.types import array_of, char_type, float_type, int_type, pointer_to, struct_of

vector = array_of(float_type(), 3)
data = serialize_to_bytes([1.5, 2.0, -0.25], vector)
assert deserialize_from_bytes(data, vector) == [1.5, 2.0, -0.25]

maybe_int = pointer_to(int_type())
assert deserialize_from_bytes(serialize_to_bytes(42, maybe_int), maybe_int) == 42
assert deserialize_from_bytes(serialize_to_bytes(None, maybe_int), maybe_int) is None

record = struct_of(("tag", 0, char_type()), ("value", 8, maybe_int))
data = serialize_to_bytes({"tag": "Z", "value": 7}, record)
assert deserialize_from_bytes(data, record) == {"tag": "Z", "value": 7}

print(serialized_size(42, maybe_int))  # 5
```

`crealiz.ser` provides:

- `serialize(obj, out, type_)` – write `obj` to a stream.
- `deserialize(inp, type_)` – read a value from a stream.
- `serialized_size(obj, type_)` – the encoded length, measured by writing
  into a `CounterStream`.
- `serialize_to_bytes(obj, type_)` – encode into a buffer of exactly that
  length and return the bytes.
- `deserialize_from_bytes(data, type_)` – decode from bytes.

### Streams

`crealiz.stream` holds the stream classes, all subclasses of `SerStream`
with `write(data)` and `read(size)`:

- `FileStream(file)` – reads from and writes to a binary file object.
- `BufferStream(buffer=None, capacity=None)` – a fixed-capacity
  in-memory buffer, either over the given bytes or a fresh zeroed buffer
  of `capacity` bytes; `getvalue()` returns its contents and the
  `offset` property the current position.
- `CounterStream()` – discards writes and keeps a running byte total in
  its `count` property; reads return zero bytes of the requested length.

A short read from a file, writing past the end of a buffer or reading
past the end of the data raises `StreamError`.

### MapList

`crealiz.maplist.MapList` is a growable list whose removals only mark
slots as free, so slot positions stay stable; `compact()` closes the
gaps. When the slots run out, the list compacts and doubles its
`capacity`.

```python
from crealiz.maplist import MapList

items = MapList(4)
for word in ("a", "b", "c"):
    items.add(word)
items.remove(1)
assert list(items) == ["a", "c"]
assert list(items.enumerate()) == [(0, "a"), (2, "c")]
assert len(items) == 2
assert items.get(1) == "c"       # first live item at or after slot 1
assert items.find("c") == "c"
items.compact()
assert list(items.iter_fast()) == ["a", "c"]
```

`get_unsafe(index)` returns a slot's item whether removed or not, and
`clear()` empties the list. Out-of-range slots raise `IndexError`.

## Command line

```
crealiz
```

runs a short demonstration: a struct holding a character and a pointer to
an integer is serialized to bytes, read back, and its fields are printed.
It takes no options.

## Limitations

The encoding is not self-describing: it carries no type tags, field
names or version, so data can only be read back with the same type
description. There are no variable-length arrays or strings.