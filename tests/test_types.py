import pytest

from crealiz.stream import BufferStream, CounterStream, StreamError
from crealiz.types import (
    ArrayType,
    Field,
    PointerType,
    StructType,
    array_of,
    bool_type,
    char_type,
    double_type,
    float_type,
    int_type,
    pointer_to,
    struct_of,
)


def _encode(type_, value):
    counter = CounterStream()
    type_.serialize(value, counter)
    out = BufferStream(capacity=counter.count)
    type_.serialize(value, out)
    return out.getvalue()


def _decode(type_, data):
    return type_.deserialize(BufferStream(data))


def test_int_wire_bytes_little_endian():
    assert _encode(int_type(), 42) == b"*\x00\x00\x00"


@pytest.mark.parametrize(
    "type_, value",
    [
        (int_type(), -7),
        (int_type(), 2**31 - 1),
        (float_type(), 1.5),
        (double_type(), -0.25),
        (bool_type(), True),
        (bool_type(), False),
        (char_type(), "Z"),
    ],
)
def test_primitive_round_trip(type_, value):
    data = _encode(type_, value)
    assert len(data) == type_.size
    assert _decode(type_, data) == value


def test_primitive_singletons_are_shared():
    first_int = int_type()
    second_int = int_type()
    assert first_int is second_int
    assert first_int.size == 4
    first_char = char_type()
    second_char = char_type()
    assert first_char is second_char
    assert first_char.size == 1
    assert _encode(second_int, 7) == b"\x07\x00\x00\x00"


def test_int_out_of_range_raises():
    with pytest.raises(ValueError):
        _encode(int_type(), 2**40)


def test_char_must_be_single_byte():
    with pytest.raises(ValueError):
        _encode(char_type(), "ab")
    with pytest.raises(ValueError):
        _encode(char_type(), "\u20ac")


def test_char_accepts_bytes():
    assert _decode(char_type(), _encode(char_type(), b"q")) == "q"


def test_array_round_trip_and_size():
    arr = array_of(float_type(), 3)
    assert isinstance(arr, ArrayType)
    assert arr.size == float_type().size * 3
    values = [1.0, 2.5, -4.0]
    data = _encode(arr, values)
    assert len(data) == arr.size
    assert _decode(arr, data) == values


def test_array_wrong_length_raises():
    with pytest.raises(ValueError):
        _encode(array_of(int_type(), 2), [1, 2, 3])


def test_pointer_null_wire_bytes():
    assert _encode(pointer_to(int_type()), None) == b"\x01"


def test_pointer_round_trip():
    ptr = pointer_to(int_type())
    assert isinstance(ptr, PointerType)
    data = _encode(ptr, 99)
    assert len(data) == 1 + int_type().size
    assert _decode(ptr, data) == 99
    assert _decode(ptr, _encode(ptr, None)) is None


def test_struct_size_aligned():
    st = struct_of(("ptr", 0, char_type()), ("ptr2", 8, pointer_to(int_type())))
    assert st.size == 16


def test_struct_round_trip_from_mapping():
    sub = struct_of(
        Field("va", 0, array_of(float_type(), 3)),
        Field("c", 12, char_type()),
    )
    value = {"va": [0.5, 1.0, 2.0], "c": "x"}
    assert _decode(sub, _encode(sub, value)) == value


def test_struct_reads_attributes():
    class Point:
        def __init__(self):
            self.x = 3
            self.y = -4

    st = StructType(("x", 0, int_type()), ("y", 4, int_type()))
    assert _decode(st, _encode(st, Point())) == {"x": 3, "y": -4}


def test_struct_field_order_is_declaration_order():
    st = struct_of(("b", 4, int_type()), ("a", 0, int_type()))
    data = _encode(st, {"a": 1, "b": 2})
    assert data[: int_type().size] == _encode(int_type(), 2)
    assert list(st.fields) == [Field("b", 4, int_type()), Field("a", 0, int_type())]


def test_struct_missing_field_raises():
    st = struct_of(("a", 0, int_type()))
    with pytest.raises(KeyError):
        _encode(st, {})


def test_truncated_input_raises():
    st = struct_of(("a", 0, int_type()), ("b", 4, int_type()))
    data = _encode(st, {"a": 1, "b": 2})
    with pytest.raises(StreamError):
        _decode(st, data[:-1])