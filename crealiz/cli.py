"""Command that round-trips a sample struct through the serializer."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from crealiz.ser import deserialize_from_bytes, serialize_to_bytes
from crealiz.types import StructType, char_type, int_type, pointer_to, struct_of


def _sample_type() -> StructType:
    pointer = pointer_to(int_type())
    # A char followed by a pointer: the pointer sits at its own alignment.
    return struct_of(
        ("ptr", 0, char_type()),
        ("ptr2", pointer.size, pointer),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Serialize a sample struct, read it back and print its fields."""
    parser = argparse.ArgumentParser(
        prog="crealiz",
        description="Round-trip a sample struct through the serializer.",
    )
    parser.parse_args(argv)

    sample_type = _sample_type()
    original = {"ptr": "Z", "ptr2": 42}
    data = serialize_to_bytes(original, sample_type)
    restored = deserialize_from_bytes(data, sample_type)

    print(f"p2.ptr: {restored['ptr']}")
    if restored["ptr2"] is not None:
        print(f"p2.ptr2: {restored['ptr2']}")
    else:
        print("p2.ptr2 is NULL")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())