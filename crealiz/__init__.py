"""Type-driven binary serialization of primitives, arrays, pointers and structs."""

__version__ = "0.1.0"
__all__ = ["stream", "types", "ser", "maplist", "cli"]