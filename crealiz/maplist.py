"""A growable list whose removals leave holes until it is compacted."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

INITIAL_CAPACITY = 16


@dataclass
class _Slot:
    item: Any
    alive: bool = True


class MapList:
    """A list that marks removed items instead of shifting the others.

    Positions stay stable across removals; :meth:`compact` drops the holes.
    Capacity doubles, after a compaction, whenever the slots run out.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY) -> None:
        if initial_capacity <= 0:
            raise ValueError(f"initial capacity must be positive, got {initial_capacity}")
        self._slots: list[_Slot] = []
        self._capacity = initial_capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots available before the list grows."""
        return self._capacity

    @property
    def slot_count(self) -> int:
        """Number of slots in use, removed ones included."""
        return len(self._slots)

    def _grow(self) -> None:
        self.compact()
        self._capacity *= 2

    def add(self, item: Any) -> None:
        """Append ``item``."""
        if len(self._slots) >= self._capacity:
            self._grow()
        self._slots.append(_Slot(item))
        self._size += 1

    def remove(self, index: int) -> None:
        """Mark the item in slot ``index`` as removed."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} out of range")
        slot = self._slots[index]
        if not slot.alive:
            raise IndexError(f"slot {index} is already removed")
        slot.alive = False
        self._size -= 1

    def clear(self) -> None:
        """Remove every item."""
        for slot in self._slots:
            slot.alive = False
        self._slots.clear()
        self._size = 0

    def compact(self) -> None:
        """Drop removed slots, moving live items to the front."""
        self._slots = [slot for slot in self._slots if slot.alive]

    def __iter__(self) -> Iterator[Any]:
        return (item for _, item in self.enumerate())

    def __len__(self) -> int:
        return self._size

    def enumerate(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(slot index, item)`` for every live item."""
        for index, slot in enumerate(self._slots):
            if slot.alive:
                yield index, slot.item

    def iter_fast(self) -> Iterator[Any]:
        """Yield every slot's item without checking for removal.

        Only meaningful right after :meth:`compact`.
        """
        for slot in self._slots:
            yield slot.item

    def get(self, index: int) -> Any:
        """Return the first live item at slot ``index`` or after it."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} out of range")
        for slot in self._slots[index:]:
            if slot.alive:
                return slot.item
        raise IndexError(f"no live item at or after slot {index}")

    def get_unsafe(self, index: int) -> Any:
        """Return the item in slot ``index``, removed or not."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} out of range")
        return self._slots[index].item

    def find(self, item: Any) -> Any:
        """Return the first live item equal to ``item``, or ``None``."""
        for current in self:
            if current == item:
                return current
        return None