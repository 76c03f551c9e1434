"""Open-addressing hash table with pluggable probing strategies."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, TextIO

from .strhash import StringHash

_MASK64 = (1 << 64) - 1

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober(Protocol):
    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]: ...


class LinearProber:
    """Probe consecutive slots starting at the home location."""

    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield the m slot indices start, start+1, ... modulo m."""
        for attempt in range(m):
            yield (start + attempt) % m


class DoubleHashProber:
    """Probe with a key-dependent step computed from a second hash."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        self.h2 = StringHash() if h2 is None else h2

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def step_for(self, m: int, key: Any) -> int:
        """Step size for the given table size and key."""
        modulus = self._modulus_for(m)
        return modulus - self.h2(key) % modulus

    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield the m slot indices start + i*step modulo m."""
        step = self.step_for(m, key)
        for attempt in range(m):
            yield (start + attempt * step) % m


@dataclass
class _Slot:
    key: Any
    value: Any
    deleted: bool = False


def _default_hash(key: Hashable) -> int:
    return hash(key) & _MASK64


class HashTable:
    """Map backed by open addressing; removed entries leave tombstones until a resize."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hash_func: Callable[[Any], int] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = LinearProber() if prober is None else prober
        self._hash = _default_hash if hash_func is None else hash_func
        self._m_index = 0
        self._table: list[_Slot | None] = [None] * CAPACITIES[0]
        self._total = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return sum(1 for slot in self._table if slot is not None and not slot.deleted)

    def __bool__(self) -> bool:
        return not self.empty()

    def __contains__(self, key: Any) -> bool:
        return self._internal_find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        if key not in self:
            raise KeyError(key)
        self.remove(key)

    def empty(self) -> bool:
        return len(self) == 0

    @property
    def capacity(self) -> int:
        """Current number of slots."""
        return len(self._table)

    @property
    def total_probes(self) -> int:
        """Number of probe attempts since the last reset."""
        return self._total_probes

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert a new item, or update the value of an existing key.

        Raises RuntimeError if no free slot can be found.
        """
        existing = self._internal_find(key)
        if existing is not None:
            existing.value = value
            return

        if self._total / len(self._table) >= self._resize_alpha:
            self._resize()

        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("No free location found")
        slot = self._table[loc]
        if slot is None:
            self._table[loc] = _Slot(key, value)
        else:
            slot.key, slot.value, slot.deleted = key, value, False
        self._total += 1

    def remove(self, key: Any) -> None:
        """Mark the item with the given key as deleted; do nothing if absent."""
        slot = self._internal_find(key)
        if slot is not None:
            slot.deleted = True

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Return the (key, value) pair for key, or None if absent."""
        slot = self._internal_find(key)
        return None if slot is None else (slot.key, slot.value)

    def at(self, key: Any) -> Any:
        """Return the value for key; raise KeyError if absent."""
        slot = self._internal_find(key)
        if slot is None:
            raise KeyError("Bad key")
        return slot.value

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, tombstones included."""
        stream = sys.stdout if out is None else out
        for index, slot in enumerate(self._table):
            if slot is not None:
                stream.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def _internal_find(self, key: Any) -> _Slot | None:
        loc = self._probe(key)
        return None if loc is None else self._table[loc]

    def _probe(self, key: Any) -> int | None:
        m = len(self._table)
        start = self._hash(key) % m
        for loc in self._prober.sequence(start, m, key):
            self._total_probes += 1
            slot = self._table[loc]
            if slot is None or (slot.key == key and not slot.deleted):
                return loc
        self._total_probes += 1
        return None

    def _resize(self) -> None:
        if self._m_index + 1 >= len(CAPACITIES):
            raise RuntimeError("No more capacities available")
        old_table = self._table
        self._m_index += 1
        self._table = [None] * CAPACITIES[self._m_index]
        self._total = 0
        for slot in old_table:
            if slot is not None and not slot.deleted:
                self.insert(slot.key, slot.value)