"""CountMap: a multiset whose key identity comes from a hash strategy.

Keys are never compared with each other. Each key is passed through the
map's HashStrategy and the resulting token indexes a table of records:

    token -> CountRecord(hash=token, key=<first key seen>, count=n)

So with a strategy that rounds numbers, 1 and 1.25 land on the same
record, and whichever arrived first is the key that keys(), entries()
and to_array() report back.

Count policy:
  - add() and subtract() take non-negative magnitudes only.
  - With allow_negative_counts=False (the default), subtract() clamps
    at zero and set() rejects negative targets.
  - A record survives at count zero (has() stays True) until delete().

Every mutating call validates its arguments before touching the table,
so a rejected call leaves the map exactly as it was.

Not thread-safe. Callers sharing a map across threads must hold their
own lock around every call.
"""
from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from dataclasses import replace
from itertools import chain
from typing import Any

from countmap.hashing.strategy import HashFn, HashStrategy, resolve_strategy
from countmap.multiset.errors import InvalidArgument
from countmap.multiset.types import Count, CountEntry, CountRecord, HashToken

log = logging.getLogger(__name__)


class CountMap:
    """Counts of keys, grouped by a hash strategy.

    Args:
        array: Keys to load on construction, each counted once.
        hash_strategy: HashStrategy, registered strategy name, or bare
            callable (default: the "str" strategy).
        allow_negative_counts: Let counts drop below zero (default False).
    """

    def __init__(
        self,
        array: Iterable[Any] = (),
        hash_strategy: HashStrategy | str | HashFn | None = None,
        allow_negative_counts: bool = False,
    ) -> None:
        self._counts: dict[HashToken, CountRecord] = {}
        self._strategy = resolve_strategy(hash_strategy)
        self.allow_negative_counts = allow_negative_counts
        self.concat(array, in_place=True)

    @property
    def hash_strategy(self) -> HashStrategy:
        return self._strategy

    @hash_strategy.setter
    def hash_strategy(self, value: HashStrategy | str | HashFn | None) -> None:
        # Existing records keep their old tokens until rehash().
        self._strategy = resolve_strategy(value)

    # --- mutation ---

    def add(self, key: Any, amount: int = 1) -> Count:
        """Increase key's count by amount. Returns the new count.

        Raises InvalidArgument if amount is negative (use subtract()).
        """
        amount = operator.index(amount)
        if amount < 0:
            raise InvalidArgument(
                f"amount must be non-negative, got {amount}; use subtract() to decrease"
            )
        token = self._strategy(key)
        record = self._counts.get(token)
        if record is None:
            return self._insert(token, key, amount).count
        record.count += amount
        return record.count

    def subtract(self, key: Any, amount: int = 1) -> Count:
        """Decrease key's count by amount. Returns the stored count.

        Unknown keys return 0 and are not added. Without negative mode the
        count stops at 0, but the record is kept.
        """
        amount = operator.index(amount)
        if amount < 0:
            raise InvalidArgument(f"amount to subtract must be non-negative, got {amount}")
        record = self._counts.get(self._strategy(key))
        if record is None:
            return 0
        record.count -= amount
        if record.count < 0 and not self.allow_negative_counts:
            log.debug("Clamping count for %r from %d to 0", record.key, record.count)
            record.count = 0
        return record.count

    def set(self, key: Any, amount: int) -> Count:
        """Overwrite key's count. Creates the record if needed.

        Raises InvalidArgument for a negative amount unless negative
        counts are allowed.
        """
        amount = operator.index(amount)
        if amount < 0 and not self.allow_negative_counts:
            raise InvalidArgument(
                f"negative counts are disabled, cannot set count to {amount}"
            )
        token = self._strategy(key)
        record = self._counts.get(token)
        if record is None:
            return self._insert(token, key, amount).count
        record.count = amount
        return record.count

    def concat(self, array: Iterable[Any], in_place: bool = False) -> CountMap:
        """Count every item of array once.

        Works on a clone unless in_place is True. Returns the map that
        was updated.
        """
        target = self if in_place else self.clone()
        for key in array:
            target.add(key)
        return target

    def delete(self, key: Any) -> bool:
        """Drop the key's record entirely. Returns True if it existed."""
        record = self._counts.pop(self._strategy(key), None)
        if record is None:
            return False
        log.debug("Deleted record %r (count %d)", record.key, record.count)
        return True

    def rehash(self) -> CountMap:
        """Rebuild the table with the current strategy. Returns self.

        Records whose keys now share a token are merged and their counts
        summed. Records are replayed in the order their tokens were first
        created, so the oldest record's key stays the representative.
        """
        # The table is only swapped once every token has been computed, so a
        # strategy that raises leaves the map untouched.
        rebuilt: dict[HashToken, CountRecord] = {}
        for record in self._counts.values():
            token = self._strategy(record.key)
            existing = rebuilt.get(token)
            if existing is None:
                rebuilt[token] = CountRecord(hash=token, key=record.key, count=record.count)
                continue
            log.debug(
                "Merging %r (count %d) into %r (count %d)",
                record.key, record.count, existing.key, existing.count,
            )
            existing.count += record.count
        if not self.allow_negative_counts:
            for record in rebuilt.values():
                if record.count < 0:
                    log.debug("Clamping count for %r from %d to 0", record.key, record.count)
                    record.count = 0
        log.debug(
            "Rehashed with %r: %d records -> %d records",
            self._strategy.name, len(self._counts), len(rebuilt),
        )
        self._counts = rebuilt
        return self

    # --- queries ---

    def get(self, key: Any) -> Count:
        record = self._counts.get(self._strategy(key))
        return record.count if record is not None else 0

    def has(self, key: Any) -> bool:
        """True if the key's record exists. Says nothing about its count."""
        return self._strategy(key) in self._counts

    def clone(self) -> CountMap:
        cloned = CountMap(
            hash_strategy=self._strategy,
            allow_negative_counts=self.allow_negative_counts,
        )
        for key, count in self.entries():
            cloned.set(key, count)
        return cloned

    def keys(self) -> list[Any]:
        """Representative keys, one per record. No ordering guarantee."""
        return [record.key for record in self._counts.values()]

    def entries(self) -> list[CountEntry]:
        return [(record.key, record.count) for record in self._counts.values()]

    def records(self) -> list[CountRecord]:
        """Copies of the stored records."""
        return [replace(record) for record in self._counts.values()]

    def to_array(self) -> list[Any]:
        """Each key repeated count times, in no particular order.

        Records at zero or below contribute nothing.
        """
        result: list[Any] = []
        for record in self._counts.values():
            if record.count > 0:
                result.extend([record.key] * record.count)
        return result

    def total(self) -> int:
        """Sum of positive counts, i.e. len(to_array())."""
        return sum(record.count for record in self._counts.values() if record.count > 0)

    def equals(self, other: object) -> bool:
        """Same strategy name, same negative mode, same count for every
        representative key of either map."""
        if not isinstance(other, CountMap):
            return False
        if not self._strategy.same_as(other._strategy):
            return False
        if self.allow_negative_counts != other.allow_negative_counts:
            return False
        return all(
            self.get(key) == other.get(key)
            for key in chain(self.keys(), other.keys())
        )

    # --- container protocol ---

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __getitem__(self, key: Any) -> Count:
        return self.get(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountMap):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {count}" for key, count in self.entries())
        return (
            f"CountMap({{{body}}}, hash_strategy={self._strategy.name!r}, "
            f"allow_negative_counts={self.allow_negative_counts})"
        )

    def _insert(self, token: HashToken, key: Any, count: Count) -> CountRecord:
        record = CountRecord(hash=token, key=key, count=count)
        self._counts[token] = record
        return record
