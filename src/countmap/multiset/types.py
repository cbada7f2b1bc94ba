"""Record type and aliases shared by the multiset package."""
from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, TypeAlias

HashToken: TypeAlias = Hashable
Count: TypeAlias = int
CountEntry: TypeAlias = tuple[Any, int]


@dataclass(slots=True)
class CountRecord:
    """One equivalence class of keys.

    ``key`` is the first key that produced ``hash``; later keys with the
    same token only change ``count``.
    """
    hash: HashToken
    key: Any
    count: Count
