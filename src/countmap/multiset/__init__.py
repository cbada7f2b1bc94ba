"""Counting map keyed by a pluggable hash strategy.

Re-exports the public types for convenient access:
    from countmap.multiset import CountMap, InvalidArgument
"""
from countmap.multiset.count_map import CountMap
from countmap.multiset.errors import InvalidArgument
from countmap.multiset.types import Count, CountEntry, CountRecord, HashToken

__all__ = [
    "CountMap",
    "InvalidArgument",
    "Count",
    "CountEntry",
    "CountRecord",
    "HashToken",
]
