"""Pluggable key-identity rules for CountMap.

Public API:
    HashStrategy: named hash function
    register_strategy / get_strategy / resolve_strategy: name registry
"""
from countmap.hashing.strategy import (
    DEFAULT_STRATEGY,
    HashFn,
    HashStrategy,
    available_strategies,
    get_strategy,
    register_strategy,
    resolve_strategy,
    unregister_strategy,
)

__all__ = [
    "DEFAULT_STRATEGY",
    "HashFn",
    "HashStrategy",
    "available_strategies",
    "get_strategy",
    "register_strategy",
    "resolve_strategy",
    "unregister_strategy",
]
