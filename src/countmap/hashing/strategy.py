"""Hash strategies: the rule that decides when two keys are the same key.

A CountMap never compares keys directly. Every key goes through a
strategy that returns a hash token, and keys with equal tokens share
one record. The token can be anything hashable: a normalized string,
a rounded number, the key itself.

Each strategy carries a name. Two maps group keys the same way when
their strategy names are equal, which is what CountMap.equals checks.
Comparing names instead of function bodies means a strategy can be
reimplemented without breaking equality, and two unrelated lambdas
that happen to print the same never compare equal.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

HashFn = Callable[[Any], Hashable]

DEFAULT_STRATEGY = "str"


@dataclass(frozen=True, slots=True)
class HashStrategy:
    """Named hash function.

    Args:
        name: Stable identifier. Equal names mean "same grouping rule".
        fn: Deterministic function from key to hash token.
    """
    name: str
    fn: HashFn

    def __call__(self, key: Any) -> Hashable:
        return self.fn(key)

    def same_as(self, other: HashStrategy) -> bool:
        return self.name == other.name

    @classmethod
    def from_callable(cls, fn: HashFn, name: str | None = None) -> HashStrategy:
        """Wrap a bare callable.

        Without an explicit name, module-level functions are named by
        their dotted path. Lambdas and nested functions get the object
        id appended, so only the very same object compares the same.
        """
        if name is None:
            module = getattr(fn, "__module__", None) or "?"
            qualname = getattr(fn, "__qualname__", None) or type(fn).__qualname__
            name = f"{module}.{qualname}"
            if "<" in qualname or not hasattr(fn, "__qualname__"):
                name = f"{name}@{id(fn):x}"
        return cls(name=name, fn=fn)


def _casefold(key: Any) -> str:
    return str(key).casefold()


def _identity(key: Any) -> Hashable:
    return key


_REGISTRY: dict[str, HashStrategy] = {
    "str": HashStrategy("str", str),
    "repr": HashStrategy("repr", repr),
    "identity": HashStrategy("identity", _identity),
    "casefold": HashStrategy("casefold", _casefold),
}


def register_strategy(name: str, fn: HashFn, replace: bool = False) -> HashStrategy:
    """Register fn under name. Raises ValueError on empty or taken names."""
    if not name:
        raise ValueError("strategy name must be a non-empty string")
    if name in _REGISTRY and not replace:
        raise ValueError(f"strategy {name!r} is already registered")
    if name in _REGISTRY:
        log.debug("Replacing hash strategy %r", name)
    else:
        log.debug("Registering hash strategy %r", name)
    strategy = HashStrategy(name=name, fn=fn)
    _REGISTRY[name] = strategy
    return strategy


def unregister_strategy(name: str) -> bool:
    """Remove a registered strategy. Built-ins can be removed too."""
    return _REGISTRY.pop(name, None) is not None


def get_strategy(name: str) -> HashStrategy:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown hash strategy {name!r}") from None


def available_strategies() -> list[str]:
    return sorted(_REGISTRY)


def resolve_strategy(spec: HashStrategy | str | HashFn | None) -> HashStrategy:
    """Turn whatever the caller passed as ``hash_strategy`` into a HashStrategy.

    None selects the default ("str"), a string is looked up in the
    registry, and a HashStrategy is used as is. A callable that some
    registered strategy already uses resolves to that strategy; any
    other callable is wrapped with HashStrategy.from_callable.
    """
    if spec is None:
        return get_strategy(DEFAULT_STRATEGY)
    if isinstance(spec, HashStrategy):
        return spec
    if isinstance(spec, str):
        return get_strategy(spec)
    if callable(spec):
        for strategy in _REGISTRY.values():
            if strategy.fn is spec:
                return strategy
        return HashStrategy.from_callable(spec)
    raise TypeError(
        f"hash_strategy must be a HashStrategy, strategy name or callable, got {type(spec).__name__}"
    )
