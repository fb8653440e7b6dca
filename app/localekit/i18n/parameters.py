"""Interpolation parameters.

A small ordered string-to-string mapping passed per lookup. Most lookups
carry zero to two parameters, so up to CAPACITY pairs are held in an
immutable tuple that is replaced on every change. Beyond that the pairs are
promoted to a dict that is mutated in place.
"""

from collections.abc import MutableMapping
from typing import Iterator, Optional, Tuple

CAPACITY = 5

Pair = Tuple[str, str]


class _Small:
    """Zero to CAPACITY pairs in insertion order."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: Tuple[Pair, ...] = ()):
        self.pairs = pairs

    def __len__(self) -> int:
        return len(self.pairs)

    def set(self, key: str, value: str):
        for index, (existing, _) in enumerate(self.pairs):
            if existing == key:
                pairs = list(self.pairs)
                pairs[index] = (key, value)
                return _Small(tuple(pairs))
        if len(self.pairs) < CAPACITY:
            return _Small(self.pairs + ((key, value),))
        promoted = _Many(dict(self.pairs))
        promoted.values[key] = value
        return promoted

    def try_get(self, key: str) -> Tuple[Optional[str], bool]:
        for existing, value in self.pairs:
            if existing == key:
                return value, True
        return None, False

    def remove(self, key: str):
        for index, (existing, _) in enumerate(self.pairs):
            if existing == key:
                return _Small(self.pairs[:index] + self.pairs[index + 1 :]), True
        return self, False

    def items(self) -> Iterator[Pair]:
        return iter(self.pairs)


class _Many:
    """More than CAPACITY pairs, mutated in place."""

    __slots__ = ("values",)

    def __init__(self, values: dict):
        self.values = values

    def __len__(self) -> int:
        return len(self.values)

    def set(self, key: str, value: str):
        self.values[key] = value
        return self

    def try_get(self, key: str) -> Tuple[Optional[str], bool]:
        if key in self.values:
            return self.values[key], True
        return None, False

    def remove(self, key: str):
        if key not in self.values:
            return self, False
        del self.values[key]
        if len(self.values) <= CAPACITY:
            return _Small(tuple(self.values.items())), True
        return self, True

    def items(self) -> Iterator[Pair]:
        return iter(list(self.values.items()))


EMPTY = _Small()


class TranslateParameters(MutableMapping):
    """Ordered key/value parameters for string interpolation.

    Behaves like a mutable mapping of strings to strings. Values are
    converted with ``str()`` on insertion.

    Example:
        params = TranslateParameters(name="Ada")
        params.set("count", 3)
        parser.interpolate("Hi {name}, {count} new", params)
    """

    __slots__ = ("_params",)

    def __init__(self, *args, **kwargs):
        self._params = EMPTY
        if args or kwargs:
            self.update(*args, **kwargs)

    def set(self, key: str, value) -> None:
        """Insert or overwrite a parameter."""
        self._params = self._params.set(key, str(value))

    def try_get(self, key: str) -> Tuple[Optional[str], bool]:
        """Look up a parameter.

        Returns:
            (value, True) when present, (None, False) otherwise.
        """
        return self._params.try_get(key)

    def get(self, key: str, default=None):
        value, found = self._params.try_get(key)
        return value if found else default

    def remove(self, key: str) -> bool:
        """Remove a parameter.

        Returns:
            True if the key was present.
        """
        self._params, removed = self._params.remove(key)
        return removed

    def clear(self) -> None:
        self._params = EMPTY

    def __getitem__(self, key: str) -> str:
        value, found = self._params.try_get(key)
        if not found:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key) -> bool:
        return self._params.try_get(key)[1]

    def __iter__(self) -> Iterator[str]:
        for key, _ in self._params.items():
            yield key

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"TranslateParameters({dict(self._params.items())!r})"
