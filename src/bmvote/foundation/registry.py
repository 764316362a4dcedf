"""
Named registry used for the closed sets of pluggable components (input generators).
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Ordered mapping of names to items.

    Supports registration as a plain call or as a decorator. Lookups of unknown
    names go through ``on_missing`` so callers can raise a domain-specific error;
    the default raises ``KeyError``. Once ``freeze()`` is called the set of
    names is closed.
    """

    def __init__(self, name: str = "Registry", on_missing: Callable[[str, list[str]], Exception] | None = None) -> None:
        self._name = name
        self._items: dict[str, T] = {}
        self._on_missing = on_missing
        self._frozen = False

    def register(self, key: str, item: T | None = None) -> Callable[[T], T] | T:
        """
        Register ``item`` under ``key``, or return a decorator when ``item`` is None.

        Raises:
            ValueError: on duplicate keys or when the registry is frozen.
        """

        def _do_register(obj: T) -> T:
            if self._frozen:
                raise ValueError(f"Registry '{self._name}' is frozen; cannot add '{key}'")
            if key in self._items:
                raise ValueError(f"Key '{key}' already exists in registry '{self._name}'")
            self._items[key] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def freeze(self) -> None:
        self._frozen = True

    def get(self, key: str) -> T:
        try:
            return self._items[key]
        except KeyError:
            if self._on_missing is not None:
                raise self._on_missing(key, self.names()) from None
            raise KeyError(f"Key '{key}' not found in registry '{self._name}'") from None

    def names(self) -> list[str]:
        """Registered keys in registration order."""
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry"]
