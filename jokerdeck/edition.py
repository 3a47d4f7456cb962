"""Editions and the slate, a capacity-limited row that negatives extend."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Iterator, Protocol, TypeVar


class Edition(Enum):
    """A special edition a card or joker may carry."""

    FOIL = "foil"
    HOLOGRAPHIC = "holographic"
    POLYCHROME = "polychrome"
    NEGATIVE = "negative"


class HasEdition(Protocol):
    edition: Edition | None


def is_foil(item: HasEdition) -> bool:
    """Whether ``item`` has the foil edition."""
    return item.edition is Edition.FOIL


def is_holographic(item: HasEdition) -> bool:
    """Whether ``item`` has the holographic edition."""
    return item.edition is Edition.HOLOGRAPHIC


def is_polychrome(item: HasEdition) -> bool:
    """Whether ``item`` has the polychrome edition."""
    return item.edition is Edition.POLYCHROME


def is_negative(item: HasEdition) -> bool:
    """Whether ``item`` has the negative edition."""
    return item.edition is Edition.NEGATIVE


class SlateFullError(Exception):
    """Raised when a non-negative item is pushed onto a full slate."""

    def __init__(self, item: Any) -> None:
        super().__init__("slate is full")
        self.item = item


T = TypeVar("T", bound=HasEdition)


class Slate(Generic[T]):
    """An ordered row of items whose capacity grows by one per negative item."""

    def __init__(self, base_cap: int) -> None:
        if isinstance(base_cap, bool) or not isinstance(base_cap, int):
            raise TypeError("base_cap must be an int")
        if base_cap < 0:
            raise ValueError("base_cap must not be negative")
        self._items: list[T] = []
        self._base_cap = base_cap
        self._neg_count = 0

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self) == self.cap()

    def __len__(self) -> int:
        return len(self._items)

    def free_len(self) -> int:
        """Number of slots still open to non-negative items."""
        return self.cap() - len(self)

    def cap(self) -> int:
        return self._base_cap + self._neg_count

    def base_cap(self) -> int:
        return self._base_cap

    def push(self, item: T) -> None:
        """Append ``item``; raise SlateFullError if there is no room for it."""
        if is_negative(item):
            self._items.append(item)
            self._neg_count += 1
        elif not self.is_full():
            self._items.append(item)
        else:
            raise SlateFullError(item)

    def remove(self, index: int) -> T:
        """Remove and return the item at ``index``."""
        item = self._items.pop(index)
        if is_negative(item):
            self._neg_count -= 1
        return item

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def copy(self) -> Slate[T]:
        """Return a shallow copy that can change independently of this one."""
        other: Slate[T] = Slate(self._base_cap)
        other._items = list(self._items)
        other._neg_count = self._neg_count
        return other

    def __repr__(self) -> str:
        return f"Slate(base_cap={self._base_cap}, items={self._items!r})"