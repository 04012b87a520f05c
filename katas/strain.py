"""Filtering collections by a predicate."""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def keep(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items for which predicate holds, in order."""
    return [item for item in items if predicate(item)]


def discard(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items for which predicate does not hold, in order."""
    return [item for item in items if not predicate(item)]