"""Helpers that reduce an iterable to a single element."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class CollectionSizeError(ValueError):
    """Raised when an iterable does not hold the expected number of elements."""

    def __init__(self, size: int, message: str | None = None) -> None:
        """
        Initialize with the observed size.

        Args:
            size: Number of elements actually found.
            message: Optional override for the error message.
        """
        self.size = size
        self.message = message or f"Expected exactly one element, found {size}"
        super().__init__(self.message)


def collect_one[T](items: Iterable[T]) -> T:
    """
    Return the only element of an iterable.

    Args:
        items: Iterable expected to hold exactly one element.

    Returns:
        The single element.

    Raises:
        CollectionSizeError: If the iterable is empty or holds more than one element.
    """
    elements = list(items)
    if len(elements) != 1:
        raise CollectionSizeError(len(elements))
    return elements[0]


def collect_first[T](items: Iterable[T]) -> T:
    """
    Return the first element of an iterable.

    Raises:
        CollectionSizeError: If the iterable is empty.
    """
    for element in items:
        return element
    raise CollectionSizeError(0, "Expected at least one element, found 0")


def find_one[T](items: Iterable[T], predicate: Callable[[T], bool]) -> T:
    """Return the only element satisfying ``predicate``."""
    return collect_one(item for item in items if predicate(item))
