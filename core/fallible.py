"""
Callable contracts for operations that may raise instead of returning.

Any zero-argument callable satisfies these protocols: plain functions,
lambdas, bound methods and ``functools.partial`` objects alike.

Example:
    >>> from core.result import Result
    >>> def read_port() -> int:
    ...     return int("8080")
    ...
    >>> Result.of_supplier(read_port).get()
    8080
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class FallibleSupplier[T](Protocol):
    """A zero-argument operation that returns a value or raises."""

    def __call__(self) -> T:
        """Produce the value, raising to signal failure."""
        ...


@runtime_checkable
class FallibleRunnable(Protocol):
    """A zero-argument operation run for its side effects that may raise."""

    def __call__(self) -> None:
        """Run the operation, raising to signal failure."""
        ...


def swallow() -> Callable[[BaseException], None]:
    """
    Return a consumer that ignores the failure it receives.

    Meant for ``Result.handle`` when the failure should simply be discarded.

    Returns:
        A no-op failure consumer.
    """

    def _ignore(_failure: BaseException) -> None:
        return None

    return _ignore
