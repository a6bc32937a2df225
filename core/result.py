"""
Result container for capturing the outcome of fallible operations.

A Result holds exactly one of: a value, a captured failure (an exception),
or nothing at all (empty). It is built either from a literal value/failure
or by invoking a zero-argument operation and catching what it raises, and
is then consumed through its combinators instead of try/except blocks.

Example:
    >>> def parse_port(raw: str) -> int:
    ...     return int(raw)
    ...
    >>> result = Result.of_supplier(lambda: parse_port("80a"))
    >>> result.is_failure()
    True
    >>> result.recover(ValueError, lambda _e: 8080).get()
    8080

Equality and hashing look at the held value only, so every failure-carrying
or empty Result compares equal to every other one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from core.errors import FailurePresentError, NoValuePresentError, NoValueProducedError
from core.failures import FailureHandle, FailureKind, match_kind, message_of
from core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from core.fallible import FallibleRunnable, FallibleSupplier

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Result[T]:
    """
    Immutable value-or-failure-or-empty container.

    Use the ``of*`` factories rather than the constructor.

    Attributes:
        _value: The held value, None unless the Result is present.
        _failure: The captured failure, None unless the Result is a failure.
    """

    _value: T | None = None
    _failure: BaseException | None = None

    def __post_init__(self) -> None:
        """Reject a Result holding both a value and a failure."""
        if self._value is not None and self._failure is not None:
            msg = "A Result cannot hold both a value and a failure"
            raise ValueError(msg)

    # Construction

    @classmethod
    def of[V](cls, value: V) -> Result[V]:
        """
        Wrap a value that must be present.

        Args:
            value: The value to hold.

        Returns:
            A present Result.

        Raises:
            ValueError: If value is None.
        """
        if value is None:
            msg = "Result.of() requires a value, got None"
            raise ValueError(msg)
        return Result(value)

    @classmethod
    def of_nullable[V](cls, value: V | None) -> Result[V]:
        """
        Wrap a value that may be None.

        Args:
            value: The value to hold, or None.

        Returns:
            A present Result, or the empty Result when value is None.
        """
        return Result.empty() if value is None else Result(value)

    @classmethod
    def of_failure(cls, failure: BaseException) -> Result[Any]:
        """
        Wrap a failure that must be present.

        Args:
            failure: The exception to hold.

        Returns:
            A failure Result.

        Raises:
            ValueError: If failure is None.
            TypeError: If failure is not an exception instance.
        """
        if failure is None:
            msg = "Result.of_failure() requires a failure, got None"
            raise ValueError(msg)
        if not isinstance(failure, BaseException):
            msg = f"Result.of_failure() requires an exception, got {type(failure).__name__}"
            raise TypeError(msg)
        return Result(None, failure)

    @classmethod
    def of_nullable_failure(cls, failure: BaseException | None) -> Result[Any]:
        """Wrap a failure that may be None; None gives the empty Result."""
        return Result.empty() if failure is None else Result.of_failure(failure)

    @classmethod
    def of_supplier[V](cls, supplier: FallibleSupplier[V]) -> Result[V]:
        """
        Invoke a fallible operation once and capture its outcome.

        A None return is treated as a failure to produce a value.

        Args:
            supplier: Zero-argument operation to invoke.

        Returns:
            A present Result, or a failure Result holding what the supplier
            raised (NoValueProducedError if it returned None).
        """
        try:
            value = supplier()
        except Exception as e:
            return _captured(e, supplier)
        if value is None:
            return _captured(NoValueProducedError(), supplier)
        return Result(value)

    @classmethod
    def of_nullable_supplier[V](cls, supplier: FallibleSupplier[V | None]) -> Result[V]:
        """
        Invoke a fallible operation once and capture its outcome.

        Unlike ``of_supplier``, a None return means "nothing to report".

        Args:
            supplier: Zero-argument operation to invoke.

        Returns:
            A present Result, the empty Result if the supplier returned None,
            or a failure Result holding what the supplier raised.
        """
        try:
            value = supplier()
        except Exception as e:
            return _captured(e, supplier)
        return Result.of_nullable(value)

    @classmethod
    def of_runnable(cls, task: FallibleRunnable) -> Result[None]:
        """
        Run an operation for its side effects and capture any failure.

        Args:
            task: Zero-argument operation to run.

        Returns:
            The empty Result on success, or a failure Result.
        """
        try:
            task()
        except Exception as e:
            return _captured(e, task)
        return Result.empty()

    @classmethod
    def empty(cls) -> Result[Any]:
        """Return the shared empty Result."""
        return _EMPTY

    # Inspection

    def is_present(self) -> bool:
        """Return True if this Result holds a value."""
        return self._value is not None

    def is_failure(self) -> bool:
        """Return True if this Result holds a failure."""
        return self._failure is not None

    def is_empty(self) -> bool:
        """Return True if this Result holds neither a value nor a failure."""
        return self._value is None and self._failure is None

    @property
    def failure(self) -> BaseException | None:
        """Return the captured failure, if any."""
        return self._failure

    @property
    def failure_kind(self) -> type[BaseException] | None:
        """Return the class of the captured failure, if any."""
        return None if self._failure is None else type(self._failure)

    @property
    def failure_message(self) -> str | None:
        """Return the message of the captured failure, if any."""
        return None if self._failure is None else message_of(self._failure)

    def describe_failure(self) -> FailureHandle | None:
        """
        Snapshot the captured failure.

        Returns:
            A FailureHandle with kind, message and cause chain, or None.
        """
        return None if self._failure is None else FailureHandle.capture(self._failure)

    # Extraction

    def get(self) -> T:
        """
        Return the value, raising if there is none.

        Returns:
            The held value.

        Raises:
            FailurePresentError: If a failure is held (chained from it).
            NoValuePresentError: If the Result is empty.
        """
        if self._value is not None:
            return self._value
        if self._failure is not None:
            raise FailurePresentError(self._failure) from self._failure
        raise NoValuePresentError

    def or_else(self, fallback: T) -> T:
        """
        Return the value, or ``fallback`` when there is none.

        Never raises, even when a failure is held.
        """
        return self._value if self._value is not None else fallback

    def or_else_get(self, fallback: Callable[[], T]) -> T:
        """
        Return the value, or compute a fallback when there is none.

        Args:
            fallback: Called only when no value is held.

        Returns:
            The held value or the computed fallback.
        """
        return self._value if self._value is not None else fallback()

    def or_else_raise(self, failure_supplier: Callable[[], BaseException]) -> T:
        """
        Return the value or raise.

        A captured failure takes precedence over the supplied one.

        Args:
            failure_supplier: Builds the exception raised for an empty Result.

        Returns:
            The held value.

        Raises:
            BaseException: The captured failure, or the supplied one if empty.
        """
        if self._value is not None:
            return self._value
        if self._failure is not None:
            raise self._failure
        raise failure_supplier()

    def rethrow(self) -> Result[T]:
        """Raise the captured failure if there is one, else return self."""
        if self._failure is not None:
            raise self._failure
        return self

    # Transformation

    def map[U](self, func: Callable[[T], U | None]) -> Result[U]:
        """
        Apply a function to the held value.

        Args:
            func: Function to apply to the value.

        Returns:
            A Result with the mapped value (empty if it returned None), a
            failure Result if func raised, or self unchanged when no value
            is held.
        """
        if self._value is None:
            return self  # type: ignore[return-value]
        try:
            mapped = func(self._value)
        except Exception as e:
            return Result(None, e)
        return Result.of_nullable(mapped)

    def flat_map[U](self, func: Callable[[T], Result[U]]) -> Result[U]:
        """
        Apply a function that itself returns a Result.

        Args:
            func: Function to apply to the value.

        Returns:
            The Result returned by func, a failure Result if func raised or
            did not return a Result, or self unchanged when no value is held.
        """
        if self._value is None:
            return self  # type: ignore[return-value]
        try:
            mapped = func(self._value)
        except Exception as e:
            return Result(None, e)
        if not isinstance(mapped, Result):
            return Result(
                None,
                TypeError(f"flat_map() function must return a Result, got {type(mapped).__name__}"),
            )
        return mapped

    def filter(self, predicate: Callable[[T], bool]) -> Result[T]:
        """
        Keep the value only if it satisfies a predicate.

        Args:
            predicate: Test applied to the value.

        Returns:
            Self if the predicate holds, the empty Result if it does not, a
            failure Result if the predicate raised, or self unchanged when
            no value is held.
        """
        if self._value is None:
            return self
        try:
            keep = predicate(self._value)
        except Exception as e:
            return Result(None, e)
        return self if keep else Result.empty()

    # Recovery and propagation

    def recover(
        self,
        kind: FailureKind,
        func: Callable[[Any], T | None],
        *,
        exact: bool = False,
    ) -> Result[T]:
        """
        Turn a matching failure into a value.

        Args:
            kind: Exception class, or ordered iterable of them, to match.
            func: Builds the replacement value from the failure.
            exact: Match only the failure's own class, not its bases.

        Returns:
            A Result with the recovered value, a failure Result if func
            raised, or self unchanged when the failure does not match.
        """
        if match_kind(self._failure, kind, exact=exact) is None:
            return self
        try:
            recovered = func(self._failure)
        except Exception as e:
            return Result(None, e)
        return Result.of_nullable(recovered)

    def flat_recover(
        self,
        kind: FailureKind,
        func: Callable[[Any], Result[T]],
        *,
        exact: bool = False,
    ) -> Result[T]:
        """
        Replace a matching failure with the Result returned by ``func``.

        Recovery that can itself fail; raises from func are captured.
        """
        if match_kind(self._failure, kind, exact=exact) is None:
            return self
        try:
            recovered = func(self._failure)
        except Exception as e:
            return Result(None, e)
        if not isinstance(recovered, Result):
            return Result(
                None,
                TypeError(f"flat_recover() function must return a Result, got {type(recovered).__name__}"),
            )
        return recovered

    def handle(
        self,
        kind: FailureKind,
        side_effect: Callable[[Any], object],
        *,
        exact: bool = False,
    ) -> Result[T]:
        """
        Consume a matching failure for its side effect and discard it.

        Args:
            kind: Exception class, or ordered iterable of them, to match.
            side_effect: Run with the failure.
            exact: Match only the failure's own class, not its bases.

        Returns:
            The empty Result if handled, a failure Result if side_effect raised,
            or self unchanged when the failure does not match.
        """
        if match_kind(self._failure, kind, exact=exact) is None:
            return self
        try:
            side_effect(self._failure)
        except Exception as e:
            return Result(None, e)
        return Result.empty()

    def propagate(
        self,
        kind: FailureKind,
        translator: Callable[[Any], BaseException] | None = None,
        *,
        exact: bool = False,
    ) -> Result[T]:
        """
        Raise a matching failure, optionally translated into another kind.

        Callers using this must be prepared to raise the matched kind (or
        the translated one).

        Args:
            kind: Exception class, or ordered iterable of them, to match.
            translator: Builds the exception to raise instead of the original.
            exact: Match only the failure's own class, not its bases.

        Returns:
            Self unchanged when the failure does not match, for chaining.

        Raises:
            BaseException: The captured failure, or its translation chained
                from it.
        """
        if match_kind(self._failure, kind, exact=exact) is None:
            return self
        if translator is None:
            raise self._failure
        translated = translator(self._failure)
        logger.debug(
            "Translating propagated failure",
            source=type(self._failure).__name__,
            target=type(translated).__name__,
        )
        raise translated from self._failure

    # Observation

    def if_present(self, consumer: Callable[[T], object]) -> Result[T]:
        """
        Run ``consumer`` with the value, if present.

        Observation does not suppress failures: a held failure is re-raised.

        Raises:
            BaseException: The captured failure, if any.
        """
        if self._value is not None:
            consumer(self._value)
        if self._failure is not None:
            raise self._failure
        return self

    def if_failure(self, consumer: Callable[[BaseException], object]) -> Result[T]:
        """
        Run ``consumer`` with the captured failure, if any.

        Args:
            consumer: Observer for the failure.

        Returns:
            Self, or a failure Result holding what the consumer raised.
        """
        if self._failure is None:
            return self
        return self._observe(consumer, self._failure)

    def if_failure_is(
        self,
        kind: FailureKind,
        consumer: Callable[[Any], object],
        *,
        exact: bool = False,
    ) -> Result[T]:
        """
        Run ``consumer`` with the captured failure if it matches ``kind``.

        Returns:
            Self, or a failure Result holding what the consumer raised.
        """
        if match_kind(self._failure, kind, exact=exact) is None:
            return self
        return self._observe(consumer, self._failure)

    def if_present_or_else(
        self,
        consumer: Callable[[T], object],
        fallback_action: Callable[[], object],
    ) -> Result[T]:
        """
        Run exactly one of two actions depending on whether a value is held.

        Args:
            consumer: Run with the value when present.
            fallback_action: Run when no value is held.

        Returns:
            Self, or a failure Result holding what the action raised.
        """
        try:
            if self._value is not None:
                consumer(self._value)
            else:
                fallback_action()
        except Exception as e:
            return Result(None, e)
        return self

    def _observe(self, consumer: Callable[[Any], object], subject: object) -> Result[T]:
        try:
            consumer(subject)
        except Exception as e:
            return Result(None, e)
        return self

    def __eq__(self, other: object) -> bool:
        """Compare held values only."""
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash the held value only."""
        return hash(self._value)

    def __repr__(self) -> str:
        """Return string representation of the Result."""
        if self._value is not None:
            return f"Result(value={self._value!r})"
        if self._failure is not None:
            return f"Result(failure={self._failure!r})"
        return "Result(empty)"


_EMPTY: Result[Any] = Result()


def _captured(failure: Exception, operation: object) -> Result[Any]:
    logger.debug(
        "Captured failure from fallible operation",
        operation=getattr(operation, "__qualname__", type(operation).__qualname__),
        failure=failure,
    )
    return Result(None, failure)


def success[T](value: T) -> Result[T]:
    """
    Create a present Result.

    Args:
        value: The value, which must not be None.

    Returns:
        A Result holding the value.
    """
    return Result.of(value)


def failure(error: BaseException) -> Result[Any]:
    """
    Create a failure Result.

    Args:
        error: The exception to hold.

    Returns:
        A Result holding the failure.
    """
    return Result.of_failure(error)


def attempt[T](supplier: FallibleSupplier[T]) -> Result[T]:
    """Invoke ``supplier`` and capture its outcome (see ``Result.of_supplier``)."""
    return Result.of_supplier(supplier)


def attempt_nullable[T](supplier: FallibleSupplier[T | None]) -> Result[T]:
    """Invoke ``supplier``, treating None as empty (see ``Result.of_nullable_supplier``)."""
    return Result.of_nullable_supplier(supplier)
