"""
Failure kinds and the matching rule shared by every type-directed combinator.

A failure kind is an exception class. Python's class hierarchy is the
"is-a" relation between kinds: a ``json.JSONDecodeError`` is a ``ValueError``
and matches either kind, but never ``OSError``.

Candidates are checked in the order the caller gives them and the first
match wins. Exact matching (no subclasses) is available as a stricter
alternative.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Iterable
from dataclasses import dataclass

type FailureKind = type[BaseException] | types.UnionType | Iterable[type[BaseException]]


def kinds_of(kind: FailureKind) -> tuple[type[BaseException], ...]:
    """
    Normalize a failure kind argument into an ordered tuple of classes.

    Args:
        kind: A single exception class, a union such as ``KeyError | ValueError``,
            or an ordered iterable of classes.

    Returns:
        The candidate classes, in caller order.

    Raises:
        TypeError: If any candidate is not an exception class.
    """
    if isinstance(kind, type):
        candidates: tuple[object, ...] = (kind,)
    elif isinstance(kind, types.UnionType):
        candidates = typing.get_args(kind)
    else:
        candidates = tuple(kind)
    for candidate in candidates:
        if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
            msg = f"Failure kinds must be exception classes, got {candidate!r}"
            raise TypeError(msg)
    return candidates  # type: ignore[return-value]


def match_kind(
    failure: BaseException | None,
    kind: FailureKind,
    *,
    exact: bool = False,
) -> type[BaseException] | None:
    """
    Find the first candidate kind that a captured failure belongs to.

    Args:
        failure: The captured failure, or None when there is none.
        kind: A single exception class or an ordered iterable of them.
        exact: Only accept the failure's own class, not its base classes.

    Returns:
        The first matching candidate, or None if nothing matches.
    """
    candidates = kinds_of(kind)
    if failure is None:
        return None
    for candidate in candidates:
        if exact:
            if type(failure) is candidate:
                return candidate
        elif isinstance(failure, candidate):
            return candidate
    return None


def message_of(failure: BaseException) -> str:
    """
    Return ``str(failure)``, or a placeholder when the failure cannot be printed.

    Args:
        failure: The failure to describe.

    Returns:
        The failure's message.
    """
    try:
        return str(failure)
    except Exception:
        return f"<unprintable {type(failure).__name__}>"


def failure_chain(failure: BaseException) -> list[BaseException]:
    """
    List the failures that led to this one, nearest first.

    Explicit causes (``raise ... from ...``) are followed, as are implicit
    contexts unless they were suppressed.

    Args:
        failure: The failure whose chain to walk.

    Returns:
        The chained failures, excluding ``failure`` itself.
    """
    chain: list[BaseException] = []
    seen = {id(failure)}
    current: BaseException | None = failure
    while current is not None:
        nxt = current.__cause__
        if nxt is None and not current.__suppress_context__:
            nxt = current.__context__
        if nxt is None or id(nxt) in seen:
            break
        seen.add(id(nxt))
        chain.append(nxt)
        current = nxt
    return chain


@dataclass(frozen=True, slots=True)
class FailureHandle:
    """
    Read-only snapshot of a captured failure.

    Attributes:
        kind: Runtime class of the failure.
        message: Human-readable message (``str(failure)``).
        causes: Snapshots of the chained failures, nearest first.
    """

    kind: type[BaseException]
    message: str
    causes: tuple[FailureHandle, ...] = ()

    @classmethod
    def capture(cls, failure: BaseException) -> FailureHandle:
        """
        Snapshot a failure together with its cause chain.

        Args:
            failure: The failure to describe.

        Returns:
            A FailureHandle for the failure.
        """
        causes = tuple(cls(type(cause), message_of(cause)) for cause in failure_chain(failure))
        return cls(type(failure), message_of(failure), causes)

    @property
    def kind_name(self) -> str:
        """Return the failure's class name."""
        return self.kind.__name__

    def is_a(self, kind: FailureKind, *, exact: bool = False) -> bool:
        """Check whether this failure belongs to the given kind(s)."""
        for candidate in kinds_of(kind):
            if self.kind is candidate or (not exact and issubclass(self.kind, candidate)):
                return True
        return False

    def __str__(self) -> str:
        """Return string representation of the failure."""
        return f"{self.kind_name}: {self.message}" if self.message else self.kind_name
