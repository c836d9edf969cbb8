"""Error kinds and the DayTimeError exception.

Every failure raised by the package is a :class:`DayTimeError` tagged with
one of three kinds.  Callers match on the kind, never on the message:

- ``INVALID``: a value or text violates the range or grammar constraints.
- ``OBJ_IS_NIL``: a decode operation was given no target to write into.
- ``UNEXPECTED``: a scan received an inbound shape it does not support.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure classifications."""

    INVALID = "invalid"
    OBJ_IS_NIL = "object is nil"
    UNEXPECTED = "unexpected"


class DayTimeError(ValueError):
    """A classified failure with an outer-to-inner context chain.

    ``str(err)`` renders as ``"outer: inner: kind"``, for example
    ``"parse: value of hour is 24: invalid"``.  Subclasses ``ValueError``
    so pydantic reports it as a validation error.
    """

    def __init__(self, kind: ErrorKind, *context: str) -> None:
        self.kind = kind
        self.context: tuple[str, ...] = context
        super().__init__(": ".join([*context, str(kind)]))

    def is_kind(self, kind: ErrorKind) -> bool:
        """Return True if this error is classified as *kind*."""
        return self.kind is kind

    def wrap(self, context: str) -> DayTimeError:
        """Return a new error of the same kind with *context* prepended.

        Callers raise the result ``from`` this error to keep the chain.
        """
        return DayTimeError(self.kind, context, *self.context)

    def __repr__(self) -> str:
        return f"DayTimeError({self.kind.name}, {str(self)!r})"
