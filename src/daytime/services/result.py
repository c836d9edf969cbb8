"""ServiceResult and ServiceError — what every DayTimeService operation returns.

INVARIANT: DayTimeError never crosses the service boundary.  A failed
operation carries the error's kind and its outer-to-inner context chain
in a ServiceError instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from daytime.domain.errors import DayTimeError, ErrorKind


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is the ErrorKind name for domain failures, or a request-level
    code (``UNKNOWN_MODE``, ``UNKNOWN_FORMAT``) with no ``kind``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    kind: ErrorKind | None = None
    context: list[str] = Field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: DayTimeError) -> ServiceError:
        return cls(
            code=exc.kind.name,
            message=str(exc),
            kind=exc.kind,
            context=list(exc.context),
        )


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``parse``, ``anchor``, ``encode``, ``decode``).
        data: Operation-specific payload on success.
        warnings: Lossy normalisation or a wall-clock shift the caller
            should know about; never set on failure.
        error: Structured error if ``ok`` is False.
        meta: Settings that shaped the result, e.g. the rollover rule.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: DayTimeError) -> ServiceResult:
        """Failed result for *op* carrying *exc*."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
