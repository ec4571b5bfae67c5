"""Domain errors — malformed query literals rejected at construction time."""

from __future__ import annotations

from typing import Any

from mp_querydsl.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query-model rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidValueError(ValidationError):
    """A scalar literal cannot be represented in the query DSL."""

    default_code = "invalid_value"

    def __init__(self, kind: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid {kind} value {value!r}: {reason}",
            errors=[{"kind": kind, "reason": reason}],
            **kwargs,
        )
        self.kind = kind
        self.value = value
        self.reason = reason


__all__ = ["DomainError", "InvalidValueError", "ValidationError"]
