"""Application errors — failures outside the query model itself."""

from __future__ import annotations

from mp_querydsl.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised by application-level services such as settings loading."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
