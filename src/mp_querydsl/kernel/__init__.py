"""Kernel – framework-agnostic building blocks shared by every layer."""

from mp_querydsl.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidValueError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidValueError",
    "ValidationError",
]
