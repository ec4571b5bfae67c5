"""Kernel errors – the mp-querydsl error hierarchy."""

from mp_querydsl.kernel.errors.application import ApplicationError
from mp_querydsl.kernel.errors.base import BaseError
from mp_querydsl.kernel.errors.domain import DomainError, InvalidValueError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidValueError",
    "ValidationError",
]
