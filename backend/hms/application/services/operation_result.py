"""Two-field result returned by every audited CRUD operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Holds either ``data`` (None after a delete) or ``error``, not both.

    Services return this instead of raising so that callers decide how a
    store failure is presented.
    """

    data: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T | None = None) -> "OperationResult[T]":
        return cls(data=data, error=None)

    @classmethod
    def failure(cls, error: Exception) -> "OperationResult[T]":
        return cls(data=None, error=error)
