"""Detailed outcome of a service operation."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Outcome(StrEnum):
    SUCCESS = "success"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Success with a value, a rejection, or a failure with its cause.

    Public service methods collapse this to a bool, an optional entity or
    a list; the detail is kept for logging and diagnostics.
    """

    outcome: Outcome
    value: T | None = None
    reason: str | None = None
    cause: BaseException | None = None

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        return cls(Outcome.SUCCESS, value=value)

    @classmethod
    def rejected(cls, reason: str) -> "OperationResult[T]":
        return cls(Outcome.REJECTED, reason=reason)

    @classmethod
    def failed(cls, reason: str, cause: BaseException | None = None) -> "OperationResult[T]":
        return cls(Outcome.FAILED, reason=reason, cause=cause)

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.SUCCESS
