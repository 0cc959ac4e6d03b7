# Result of a tracking operation: a value, or a value plus a categorized failure
from enum import Enum
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    REMOTE_ERROR = "remote_error"
    INVALID_INPUT = "invalid_input"


class OperationFailure(BaseModel):
    kind: FailureKind
    message: str


class OperationResult(BaseModel, Generic[T]):
    """
    Outcome of a remote operation.

    Failures never raise past the service layer; they are attached here so
    callers can tell "no data" apart from "call failed". Reads keep a safe
    default in value (an empty list) even when failed.
    """
    value: Optional[T] = None
    failure: Optional[OperationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, kind: FailureKind, message: str, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value, failure=OperationFailure(kind=kind, message=message))
