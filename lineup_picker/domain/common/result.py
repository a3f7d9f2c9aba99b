"""Result types for reporting roster and input problems without raising.

Loading a roster can fail in ways a user should see as a message, not a
traceback: the file is missing, unreadable, or some rows are invalid. Services
return ``Result[T]`` and callers decide how to present a ``DomainError``.
"""

from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorType(str, Enum):
    """Failure categories."""

    VALIDATION_ERROR = "validation_error"
    DATA_NOT_FOUND = "data_not_found"
    DATA_ACCESS_ERROR = "data_access_error"


class DomainError(BaseModel):
    """Structured error for display by the CLI or any other frontend."""

    error_type: ErrorType = Field(..., description="Failure category")
    message: str = Field(..., min_length=1, description="Human-readable summary")
    details: Optional[Dict] = Field(None, description="Extra context, e.g. the file path")
    field_errors: Optional[Dict[str, str]] = Field(
        None, description="Per-row or per-column problems"
    )

    @classmethod
    def validation_error(
        cls,
        message: str,
        field_errors: Optional[Dict[str, str]] = None,
        details: Optional[Dict] = None,
    ) -> "DomainError":
        return cls(
            error_type=ErrorType.VALIDATION_ERROR,
            message=message,
            field_errors=field_errors,
            details=details,
        )

    @classmethod
    def data_not_found(
        cls, message: str, details: Optional[Dict] = None
    ) -> "DomainError":
        return cls(
            error_type=ErrorType.DATA_NOT_FOUND, message=message, details=details
        )

    @classmethod
    def data_access_error(
        cls, message: str, details: Optional[Dict] = None
    ) -> "DomainError":
        return cls(
            error_type=ErrorType.DATA_ACCESS_ERROR, message=message, details=details
        )

    def describe(self) -> List[str]:
        """Message followed by one ``key: problem`` line per field error."""
        lines = [self.message]
        for key, problem in (self.field_errors or {}).items():
            lines.append(f"{key}: {problem}")
        return lines


class Result(Generic[T]):
    """
    Either a value or a DomainError, never both.

    ``value`` and ``error`` raise ValueError when accessed on the wrong kind of
    result, so check ``is_success`` / ``is_failure`` first.
    """

    def __init__(
        self,
        value: Optional[T] = None,
        error: Optional[DomainError] = None,
        _allow_none: bool = False,
    ):
        if value is not None and error is not None:
            raise ValueError("Result cannot have both value and error")
        if error is None and value is None and not _allow_none:
            raise ValueError("Result must have either value or error")
        self._value = value
        self._error = error

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        if self.is_failure:
            raise ValueError(
                f"Cannot access value on failed result: {self._error.message}"
            )
        return self._value

    @property
    def error(self) -> DomainError:
        if self.is_success:
            raise ValueError("Cannot access error on successful result")
        return self._error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, _allow_none=True)

    @classmethod
    def failure(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)
