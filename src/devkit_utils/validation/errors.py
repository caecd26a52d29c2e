"""Argument validation errors."""

from __future__ import annotations

from typing import Any


class ArgumentError(ValueError):
    """Base exception for invalid arguments."""

    def __init__(self, message: str, param_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.param_name = param_name

    def __str__(self) -> str:
        if self.param_name:
            return f"{self.message} (Parameter '{self.param_name}')"
        return self.message


class NullError(ArgumentError, TypeError):
    """Raised when a required argument is None."""

    pass


class EmptyError(ArgumentError):
    """Raised when a string, UUID or collection argument has no content."""

    pass


class OutOfRangeError(ArgumentError):
    """Raised when a value falls outside its inclusive bounds."""

    def __init__(
        self,
        message: str,
        param_name: str | None = None,
        actual_value: Any = None,
    ):
        super().__init__(message, param_name)
        self.actual_value = actual_value

    def __str__(self) -> str:
        return f"{super().__str__()}\nActual value was {self.actual_value!r}."


class InvalidEnumError(ArgumentError):
    """Raised when a value is not a defined member of its enum type."""

    def __init__(
        self,
        message: str,
        param_name: str | None = None,
        invalid_value: Any = None,
        enum_type: type | None = None,
    ):
        super().__init__(message, param_name)
        self.invalid_value = invalid_value
        self.enum_type = enum_type
