"""
Validation utilities for SensorBank.
"""

from typing import Any

from .errors import IndexOutOfRangeError, InvalidArgumentError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_positive(name: str, value: Any) -> None:
    """Validate that a constructor argument is a positive integer."""
    if not _is_int(value):
        raise InvalidArgumentError(
            name, f"{name} must be an integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise InvalidArgumentError(name, f"{name} must be greater than zero, got {value}")


def validate_index(index: Any, size: int) -> None:
    """
    Validate a counter index against the bank size.

    Negative indices are rejected rather than counted from the end.

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, size)
    """
    if not _is_int(index):
        raise TypeError(f"Counter index must be an integer, got {type(index).__name__}")
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(index, size)
