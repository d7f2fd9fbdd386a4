"""
Exceptions raised by the counter bank.
"""


class SensorBankError(Exception):
    """Base class for all counter bank errors."""


class InvalidArgumentError(SensorBankError, ValueError):
    """Raised when a bank is constructed with a non-positive size or limit."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument


class IndexOutOfRangeError(SensorBankError, IndexError):
    """Raised when a counter index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Index {index} out of range: must be between 0 and {size - 1}"
        )
        self.index = index
        self.size = size


class InactiveBankError(SensorBankError, RuntimeError):
    """Raised when a mutator is called on an inactive bank."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot perform this operation because the sensor bank is inactive. "
            "Use reactivate() to restore functionality."
        )
