"""
SensorBank - a fixed-size bank of counters with reset tracking.

The bank deactivates once any counter has been reset
``max_resets_per_counter`` times and stays inactive until reactivated.
"""

from .core.bank import CounterBank
from .core.errors import (
    InactiveBankError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    SensorBankError,
)
from .core.models import BankConfig, BankState, BankStatus

__all__ = [
    "BankConfig",
    "BankState",
    "BankStatus",
    "CounterBank",
    "InactiveBankError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "SensorBankError",
]
