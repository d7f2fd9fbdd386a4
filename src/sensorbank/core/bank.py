"""
Counter bank with per-counter reset tracking.

A bank holds ``size`` non-negative counters and, for each one, a tally of
how many times it has been reset. When any tally reaches
``max_resets_per_counter`` the whole bank becomes inactive and rejects
mutators until ``reactivate()`` is called.

Constraints and Failure Modes:
- Index checks run before activity checks, so an out-of-range index on an
  inactive bank raises IndexOutOfRangeError, not InactiveBankError
- Every mutator validates fully before touching state (all-or-nothing)
- Not thread-safe; callers sharing a bank across threads must lock it
"""

import logging
from typing import List

from .errors import InactiveBankError
from .models import BankConfig, BankState, BankStatus
from .validators import validate_index, validate_positive

logger = logging.getLogger(__name__)


class CounterBank:
    """Fixed-size bank of counters that deactivates after too many resets."""

    def __init__(self, size: int, max_resets_per_counter: int) -> None:
        """
        Create a bank with all counters and reset counts at zero.

        Args:
            size: Number of counters (must be greater than zero)
            max_resets_per_counter: Resets allowed per counter before the bank
                deactivates (must be greater than zero)

        Raises:
            InvalidArgumentError: If either argument is not a positive integer
        """
        validate_positive("size", size)
        validate_positive("max_resets_per_counter", max_resets_per_counter)

        self._counters: List[int] = [0] * size
        self._reset_counts: List[int] = [0] * size
        self._max_resets_per_counter = max_resets_per_counter
        self._is_active = True
        logger.debug(
            "Created counter bank: size=%d max_resets=%d", size, max_resets_per_counter
        )

    @classmethod
    def from_config(cls, config: BankConfig) -> "CounterBank":
        """Create a bank from a BankConfig."""
        return cls(config.size, config.max_resets_per_counter)

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def state(self) -> BankState:
        return BankState.ACTIVE if self._is_active else BankState.INACTIVE

    @property
    def size(self) -> int:
        return len(self._counters)

    @property
    def max_resets_per_counter(self) -> int:
        return self._max_resets_per_counter

    def _ensure_active(self) -> None:
        if not self._is_active:
            raise InactiveBankError()

    def increment_counter(self, index: int) -> None:
        """
        Add one to the counter at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size)
            InactiveBankError: If the bank is inactive
        """
        validate_index(index, self.size)
        self._ensure_active()

        self._counters[index] += 1

    def query_value(self, index: int) -> int:
        """Return the current value of the counter at index."""
        validate_index(index, self.size)
        return self._counters[index]

    def query_reset_count(self, index: int) -> int:
        """Return how many times the counter at index has been reset."""
        validate_index(index, self.size)
        return self._reset_counts[index]

    def query_counters_with_value(self, value: int) -> int:
        """Count the counters currently holding value."""
        return sum(1 for counter in self._counters if counter == value)

    def reset_counter(self, index: int) -> None:
        """
        Zero the counter at index and record the reset.

        If the counter's reset count reaches max_resets_per_counter the
        bank deactivates. This is the only way a bank becomes inactive.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size)
            InactiveBankError: If the bank is inactive
        """
        validate_index(index, self.size)
        self._ensure_active()

        self._counters[index] = 0
        self._reset_counts[index] += 1

        if self._reset_counts[index] >= self._max_resets_per_counter:
            self._is_active = False
            logger.info(
                "Counter %d reached %d resets; bank deactivated",
                index,
                self._reset_counts[index],
            )

    def reset_sensor_bank(self) -> None:
        """
        Zero every counter and every reset count.

        The activity state is left unchanged.

        Raises:
            InactiveBankError: If the bank is inactive
        """
        self._ensure_active()

        for i in range(self.size):
            self._counters[i] = 0
            self._reset_counts[i] = 0
        logger.debug("Bank reset: %d counters cleared", self.size)

    def reactivate(self) -> None:
        """Mark the bank active and clear all reset counts, keeping counter values."""
        was_active = self._is_active
        self._is_active = True
        for i in range(self.size):
            self._reset_counts[i] = 0
        logger.debug("Bank reactivated (was_active=%s)", was_active)

    def status(self) -> BankStatus:
        """Return a snapshot of the bank's current state."""
        return BankStatus.from_bank(self)

    def describe(self) -> str:
        """Return a one-line summary of activity, size and reset limit."""
        return (
            f"SensorBank[Active={self._is_active}, Size={self.size}, "
            f"MaxResets={self._max_resets_per_counter}]"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"CounterBank(size={self.size}, "
            f"max_resets_per_counter={self._max_resets_per_counter}, "
            f"is_active={self._is_active})"
        )
