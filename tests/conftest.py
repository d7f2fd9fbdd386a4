"""
Pytest configuration and fixtures for sensorbank tests.
"""

import pytest

from sensorbank import CounterBank


@pytest.fixture
def bank() -> CounterBank:
    """
    Provide a fresh bank with 3 counters and a limit of 2 resets each.

    Returns:
        CounterBank: Active bank with every counter at zero
    """
    return CounterBank(3, 2)


@pytest.fixture
def inactive_bank(bank: CounterBank) -> CounterBank:
    """Provide a bank deactivated by resetting counter 0 twice."""
    bank.increment_counter(1)
    bank.increment_counter(1)
    bank.reset_counter(0)
    bank.reset_counter(0)
    assert bank.is_active is False
    return bank
