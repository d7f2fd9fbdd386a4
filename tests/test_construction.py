"""
Tests for CounterBank construction and read-only properties.
"""

import pytest

from sensorbank import (
    BankConfig,
    BankState,
    CounterBank,
    InvalidArgumentError,
    SensorBankError,
)


@pytest.mark.parametrize("size,max_resets", [(1, 1), (3, 2), (5, 10), (100, 1)])
def test_new_bank_is_active_and_zeroed(size, max_resets):
    """Test that a new bank starts active with all counters and resets at zero."""
    bank = CounterBank(size, max_resets)

    assert bank.is_active is True
    assert bank.state == BankState.ACTIVE
    assert bank.size == size
    assert bank.max_resets_per_counter == max_resets
    for i in range(size):
        assert bank.query_value(i) == 0
        assert bank.query_reset_count(i) == 0


@pytest.mark.parametrize("size", [0, -1, -100])
def test_non_positive_size_rejected(size):
    """Test that size <= 0 raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        CounterBank(size, 2)
    assert exc_info.value.argument == "size"


@pytest.mark.parametrize("max_resets", [0, -1, -5])
def test_non_positive_max_resets_rejected(max_resets):
    """Test that max_resets_per_counter <= 0 raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        CounterBank(3, max_resets)
    assert exc_info.value.argument == "max_resets_per_counter"


@pytest.mark.parametrize("size", [2.5, "3", None, True])
def test_non_integer_size_rejected(size):
    """Test that non-integer sizes (including bool) are rejected."""
    with pytest.raises(InvalidArgumentError):
        CounterBank(size, 2)


def test_invalid_argument_is_value_error():
    """Test that InvalidArgumentError can be caught as ValueError or SensorBankError."""
    with pytest.raises(ValueError):
        CounterBank(0, 1)
    with pytest.raises(SensorBankError):
        CounterBank(1, 0)


def test_from_config():
    """Test building a bank from a BankConfig."""
    bank = CounterBank.from_config(BankConfig(size=4, max_resets_per_counter=7))

    assert bank.size == 4
    assert bank.max_resets_per_counter == 7
    assert bank.is_active is True


def test_properties_are_read_only(bank):
    """Test that size, max_resets_per_counter and is_active cannot be assigned."""
    with pytest.raises(AttributeError):
        bank.size = 10
    with pytest.raises(AttributeError):
        bank.max_resets_per_counter = 10
    with pytest.raises(AttributeError):
        bank.is_active = False
