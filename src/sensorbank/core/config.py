"""
Configuration resolution for SensorBank.

Bank parameters come from the following sources, in priority order:
1. Explicit arguments to CounterBank / BankConfig
2. SENSORBANK_SIZE and SENSORBANK_MAX_RESETS environment variables
3. Built-in defaults (DEFAULT_SIZE, DEFAULT_MAX_RESETS)

Constraints and Failure Modes:
- Environment values must parse as base-10 integers
- Values must be greater than zero
- Either violation raises InvalidArgumentError naming the variable
"""

import os
from typing import Mapping, Optional

from .errors import InvalidArgumentError
from .models import BankConfig

SIZE_ENV = "SENSORBANK_SIZE"
MAX_RESETS_ENV = "SENSORBANK_MAX_RESETS"

DEFAULT_SIZE = 8
DEFAULT_MAX_RESETS = 3


def _read_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidArgumentError(name, f"{name} must be an integer, got: {raw!r}")
    if value <= 0:
        raise InvalidArgumentError(name, f"{name} must be greater than zero, got: {value}")
    return value


def get_bank_config(environ: Optional[Mapping[str, str]] = None) -> BankConfig:
    """
    Build a BankConfig from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        BankConfig with values from the environment or the defaults

    Raises:
        InvalidArgumentError: If a variable is set to a non-integer or
            non-positive value
    """
    env = os.environ if environ is None else environ
    return BankConfig(
        size=_read_positive_int(env, SIZE_ENV, DEFAULT_SIZE),
        max_resets_per_counter=_read_positive_int(
            env, MAX_RESETS_ENV, DEFAULT_MAX_RESETS
        ),
    )
