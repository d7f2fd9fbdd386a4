"""
Data models for SensorBank.
"""

from enum import StrEnum
from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .bank import CounterBank


class BankState(StrEnum):
    """Activity states of a counter bank."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class BankConfig(BaseModel):
    """Construction parameters for a counter bank."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., gt=0, strict=True, description="Number of counters")
    max_resets_per_counter: int = Field(
        ...,
        gt=0,
        strict=True,
        description="Resets allowed per counter before the bank deactivates",
    )


class BankStatus(BaseModel):
    """Point-in-time snapshot of a counter bank."""

    state: BankState = Field(..., description="Activity state")
    is_active: bool = Field(..., description="Whether mutators are allowed")
    size: int = Field(..., gt=0, description="Number of counters")
    max_resets_per_counter: int = Field(
        ..., gt=0, description="Reset limit per counter"
    )
    counters: List[int] = Field(..., description="Counter values by index")
    reset_counts: List[int] = Field(..., description="Reset tallies by index")

    @classmethod
    def from_bank(cls, bank: "CounterBank") -> "BankStatus":
        """Create a BankStatus from a live bank."""
        return cls(
            state=bank.state,
            is_active=bank.is_active,
            size=bank.size,
            max_resets_per_counter=bank.max_resets_per_counter,
            counters=[bank.query_value(i) for i in range(bank.size)],
            reset_counts=[bank.query_reset_count(i) for i in range(bank.size)],
        )
