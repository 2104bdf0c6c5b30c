"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def is_whole_number(value: object) -> bool:
    """True for ints, rejecting bools and other numeric types."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account. Always a positive integer."""

    value: int

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Account ID is required")
        if not is_whole_number(self.value):
            raise ValueError("Account ID must be an integer")
        if self.value < 1:
            raise ValueError("Account ID must be positive")

    @classmethod
    def from_value(cls, value: int | None) -> Self:
        return cls(value=value)


@dataclass(frozen=True)
class Money:
    """Whole-unit price representation with validation."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative integer representing seats to allocate."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Seat count cannot be negative")
