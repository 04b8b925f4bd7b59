"""
Wallet data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from vapcore.models import SpendableOutput

T = TypeVar("T", bound=SpendableOutput)


class InsufficientFundsError(Exception):
    """Raised when every available UTXO together cannot cover the target."""

    def __init__(self, target: int, available: int):
        self.target = target
        self.available = available
        super().__init__(target, available)

    def __str__(self) -> str:
        return f"Insufficient funds: need {self.target}, have {self.available}"

    @property
    def shortfall(self) -> int:
        return self.target - self.available


@dataclass
class CoinSelection(Generic[T]):
    """Result of coin selection"""

    selected: list[T] = field(default_factory=list)
    total: int = 0

    def change(self, target: int) -> int:
        """Surplus over the target (before any fee)."""
        return self.total - target
