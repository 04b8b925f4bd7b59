"""
Payment transaction builder for VRSC.

Only the input side is handled here: coins are selected for amount + fee.
Building and signing the transaction itself needs a Verus-aware transaction
library, so build_payment stops after selection. Until then, payments go
through the VAP platform transaction endpoints.
"""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from vapcore.constants import DEFAULT_TX_FEE
from vapcore.models import NetworkType, Utxo
from vapwallet.wallet.coin_selection import select_coins


class PaymentNotImplementedError(NotImplementedError):
    """Raised when a payment would need transaction signing."""

    pass


class PaymentParams(BaseModel):
    """Parameters for a single-recipient payment."""

    wif: str = Field(..., min_length=1, repr=False)
    to_address: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, description="Amount in sats")
    utxos: list[Utxo] = Field(default_factory=list)
    fee: int = Field(default=DEFAULT_TX_FEE, ge=0, description="Flat fee in sats")
    change_address: str | None = None
    network: NetworkType = NetworkType.VERUSTEST

    @property
    def required_amount(self) -> int:
        return self.amount + self.fee


def build_payment(params: PaymentParams) -> str:
    """
    Build a signed payment transaction.

    Coin selection runs first, so insufficient funds are reported before
    anything else.

    Raises:
        InsufficientFundsError: If the UTXOs cannot cover amount + fee
        PaymentNotImplementedError: Always, once inputs are selected
    """
    selection = select_coins(params.utxos, params.required_amount)
    logger.info(
        f"Payment of {params.amount} sats to {params.to_address} on {params.network.value}: "
        f"{len(selection.selected)} inputs, fee={params.fee}, "
        f"change={selection.change(params.required_amount)}"
    )
    raise PaymentNotImplementedError(
        "build_payment: transaction signing is not available. "
        "Use VAP platform transaction endpoints instead."
    )
