"""
Coin selection and payment building.
"""

from vapwallet.wallet.coin_selection import select_coins, total_value
from vapwallet.wallet.models import CoinSelection, InsufficientFundsError
from vapwallet.wallet.payment import PaymentNotImplementedError, PaymentParams, build_payment

__all__ = [
    "CoinSelection",
    "InsufficientFundsError",
    "PaymentNotImplementedError",
    "PaymentParams",
    "build_payment",
    "select_coins",
    "total_value",
]
