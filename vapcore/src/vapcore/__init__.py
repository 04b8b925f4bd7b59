"""
vapcore - Core library for VAP agent components

Provides shared models, constants and prompt-safety helpers.
"""

__version__ = "0.1.0"

from vapcore.canary import (
    CanaryConfig,
    CanaryRegistration,
    ProtectedPrompt,
    check_for_canary_leak,
    generate_canary,
    protect_system_prompt,
)
from vapcore.constants import (
    CANARY_FORMAT,
    DEFAULT_TX_FEE,
    SATS_PER_COIN,
)
from vapcore.models import NetworkType, SpendableOutput, Utxo, parse_utxo_list

__all__ = [
    "CANARY_FORMAT",
    "CanaryConfig",
    "CanaryRegistration",
    "DEFAULT_TX_FEE",
    "NetworkType",
    "ProtectedPrompt",
    "SATS_PER_COIN",
    "SpendableOutput",
    "Utxo",
    "check_for_canary_leak",
    "generate_canary",
    "parse_utxo_list",
    "protect_system_prompt",
]
