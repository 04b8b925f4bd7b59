"""
Verus payment and SafeChat canary constants.
"""

from __future__ import annotations

# Smallest-unit conversion: 1 VRSC = 100_000_000 sats
SATS_PER_COIN = 100_000_000

# Flat fee applied to payments when the caller does not provide one
DEFAULT_TX_FEE = 10_000  # sats

# Canary registration format understood by SafeChat's outbound scanner
CANARY_FORMAT = "safechat-canary-v1"

# Random bytes behind each canary token (16 base64url characters)
CANARY_TOKEN_BYTES = 12

# Delimiter wrapped around the canary id; does not occur in normal text
CANARY_DELIMITER = "§"
