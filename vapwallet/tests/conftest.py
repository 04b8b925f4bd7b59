"""
Test configuration for wallet tests.
"""

from __future__ import annotations

import pytest
from loguru import logger

from vapcore.models import Utxo


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI commands replace loguru sinks; drop them after each test."""
    yield
    logger.remove()


def make_utxo(value: int, index: int = 0) -> Utxo:
    return Utxo(txid=f"{index:064x}", vout=index, value=value, height=1)


@pytest.fixture
def utxo_factory():
    return make_utxo


@pytest.fixture
def sample_wif() -> str:
    """Test key (not for production use!)."""
    return "UwCVqKBgEM2bgxEhzCGMBFWJaGMqxUL5hUGQWANRSqqUUgaeXzMt"
