"""
Core data models using Pydantic for validation and serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NetworkType(str, Enum):
    VERUS = "verus"
    VERUSTEST = "verustest"


@runtime_checkable
class SpendableOutput(Protocol):
    """Minimal view of an output that coin selection needs."""

    txid: str
    vout: int
    value: int


class Utxo(BaseModel):
    """Unspent transaction output as returned by the VAP UTXO endpoint."""

    model_config = ConfigDict(frozen=True)

    txid: str = Field(..., min_length=1)
    vout: int = Field(..., ge=0)
    # The platform API reports the amount as "satoshis"
    value: int = Field(..., ge=0, validation_alias=AliasChoices("value", "satoshis"))
    height: int | None = None

    @property
    def outpoint(self) -> str:
        return f"{self.txid}:{self.vout}"


def parse_utxo_list(data: list[dict]) -> list[Utxo]:
    """
    Parse a list of UTXO objects (e.g. a decoded JSON response body).

    Raises:
        pydantic.ValidationError: If any entry is malformed
    """
    return [Utxo.model_validate(item) for item in data]
