"""
Largest-first coin selection.

The selector is greedy: it takes the biggest UTXOs first and stops as soon as
the target is covered. This uses the fewest inputs but makes no attempt to
minimise change.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from vapwallet.wallet.models import CoinSelection, InsufficientFundsError, T


def total_value(utxos: Iterable[T]) -> int:
    """Sum of values across the given UTXOs."""
    return sum(utxo.value for utxo in utxos)


def select_coins(available: Sequence[T], target: int) -> CoinSelection[T]:
    """
    Select UTXOs covering target, largest value first.

    Equal values keep their input order, so the same input always gives the
    same selection. Duplicate entries are not filtered out.

    Args:
        available: Spendable outputs (not modified)
        target: Amount to cover in sats

    Returns:
        CoinSelection with total >= target

    Raises:
        ValueError: If target is negative
        InsufficientFundsError: If all UTXOs together are below target
    """
    if target < 0:
        raise ValueError(f"Target amount must be non-negative, got {target}")

    # sorted() is stable, so ties keep input order
    ordered = sorted(available, key=lambda u: u.value, reverse=True)

    selected: list[T] = []
    total = 0

    for utxo in ordered:
        if total >= target:
            break
        selected.append(utxo)
        total += utxo.value

    if total < target:
        raise InsufficientFundsError(target=target, available=total)

    logger.debug(
        f"Selected {len(selected)}/{len(available)} UTXOs: "
        f"total={total}, target={target}, change={total - target}"
    )
    return CoinSelection(selected=selected, total=total)
