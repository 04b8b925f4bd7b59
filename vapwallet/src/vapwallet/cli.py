"""
VAP Wallet CLI - Select coins, attempt payments, and generate prompt canaries.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError

from vapcore.canary import generate_canary, protect_system_prompt
from vapcore.constants import SATS_PER_COIN
from vapcore.models import NetworkType, Utxo, parse_utxo_list
from vapwallet.config import get_settings
from vapwallet.wallet.coin_selection import select_coins
from vapwallet.wallet.models import InsufficientFundsError
from vapwallet.wallet.payment import PaymentNotImplementedError, PaymentParams, build_payment

app = typer.Typer(
    name="vap-wallet",
    help="VAP agent wallet helpers",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def format_amount(sats: int) -> str:
    return f"{sats:,} sats ({sats / SATS_PER_COIN:.8f} VRSC)"


def load_utxos(path: Path) -> list[Utxo]:
    """Load a JSON array of UTXO objects, or an object with a "utxos" key."""
    if not path.exists():
        logger.error(f"UTXO file not found: {path}")
        raise typer.Exit(1)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"Invalid UTXO file {path}: {e}")
        raise typer.Exit(1)

    if isinstance(data, dict):
        data = data.get("utxos", [])
    if not isinstance(data, list):
        logger.error(f"Invalid UTXO file {path}: expected a list of UTXOs")
        raise typer.Exit(1)

    try:
        return parse_utxo_list(data)
    except ValidationError as e:
        logger.error(f"Invalid UTXO file {path}: {e}")
        raise typer.Exit(1)


@app.command()
def select(
    utxos_file: Path = typer.Option(..., "--utxos", "-u", help="JSON file with UTXOs"),
    target: int = typer.Option(..., "--target", "-t", min=0, help="Amount to cover in sats"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Select UTXOs covering a target amount (largest first)."""
    setup_logging(log_level or get_settings().log_level)

    utxos = load_utxos(utxos_file)

    try:
        selection = select_coins(utxos, target)
    except InsufficientFundsError as e:
        logger.error(str(e))
        typer.echo(f"Shortfall: {format_amount(e.shortfall)}")
        raise typer.Exit(1)

    typer.echo(f"Selected {len(selection.selected)} of {len(utxos)} UTXOs")
    for utxo in selection.selected:
        typer.echo(f"  {utxo.outpoint}  {utxo.value}")
    typer.echo(f"Total:  {format_amount(selection.total)}")
    typer.echo(f"Change: {format_amount(selection.change(target))}")


@app.command()
def pay(
    utxos_file: Path = typer.Option(..., "--utxos", "-u", help="JSON file with UTXOs"),
    to_address: str = typer.Option(..., "--to", help="Recipient address"),
    amount: int = typer.Option(..., "--amount", "-a", help="Amount in sats"),
    fee: int | None = typer.Option(None, "--fee", help="Flat fee in sats"),
    wif: str | None = typer.Option(None, "--wif", envvar="VAP_WIF", help="Private key (WIF)"),
    change_address: str | None = typer.Option(None, "--change-address"),
    network: NetworkType | None = typer.Option(None, "--network", "-n"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Build a payment transaction."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    if not wif:
        logger.error("Private key required. Use --wif or VAP_WIF env var")
        raise typer.Exit(1)

    try:
        params = PaymentParams(
            wif=wif,
            to_address=to_address,
            amount=amount,
            utxos=load_utxos(utxos_file),
            fee=settings.default_fee if fee is None else fee,
            change_address=change_address,
            network=network or settings.network,
        )
    except ValidationError as e:
        logger.error(f"Invalid payment parameters: {e}")
        raise typer.Exit(1)

    try:
        tx_hex = build_payment(params)
    except InsufficientFundsError as e:
        logger.error(str(e))
        typer.echo(f"Shortfall: {format_amount(e.shortfall)}")
        raise typer.Exit(1)
    except PaymentNotImplementedError as e:
        logger.error(str(e))
        raise typer.Exit(2)

    typer.echo(tx_hex)


@app.command()
def canary(
    prompt_file: Path | None = typer.Option(
        None, "--prompt-file", "-p", help="System prompt to protect"
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Generate a canary token for a system prompt."""
    setup_logging(log_level or get_settings().log_level)

    if prompt_file is None:
        config = generate_canary()
        typer.echo(config.registration.model_dump_json())
        return

    if not prompt_file.exists():
        logger.error(f"Prompt file not found: {prompt_file}")
        raise typer.Exit(1)

    try:
        system_prompt = prompt_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read prompt file {prompt_file}: {e}")
        raise typer.Exit(1)

    protected = protect_system_prompt(system_prompt)
    typer.echo(protected.canary.registration.model_dump_json())
    typer.echo(protected.prompt)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
