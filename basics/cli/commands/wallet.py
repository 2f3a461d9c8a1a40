"""Wallet command."""

import typer

from basics.cli.utils.console import console, error_console
from basics.errors import InsufficientFundsError
from basics.services.wallet import Wallet


def wallet_run(
    balance: int = typer.Option(0, "--balance", "-b", help="Starting balance"),
    deposit: list[int] | None = typer.Option(None, "--deposit", "-d", help="Amount to deposit"),
    withdraw: list[int] | None = typer.Option(None, "--withdraw", "-w", help="Amount to withdraw"),
) -> None:
    """Apply deposits, then withdrawals, and print the final balance."""
    wallet = Wallet(balance)

    for amount in deposit or []:
        wallet.deposit(amount)

    for amount in withdraw or []:
        try:
            wallet.withdraw(amount)
        except InsufficientFundsError as e:
            error_console.print(f"[error]{e}[/] [dim](balance {wallet.balance})[/]")
            raise typer.Exit(1) from None

    console.print(f"Balance: [amount]{wallet.balance}[/]")
