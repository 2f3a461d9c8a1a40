"""Main CLI application entry point."""

import typer

from basics.cli.commands import dictionary, greeting, summation, wallet
from basics.logging_config import setup_logging

app = typer.Typer(
    name="basics",
    help="Introductory programming exercises",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Initialize application on startup."""
    setup_logging()


app.command(name="hello", help="Print a greeting")(greeting.greet)

app.command(name="sum", help="Add up integers")(summation.total)

app.command(name="wallet", help="Deposit into and withdraw from a wallet")(wallet.wallet_run)

# Register dictionary subcommands
app.add_typer(dictionary.app, name="dict")


if __name__ == "__main__":
    app()
