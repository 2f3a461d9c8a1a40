"""Greeting command."""

import typer

from basics.cli.utils.console import console
from basics.services.greeting import hello


def greet(
    name: str = typer.Argument("", help="Who to greet"),
    language: str = typer.Option("", "--language", "-l", help="Spanish, French or English"),
) -> None:
    """Print a greeting."""
    console.print(hello(name, language), markup=False, highlight=False)
