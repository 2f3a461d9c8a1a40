"""Summation command."""

import typer

from basics.cli.utils.console import console
from basics.services.summation import sum_numbers


def total(numbers: list[int] = typer.Argument(..., help="Integers to add up")) -> None:
    """Print the sum of the given integers."""
    console.print(f"[success]{sum_numbers(numbers)}[/]")
