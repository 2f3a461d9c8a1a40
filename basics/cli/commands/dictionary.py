"""Dictionary commands.

The CLI keeps no state between runs, so every command starts from the
entries given with ``--entry word=definition``.
"""

from typing import NoReturn

import typer
from rich.markup import escape
from rich.table import Table

from basics.cli.utils.console import console, error_console
from basics.errors import DictionaryError
from basics.services.dictionary import Dictionary

app = typer.Typer(
    name="dict",
    help="Dictionary commands",
    no_args_is_help=True,
)

EntryOption = typer.Option(None, "--entry", "-e", help="Seed entry as word=definition")


def parse_entries(entries: list[str]) -> dict[str, str]:
    """Parse ``word=definition`` strings. Later duplicates win."""
    parsed: dict[str, str] = {}
    for entry in entries:
        word, sep, definition = entry.partition("=")
        if not sep:
            error_console.print(
                f"[error]Invalid entry '{escape(entry)}', expected word=definition[/]"
            )
            raise typer.Exit(1)
        parsed[word] = definition
    return parsed


def _build(entries: list[str] | None) -> Dictionary:
    return Dictionary(parse_entries(entries or []))


def _fail(e: DictionaryError) -> NoReturn:
    error_console.print(f"[error]{e}[/]: [word]{escape(e.word)}[/]")
    raise typer.Exit(1) from None


def show_entries(dictionary: Dictionary) -> None:
    """Print the dictionary as a table."""
    if not len(dictionary):
        console.print("[dim]Dictionary is empty[/]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Word", style="word")
    table.add_column("Definition")
    for word, definition in sorted(dictionary.as_dict().items()):
        table.add_row(escape(word), escape(definition))
    console.print(table)


@app.command(name="search")
def search(
    word: str = typer.Argument(..., help="Word to look up"),
    entry: list[str] | None = EntryOption,
) -> None:
    """Look up a word."""
    dictionary = _build(entry)
    try:
        definition = dictionary.search(word)
    except DictionaryError as e:
        _fail(e)
    console.print(definition, markup=False, highlight=False)


@app.command(name="add")
def add(
    word: str = typer.Argument(..., help="Word to add"),
    definition: str = typer.Argument(..., help="Its definition"),
    entry: list[str] | None = EntryOption,
) -> None:
    """Add a new word."""
    dictionary = _build(entry)
    try:
        dictionary.add(word, definition)
    except DictionaryError as e:
        _fail(e)
    show_entries(dictionary)


@app.command(name="update")
def update(
    word: str = typer.Argument(..., help="Word to update"),
    definition: str = typer.Argument(..., help="Its new definition"),
    entry: list[str] | None = EntryOption,
) -> None:
    """Replace the definition of an existing word."""
    dictionary = _build(entry)
    try:
        dictionary.update(word, definition)
    except DictionaryError as e:
        _fail(e)
    show_entries(dictionary)


@app.command(name="delete")
def delete(
    word: str = typer.Argument(..., help="Word to remove"),
    entry: list[str] | None = EntryOption,
) -> None:
    """Remove a word. Unknown words are ignored."""
    dictionary = _build(entry)
    dictionary.delete(word)
    show_entries(dictionary)
