"""Greeting in a handful of languages."""

from basics.config import settings

SPANISH = "Spanish"
FRENCH = "French"

ENGLISH_HELLO_PREFIX = "Hello, "
SPANISH_HELLO_PREFIX = "Hola, "
FRENCH_HELLO_PREFIX = "Bonjour, "

_PREFIXES = {
    SPANISH: SPANISH_HELLO_PREFIX,
    FRENCH: FRENCH_HELLO_PREFIX,
}


def greeting_prefix(language: str) -> str:
    """Return the greeting prefix for a language, English if unknown."""
    return _PREFIXES.get(language, ENGLISH_HELLO_PREFIX)


def hello(name: str = "", language: str = "") -> str:
    """Greet ``name`` in ``language``. An empty name greets the default name."""
    if not name:
        name = settings.default_name
    return greeting_prefix(language) + name
