"""In-memory word to definition store."""

import logging
from collections.abc import Iterator, Mapping

from basics.errors import WordDoesNotExistError, WordExistsError, WordNotFoundError

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Mapping from word to definition with explicit failure signaling.

    Not thread-safe. Callers sharing an instance must guard it themselves.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries) if entries else {}

    def search(self, word: str) -> str:
        """
        Look up a word.

        Returns:
            The definition of the word

        Raises:
            WordNotFoundError: If the word is not in the dictionary
        """
        try:
            return self._entries[word]
        except KeyError:
            raise WordNotFoundError(word) from None

    def add(self, word: str, definition: str) -> None:
        """
        Insert a new word.

        Raises:
            WordExistsError: If the word is already defined; the old definition is kept
        """
        try:
            self.search(word)
        except WordNotFoundError:
            self._entries[word] = definition
            logger.debug(f"Added '{word}'")
            return

        raise WordExistsError(word)

    def update(self, word: str, definition: str) -> None:
        """
        Replace the definition of an existing word.

        Raises:
            WordDoesNotExistError: If the word is not in the dictionary
        """
        try:
            self.search(word)
        except WordNotFoundError:
            raise WordDoesNotExistError(word) from None

        self._entries[word] = definition
        logger.debug(f"Updated '{word}'")

    def delete(self, word: str) -> None:
        """Remove a word. Removing an unknown word does nothing."""
        if self._entries.pop(word, None) is not None:
            logger.debug(f"Deleted '{word}'")

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the entries."""
        return dict(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary({self._entries!r})"
