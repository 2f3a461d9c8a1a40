"""Exceptions raised by the exercises."""

from enum import Enum


class BasicsError(Exception):
    """Base class for all recoverable errors raised by this package."""


class DictionaryErrorKind(str, Enum):
    """Why a dictionary operation failed."""

    NOT_FOUND = "could not find the word you were looking for"
    ALREADY_EXISTS = "cannot add word because it already exists"
    DOES_NOT_EXIST = "cannot update word because it does not exist"


class DictionaryError(BasicsError):
    """A dictionary operation failed; ``kind`` says which way."""

    def __init__(self, kind: DictionaryErrorKind, word: str) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.word = word


class WordNotFoundError(DictionaryError):
    """The word is not in the dictionary."""

    def __init__(self, word: str) -> None:
        super().__init__(DictionaryErrorKind.NOT_FOUND, word)


class WordExistsError(DictionaryError):
    """The word is already defined."""

    def __init__(self, word: str) -> None:
        super().__init__(DictionaryErrorKind.ALREADY_EXISTS, word)


class WordDoesNotExistError(DictionaryError):
    """The word to update is not defined."""

    def __init__(self, word: str) -> None:
        super().__init__(DictionaryErrorKind.DOES_NOT_EXIST, word)


class InsufficientFundsError(BasicsError):
    """Withdrawal larger than the wallet balance."""

    def __init__(self) -> None:
        super().__init__("cannot withdraw, insufficient funds")
