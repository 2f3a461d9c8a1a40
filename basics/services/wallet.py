"""Wallet holding a Bitcoin balance."""

import logging

from basics.errors import InsufficientFundsError

logger = logging.getLogger(__name__)


class Bitcoin(int):
    """Integer amount of Bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class Wallet:
    """Mutable Bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    @property
    def balance(self) -> Bitcoin:
        return self._balance

    def deposit(self, amount: int) -> None:
        self._balance = Bitcoin(self._balance + amount)
        logger.debug(f"Deposited {Bitcoin(amount)}, balance is {self._balance}")

    def withdraw(self, amount: int) -> None:
        """
        Take ``amount`` out of the wallet.

        Raises:
            InsufficientFundsError: If amount exceeds the balance; balance is unchanged
        """
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)
        logger.debug(f"Withdrew {Bitcoin(amount)}, balance is {self._balance}")
