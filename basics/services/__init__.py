"""Services implementing the exercises."""

from basics.services.dictionary import Dictionary
from basics.services.greeting import greeting_prefix, hello
from basics.services.summation import sum_numbers
from basics.services.wallet import Bitcoin, Wallet

__all__ = ["Dictionary", "hello", "greeting_prefix", "sum_numbers", "Bitcoin", "Wallet"]
