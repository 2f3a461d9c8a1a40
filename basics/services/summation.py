"""Integer summation."""

from collections.abc import Iterable


def sum_numbers(numbers: Iterable[int]) -> int:
    total = 0
    for number in numbers:
        total += number
    return total
