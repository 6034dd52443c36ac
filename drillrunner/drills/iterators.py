"""Drills on iterators: mapping, collecting results and folding."""

from __future__ import annotations

import math
from collections.abc import Iterable

U64_MAX = (1 << 64) - 1


class DivisionError(ArithmeticError):
    """Raised when one integer cannot be divided evenly by another."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivisionError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __str__(self) -> str:
        return "division by zero"


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text, leaving the rest alone."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize each word, keeping them as separate strings."""
    return [capitalize_first(word) for word in words]


def capitalize_into_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


def divide(a: int, b: int) -> int:
    """Divide a by b, which must divide it evenly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number, failing on the first that does not divide evenly."""
    return [divide(n, divisor) for n in numbers]


def division_results(
    numbers: Iterable[int], divisor: int
) -> list[int | DivisionError]:
    """Divide every number, keeping each quotient or the error it raised."""
    results: list[int | DivisionError] = []
    for n in numbers:
        try:
            results.append(divide(n, divisor))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """Factorial of an unsigned 64-bit number; the result must fit in 64 bits."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result