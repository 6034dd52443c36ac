"""Review quizzes covering the earlier drills."""

from __future__ import annotations

__all__ = [
    "calculate_price",
    "times_two",
    "is_even",
    "string_slice",
    "string",
    "hello_macro",
]

BULK_THRESHOLD = 40
REGULAR_PRICE = 2
BULK_PRICE = 1


def calculate_price(quantity: int) -> int:
    """Price of an apple order: cheaper per apple above forty."""
    unit = BULK_PRICE if quantity > BULK_THRESHOLD else REGULAR_PRICE
    return quantity * unit


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def is_even(num: int) -> bool:
    """Whether a number is divisible by two."""
    return num % 2 == 0


def _print_text(arg: str) -> None:
    if not isinstance(arg, str):
        raise TypeError(f"expected text, got {type(arg).__name__}")
    print(arg)


def string_slice(arg: str) -> None:
    """Print a piece of text."""
    _print_text(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    _print_text(arg)


def hello_macro(value: str) -> str:
    """Greet the given value."""
    return f"Hello {value}"