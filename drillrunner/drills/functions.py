"""Drills on functions, conditionals and strings."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def call_me(num: int) -> None:
    """Ring the given number of times."""
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colors."""
    return attempt in COLOR_WORDS