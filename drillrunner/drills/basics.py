"""Drills on variables, primitive types, ownership, modules and macros."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Number
from typing import Any

BIG_ARRAY_LENGTH = 100

_FRUIT = "Pear"
_VEGGIE = "Cucumber"


def describe_value(x: Any) -> str:
    """Describe the value a variable was bound to."""
    return f"x has the value {x}"


def ten_check(x: Number) -> str:
    """Say whether a number is ten; non-numbers are rejected."""
    if not isinstance(x, Number):
        raise TypeError(f"expected a number, got {type(x).__name__}")
    if x == 10:
        return "Ten!"
    return "Not ten!"


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Greetings that fit the time of day, in order."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_character(c: str) -> str:
    """Classify a single character as alphabetic, numeric or neither."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c.isalpha():
        return "Alphabetical!"
    if c.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_verdict(a: Sequence[Any]) -> str:
    """Judge whether a sequence holds at least a hundred items."""
    if len(a) >= BIG_ARRAY_LENGTH:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(a: Sequence[Any]) -> Sequence[Any]:
    """The second through fourth items of a sequence."""
    return a[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a cat given as a (name, age) pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: Sequence[Any]) -> Any:
    """The second item of a tuple or sequence."""
    return numbers[1]


def fill_vec(vec: Sequence[int] = ()) -> list[int]:
    """Return a new list holding the given items followed by 22, 44 and 66."""
    return [*vec, 22, 44, 66]


def make_sausage() -> str:
    """Make a sausage."""
    return "sausage!"


def favorite_snacks() -> str:
    """Announce the favorite fruit and vegetable."""
    return f"favorite snacks: {_FRUIT} and {_VEGGIE}"


def my_macro(*args: Any) -> str:
    """Message for a call with no arguments or with a single value."""
    match args:
        case ():
            return "Check out my macro!"
        case (value,):
            return f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")