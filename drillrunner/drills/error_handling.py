"""Drills on reporting and propagating errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, AnyStr

_DIGITS = "0123456789"

_EMPTY = "cannot parse integer from empty string"
_INVALID_DIGIT = "invalid digit found in string"
_POS_OVERFLOW = "number too large to fit in target type"
_NEG_OVERFLOW = "number too small to fit in target type"

PROCESSING_FEE = 1
COST_PER_ITEM = 5


class ParseIntError(ValueError):
    """Raised when text is not a valid integer of the expected width."""


class CreationError(ValueError):
    """Raised when a value cannot become a positive, nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError(_EMPTY)
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise ParseIntError(_INVALID_DIGIT)
    limit = (1 << (bits - 1)) - (0 if negative else 1)
    value = 0
    for char in digits:
        if char not in _DIGITS:
            raise ParseIntError(_INVALID_DIGIT)
        value = value * 10 + int(char)
        if value > limit:
            raise ParseIntError(_NEG_OVERFLOW if negative else _POS_OVERFLOW)
    return -value if negative else value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text for a name; empty names are refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer."""
    return _parse_signed(text, 32)


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in number of items, fee included."""
    quantity = parse_int(item_quantity)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable, report the outcome, and return tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


def read_and_validate(stream: IO[AnyStr]) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive, nonzero integer."""
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    number = _parse_signed(line.strip(), 64)
    return PositiveNonzeroInteger(number)


def pop_too_much() -> bool:
    """Pop more items than a list holds without failing."""
    items = [3]

    last = items.pop() if items else None
    if last is None:
        print("The list is empty")
    else:
        print(f"The last item in the list is {last!r}")

    second_to_last = items.pop() if items else None
    if second_to_last is None:
        print("There is no second-to-last item in the list")
    else:
        print(f"The second-to-last item in the list is {second_to_last!r}")
    return True