"""Drills on record types: named fields, positional fields and unit types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A color with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A color addressed by position."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )