"""Lessons on structs, options, strings and primitive types."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple, TypeVar

T = TypeVar("T")

_U16_MAX = (1 << 16) - 1


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position: name first, hex second."""

    name: str
    hex: str


class UnitStruct:
    """A type that carries no data."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
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


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries; it must weigh something."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Weightless package!")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


def optional_numbers() -> list[int]:
    """Five numbers derived from their position, each within 16 bits."""
    numbers = [((index * 1235) + 2) // (4 * 16) for index in range(5)]
    if any(not 0 <= n <= _U16_MAX for n in numbers):
        raise OverflowError("number does not fit in 16 bits")
    return numbers


def drain_optionals(values: Sequence[T | None]) -> list[T]:
    """Take values off the end until a missing one or the start is reached."""
    remaining = list(values)
    drained: list[T] = []
    while remaining:
        value = remaining.pop()
        if value is None:
            break
        drained.append(value)
    return drained


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def classify_character(character: str) -> str:
    """Describe a single character as alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError("expected exactly one character")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def nice_slice(values: Sequence[T]) -> Sequence[T]:
    """The second through fourth elements."""
    if len(values) < 4:
        raise IndexError("slice end 4 is out of range")
    return values[1:4]


def normalize_strings(values: Iterable[object]) -> list[str]:
    """Turn each value into an owned text string; bytes are read as UTF-8."""
    result = []
    for value in values:
        if isinstance(value, (bytes, bytearray, memoryview)):
            result.append(bytes(value).decode("utf-8"))
        else:
            result.append(str(value))
    return result