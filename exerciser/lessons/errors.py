"""Lessons on error handling: raising, propagating and wrapping errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class ParseIntError(ValueError):
    """A string could not be read as an integer of the requested width."""

    class Kind(enum.Enum):
        EMPTY = "cannot parse integer from empty string"
        INVALID_DIGIT = "invalid digit found in string"
        POS_OVERFLOW = "number too large to fit in target type"
        NEG_OVERFLOW = "number too small to fit in target type"

    def __init__(self, kind: ParseIntError.Kind):
        super().__init__(kind.value)
        self.kind = kind


def parse_integer(text: str, bits: int = 32, signed: bool = True) -> int:
    """Read a decimal integer that must fit in ``bits`` bits.

    Only an optional sign followed by ASCII digits is accepted; no whitespace
    or underscores. Unsigned targets reject a leading minus sign.
    """
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not text:
        raise ParseIntError(ParseIntError.Kind.EMPTY)
    first = text[0]
    if first in ("+", "-") and len(text) == 1:
        raise ParseIntError(ParseIntError.Kind.INVALID_DIGIT)
    negative = first == "-" and signed
    digits = text[1:] if first == "+" or negative else text
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ParseIntError(ParseIntError.Kind.INVALID_DIGIT)
        digit = ord(ch) - ord("0")
        value = value * 10 - digit if negative else value * 10 + digit
        if value > high:
            raise ParseIntError(ParseIntError.Kind.POS_OVERFLOW)
        if value < low:
            raise ParseIntError(ParseIntError.Kind.NEG_OVERFLOW)
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for a typed-in quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = parse_integer(item_quantity, bits=32, signed=True)
    cost = qty * cost_per_item + processing_fee
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("attempt to compute total cost with overflow")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed-in quantity if affordable; return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot be made into a positive nonzero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed; ``cause`` is the ParseIntError or CreationError behind it."""

    def __init__(self, cause: ParseIntError | CreationError):
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a string into a positive nonzero integer."""
    try:
        value = parse_integer(s, bits=64, signed=True)
    except ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc