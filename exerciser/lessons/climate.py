"""A climate record parser with a descriptive error type."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .errors import ParseIntError, parse_integer

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


class ParseClimateError(ValueError):
    """A climate record could not be parsed; ``source`` holds any inner error."""

    class Kind(enum.Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_CITY = "no city name"
        PARSE_INT = "error parsing year"
        PARSE_FLOAT = "error parsing temperature"

    def __init__(self, kind: ParseClimateError.Kind, source: Exception | None = None):
        message = kind.value if source is None else f"{kind.value}: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source


@dataclass(frozen=True)
class Climate:
    city: str
    year: int
    temp: float


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def parse_climate(s: str) -> Climate:
    """Parse ``city,year,temp`` into a Climate record."""
    if not s:
        raise ParseClimateError(ParseClimateError.Kind.EMPTY)
    fields = s.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
    try:
        year = parse_integer(year_text, bits=32, signed=False)
    except ParseIntError as exc:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, exc) from exc
    try:
        temp = _parse_float(temp_text)
    except ValueError as exc:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, exc) from exc
    return Climate(city=city, year=year, temp=temp)