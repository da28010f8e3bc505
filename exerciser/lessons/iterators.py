"""Lessons on iterators: mapping, collecting results, folding and counting."""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Iterable, Mapping, Sequence

_I32_MIN = -(1 << 31)
_U64_MAX = (1 << 64) - 1

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text``: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that did not produce a whole quotient."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("attempt to divide by zero")


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a == _I32_MIN and b == -1:
        raise OverflowError("attempt to calculate the remainder with overflow")
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def result_with_list() -> list[int]:
    """Divide every sample number by 27; the first failure is raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide every sample number by 27, keeping each quotient or error."""
    return [_attempt(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Product of 1..=num; ``num`` must be at least 1 and the result fit in 64 bits."""
    if num < 1:
        raise ValueError("factorial needs a number of at least 1")
    result = functools.reduce(operator.mul, range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count exercises in one map with the given progress, with a loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count exercises in one map with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps, with nested loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)