"""Lessons on containers: cons lists, shared data across threads, maps, lists and generics."""

from __future__ import annotations

import enum
from collections.abc import Iterator, MutableMapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; ``rest`` of None marks the end (Nil)."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """The list 42 -> 21."""
    return Cons(42, Cons(21))


def offset_sums(numbers: Sequence[int] = tuple(range(100)), workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number, one thread per starting offset.

    The sequence is shared between the threads, not copied.
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")

    def sum_from(offset: int) -> int:
        return sum(numbers[offset::workers])

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five fruits in total."""
    return {"banana": 2, "cactus": 1, "apple": 2}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add 11 of every kind of fruit that is not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 11)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Sequence[int]) -> list[int]:
    """Every value multiplied by two."""
    return [value * 2 for value in values]


def shopping_list() -> list[str]:
    """A list of items to buy."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass
class ReportCard(Generic[T]):
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"