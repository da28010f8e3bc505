"""First lessons: functions, conditionals and simple arithmetic."""

from __future__ import annotations


def calculate_apple_price(qty: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return qty if qty > 40 else qty * 2


def times_two(num: int) -> int:
    return num * 2


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def call_me(num: int) -> None:
    """Print one ring per call, numbered from 1."""
    for i in range(1, num + 1):
        print(f"Ring! Call number {i}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num