"""Lessons on enums and traits: messages that drive a state, and appending "Bar"."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    pass


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """Colour, position and quit flag, updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case ChangeColor(color=color):
                self.color = color
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@functools.singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]