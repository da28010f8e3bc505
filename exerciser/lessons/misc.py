"""Assorted lessons: threads, modules, ownership, variables, lints and macros."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

_FRUIT = "Pear"
_VEGGIE = "Cucumber"


@dataclass
class JobStatus:
    """A counter of finished jobs that several threads may update."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Complete ``count`` jobs on a worker thread while the caller waits.

    The waiting side prints a line and sleeps twice as long as a job takes.
    """
    status = JobStatus()

    def work() -> None:
        for _ in range(count):
            time.sleep(delay)
            status.complete_one()

    worker = threading.Thread(target=work)
    worker.start()
    while status.jobs_completed < count:
        print("waiting... ")
        time.sleep(delay * 2)
    worker.join()
    return status


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> None:
    _get_secret_recipe()
    print("sausage!")


def favorite_snacks() -> str:
    return f"favorite snacks: {_FRUIT} and {_VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """A new list holding ``values`` followed by 22, 44 and 66."""
    filled = list(values) if values is not None else []
    filled.extend((22, 44, 66))
    return filled


def accumulate_borrows(start: int) -> int:
    """Add 100 then 1000 to ``start`` through two successive updates."""
    x = start
    x += 100
    x += 1000
    return x


def circle_area(radius: float) -> float:
    return math.pi * radius**2


def add_optional(total: int, option: int | None) -> int:
    """Add ``option`` to ``total`` when it is present."""
    if option is not None:
        total += option
    return total


def macro_message(*args: object) -> str:
    """The message for no argument, or the other message for one argument."""
    if not args:
        return "Check out my macro!"
    if len(args) == 1:
        return f"Look at this other macro: {args[0]}"
    raise TypeError("macro_message takes at most one argument")


def my_macro(val: str) -> str:
    return f"Hello {val}"