"""Command-line entry point: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .ui import emoji
from .verify import ExerciseFailed, verify

VERSION = "4.6.0"
INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
WATCH_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0
POLL_SECONDS = 1.0

_BANNER = (
    "",
    "       welcome to...",
    "   ___ __  _____ _ __ ___(_)___  ___ _ __",
    "  / _ \\\\ \\/ / _ \\ '__/ __| / __|/ _ \\ '__|",
    " |  __/ >  <  __/ | | (__| \\__ \\  __/ |",
    "  \\___/_/\\_\\___|_|  \\___|_|___/\\___|_|",
    "",
)

_FINISH_ART = (
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+--------------------------  ------------------------+",
    "                          \\/                         ",
    "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
    "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
    "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
    " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
    "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
    "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
    "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
    "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
    "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
    "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
    "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
    "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
    "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
    "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
    "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
)

_WATCH_HELP = "\n".join(
    (
        "Commands available to you in watch mode:",
        "  hint  - prints the current exercise's hint",
        "  clear - clears the screen",
        "  quit  - quits watch mode",
        "  help  - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    )
)


class WatchStatus(enum.Enum):
    FINISHED = "finished"
    UNFINISHED = "unfinished"


class ExerciseNotFound(Exception):
    """No exercise matches the requested name."""


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="exerciser",
        description="A collection of small exercises to get you used to writing and reading code",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="Reruns `verify` when files were edited")

    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")

    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")

    list_parser = commands.add_parser("list", help="Lists the exercises available")
    list_parser.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    list_parser.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    list_parser.add_argument(
        "-f", "--filter", default=None,
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    list_parser.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")
    return parser


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name; ``next`` means the first one not yet done."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter_text: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
    out: TextIO | None = None,
) -> None:
    """Write the exercise table (or names/paths) and a progress line to ``out``."""
    out = out if out is not None else sys.stdout
    if not paths and not names:
        out.write(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}\n")
    filters = [f for f in (filter_text or "").lower().split(",") if f.strip()]
    exercises_done = 0
    for exercise in exercises:
        fname = str(exercise.path)
        filter_cond = any(f in exercise.name or f in fname for f in filters)
        done = exercise.looks_done()
        if done:
            exercises_done += 1
        status = "Done" if done else "Pending"
        solve_cond = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if solve_cond and (filter_cond or filter_text is None):
            if paths:
                line = f"{fname}\n"
            elif names:
                line = f"{exercise.name}\n"
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n"
            out.write(line)
    total = len(exercises)
    percentage = exercises_done / total * 100.0 if total else float("nan")
    out.write(f"Progress: You completed {exercises_done} / {total} exercises ({percentage:.2f} %).\n")
    out.flush()


def watch_command(command: str, hint: str | None) -> str | None:
    """Answer one line typed in watch mode; None means there is nothing to print."""
    command = command.strip()
    if command == "hint":
        return hint
    if command == "clear":
        return "\x1b[2J\x1b[1;1H"
    if command == "quit":
        return "Bye!"
    if command == "help":
        return _WATCH_HELP
    return f"unknown command: {command}"


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue):
        super().__init__()
        self._events = events

    def on_created(self, event):
        if not event.is_directory:
            self._events.put(event.src_path)

    def on_modified(self, event):
        if not event.is_directory:
            self._events.put(event.src_path)


class _WatchShell:
    """Reads commands from stdin on a background thread."""

    def __init__(self, hint: str):
        self._lock = threading.Lock()
        self._hint: str | None = hint
        self.quit = threading.Event()

    def set_hint(self, hint: str) -> None:
        with self._lock:
            self._hint = hint

    def _loop(self) -> None:
        for line in sys.stdin:
            with self._lock:
                hint = self._hint
            response = watch_command(line, hint)
            if line.strip() == "quit":
                self.quit.set()
            if response is not None:
                print(response)

    def start(self) -> None:
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(target=self._loop, daemon=True).start()


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    events: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
        except ExerciseFailed as failed:
            shell = _WatchShell(failed.exercise.hint)
        else:
            return WatchStatus.FINISHED
        shell.start()

        pending: dict[str, float] = {}
        while True:
            try:
                pending[events.get(timeout=POLL_SECONDS)] = time.monotonic()
            except queue.Empty:
                pass
            now = time.monotonic()
            ready = [p for p, seen in pending.items() if now - seen >= DEBOUNCE_SECONDS]
            for changed in ready:
                del pending[changed]
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                remaining = itertools.chain(
                    itertools.dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
                    (e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)),
                )
                _clear_screen()
                try:
                    verify(remaining, verbose)
                except ExerciseFailed as failed:
                    shell.set_hint(failed.exercise.hint)
                else:
                    return WatchStatus.FINISHED
            if shell.quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """True if the compiler can be started and reports its version."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def _print_finished() -> None:
    star = emoji("🎉", "★")
    print(f"{star} All exercises completed! {star}")
    print()
    print("\n".join(_FINISH_ART))
    print()
    print("We hope you enjoyed working through the exercises!")
    print("If you noticed any issues, please don't hesitate to report them.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read our guidelines.")


def _run_list(args, exercises: Sequence[Exercise]) -> int:
    try:
        list_exercises(
            exercises,
            paths=args.paths,
            names=args.names,
            filter_text=args.filter,
            unsolved=args.unsolved,
            solved=args.solved,
            out=sys.stdout,
        )
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(None if argv is None else list(argv))
    except _UsageError as exc:
        print(exc)
        return 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print("\n".join(_BANNER))

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print(f"Try `cd` into the directory holding {INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For installation instructions, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    if args.command is None:
        print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
        return 0

    if args.command == "list":
        return _run_list(args, exercises)

    if args.command in ("run", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except ExerciseNotFound as exc:
            print(exc)
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise, verbose)
        except ExerciseFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, verbose)
        except ExerciseFailed:
            return 1
        return 0

    try:
        status = watch(exercises, verbose)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        _print_finished()
    else:
        print("We hope you're enjoying the exercises!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `exerciser watch` again"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())