"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """A binary path unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the compiled binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    stdout: str
    stderr: str


class CompileError(Exception):
    """The exercise did not compile (or lint cleanly)."""

    def __init__(self, output: ExerciseOutput):
        super().__init__("compilation failed")
        self.output = output


class RunError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput):
        super().__init__("run failed")
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise RuntimeError(message) from exc
        # Build a binary too so clippy exercises can be run afterwards.
        _execute(["rustc", str(self.path), "-o", binary, *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS, "--", "-D", "warnings",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError with the compiler output on failure."""
        binary = temp_file()
        path = str(self.path)
        if self.mode is Mode.COMPILE:
            result = _execute(["rustc", path, "-o", binary, *RUSTC_COLOR_ARGS])
        elif self.mode is Mode.TEST:
            result = _execute(["rustc", "--test", path, "-o", binary, *RUSTC_COLOR_ARGS])
        else:
            result = self._clippy(binary)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(_output(result))

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = _execute([temp_file(), arg])
        output = _output(result)
        if result.returncode != 0:
            raise RunError(output)
        return output

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("pending marker spans several lines")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """True once the pending marker has been removed from the file."""
        return self.state().done()


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def load_exercises(path) -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(name=entry["name"], path=Path(entry["path"]), mode=Mode(entry["mode"]), hint=entry["hint"])
        for entry in data["exercises"]
    ]