"""Run a single exercise without prompting."""

from __future__ import annotations

from .exercise import CompileError, Exercise, Mode, RunError
from .ui import Spinner, success, warn
from .verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) one exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except CompileError as exc:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(exc.output.stderr)
            raise ExerciseFailed(exercise) from exc

        with compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except RunError as exc:
                spinner.finish_and_clear()
                print(exc.output.stdout)
                print(exc.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise ExerciseFailed(exercise) from exc
            spinner.finish_and_clear()
            print(output.stdout)
            success(f"Successfully ran {exercise}")