import io
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from exerciser.cli import (
    ExerciseNotFound,
    find_exercise,
    list_exercises,
    main,
    rustc_exists,
    watch_command,
)
from exerciser.exercise import Exercise, Mode

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"

RUSTC_OK = mock.patch(
    "exerciser.cli.subprocess.run",
    return_value=subprocess.CompletedProcess(["rustc", "--version"], 0),
)


def _write_info(directory: Path, entries):
    blocks = []
    for name, path, mode, hint in entries:
        blocks.append(
            f'[[exercises]]\nname = "{name}"\npath = "{path}"\nmode = "{mode}"\nhint = "{hint}"\n'
        )
    (directory / "info.toml").write_text("\n".join(blocks), encoding="utf-8")


@pytest.fixture
def state_dir(tmp_path, monkeypatch):
    (tmp_path / "pending_exercise.rs").write_text(PENDING, encoding="utf-8")
    (tmp_path / "finished_exercise.rs").write_text(FINISHED, encoding="utf-8")
    _write_info(
        tmp_path,
        [
            ("pending_exercise", "pending_exercise.rs", "compile", ""),
            ("finished_exercise", "finished_exercise.rs", "compile", ""),
        ],
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def success_dir(tmp_path, monkeypatch):
    (tmp_path / "compSuccess.rs").write_text("fn main() {\n}\n", encoding="utf-8")
    (tmp_path / "testSuccess.rs").write_text(
        '#[test]\nfn passing() {\n    println!("THIS TEST TOO SHALL PASS");\n}\n',
        encoding="utf-8",
    )
    _write_info(
        tmp_path,
        [
            ("compSuccess", "compSuccess.rs", "compile", ""),
            ("testSuccess", "testSuccess.rs", "test", ""),
        ],
    )
    (tmp_path / "default_out.txt").write_text("Thanks for installing!", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def failure_dir(tmp_path, monkeypatch):
    (tmp_path / "testFailure.rs").write_text("#[test]\nfn passing() {}\n", encoding="utf-8")
    _write_info(tmp_path, [("testFailure", "testFailure.rs", "test", "Hello!")])
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "v4.6.0\n"


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["list"]) == 1


def test_runs_without_arguments(success_dir, capsys):
    with RUSTC_OK:
        assert main([]) == 0
    assert "Thanks for installing!" in capsys.readouterr().out


def test_fails_without_compiler(success_dir):
    with mock.patch("exerciser.cli.subprocess.run", side_effect=FileNotFoundError):
        assert main(["list"]) == 1


def test_get_hint_for_single_test(failure_dir, capsys):
    with RUSTC_OK:
        assert main(["hint", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_single_test_no_filename(failure_dir):
    assert main(["run"]) == 1


def test_run_single_test_no_exercise(failure_dir, capsys):
    with RUSTC_OK:
        assert main(["run", "compNoExercise.rs"]) == 1
    assert "No exercise found for 'compNoExercise.rs'!" in capsys.readouterr().out


def test_run_rustlings_list(success_dir, capsys):
    with RUSTC_OK:
        assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "compSuccess" in out
    assert "Pending" not in out


def test_list_both_done_and_pending(state_dir, capsys):
    with RUSTC_OK:
        assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out
    assert "Pending" in out


def test_list_without_pending(state_dir, capsys):
    with RUSTC_OK:
        assert main(["list", "--solved"]) == 0
    out = capsys.readouterr().out
    assert "Pending" not in out
    assert "finished_exercise" in out


def test_list_without_done(state_dir, capsys):
    with RUSTC_OK:
        assert main(["list", "--unsolved"]) == 0
    out = capsys.readouterr().out
    assert "Done" not in out
    assert "pending_exercise" in out


def test_list_exercises_names_with_filter(state_dir):
    exercises = [
        Exercise("pending_exercise", Path("pending_exercise.rs"), Mode.COMPILE),
        Exercise("finished_exercise", Path("finished_exercise.rs"), Mode.COMPILE),
    ]
    out = io.StringIO()
    list_exercises(exercises, names=True, filter_text="FINISH", out=out)
    assert out.getvalue().splitlines() == [
        "finished_exercise",
        "Progress: You completed 1 / 2 exercises (50.00 %).",
    ]


def test_list_exercises_paths(state_dir):
    exercises = [Exercise("pending_exercise", Path("pending_exercise.rs"), Mode.COMPILE)]
    out = io.StringIO()
    list_exercises(exercises, paths=True, out=out)
    assert out.getvalue().splitlines() == [
        "pending_exercise.rs",
        "Progress: You completed 0 / 1 exercises (0.00 %).",
    ]


def test_list_exercises_table_header(state_dir):
    out = io.StringIO()
    list_exercises([], out=out)
    assert out.getvalue().splitlines()[0] == f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"


def test_find_exercise_by_name(state_dir):
    exercises = [
        Exercise("pending_exercise", Path("pending_exercise.rs"), Mode.COMPILE),
        Exercise("finished_exercise", Path("finished_exercise.rs"), Mode.COMPILE),
    ]
    assert find_exercise("finished_exercise", exercises) is exercises[1]


def test_find_next_exercise(state_dir):
    exercises = [
        Exercise("finished_exercise", Path("finished_exercise.rs"), Mode.COMPILE),
        Exercise("pending_exercise", Path("pending_exercise.rs"), Mode.COMPILE),
    ]
    assert find_exercise("next", exercises).name == "pending_exercise"


def test_find_next_when_all_done(state_dir):
    exercises = [Exercise("finished_exercise", Path("finished_exercise.rs"), Mode.COMPILE)]
    with pytest.raises(ExerciseNotFound, match="no more exercises"):
        find_exercise("next", exercises)


def test_find_missing_exercise():
    with pytest.raises(ExerciseNotFound, match="No exercise found for 'nope'!"):
        find_exercise("nope", [])


@pytest.mark.parametrize(
    "command, hint, expected",
    [
        ("hint\n", "Try harder", "Try harder"),
        ("hint", None, None),
        ("quit\n", None, "Bye!"),
        ("clear", None, "\x1b[2J\x1b[1;1H"),
        ("  dance  ", None, "unknown command: dance"),
    ],
)
def test_watch_command(command, hint, expected):
    assert watch_command(command, hint) == expected


def test_watch_command_help():
    assert watch_command("help", None).startswith("Commands available to you in watch mode:")


def test_rustc_exists_success():
    with RUSTC_OK:
        assert rustc_exists() is True


def test_rustc_exists_failing_status():
    failed = subprocess.CompletedProcess(["rustc", "--version"], 1)
    with mock.patch("exerciser.cli.subprocess.run", return_value=failed):
        assert rustc_exists() is False


def test_rustc_exists_missing():
    with mock.patch("exerciser.cli.subprocess.run", side_effect=FileNotFoundError):
        assert rustc_exists() is False