# exerciser

A command-line companion for working through a directory of small Rust
exercises. It compiles each exercise with `rustc`, runs the program or its
tests, shows what went wrong, and keeps track of which exercises you have
finished.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` (and `cargo` with Clippy for the lint exercises)

## Installing

```
pip install .
```

For development, with the test dependencies:

```
pip install ".[test]"
pytest
```

## The exercise directory

`exerciser` is run from a directory that holds an `info.toml` file and an
`exercises/` directory. `info.toml` lists the exercises in the recommended
order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` is one of:

- `compile` – the file is compiled with `rustc` and the resulting program is run;
- `test` – the file is compiled with `rustc --test` and its tests are run;
- `clippy` – a `Cargo.toml` is written to `exercises/clippy/`, the file is
  compiled, and `cargo clippy` must pass with warnings denied.

An exercise counts as pending while its source still contains a line such as
`// I AM NOT DONE`. Remove that line once you are happy with your solution and
the exercise is considered done.

Compiled programs are written to a temporary file named `temp_<pid>_...` in
the current directory and removed afterwards.

## Usage

Running without a subcommand prints a welcome banner and the contents of
`default_out.txt`:

```
exerciser
```

Work through every exercise in order, stopping at the first one that fails
or is still marked as not done:

```
exerciser verify
```

Keep going automatically: `watch` verifies once, then re-verifies whenever a
`.rs` file under `exercises/` is created or changed (changes are settled for
two seconds first). While it runs you can type `hint`, `clear`, `quit` or
`help`.

```
exerciser watch
```

Compile and run (or test) a single exercise. Use `next` as the name for the
first exercise that is not done yet:

```
exerciser run variables1
exerciser run next
```

Show the hint for an exercise:

```
exerciser hint variables1
```

List the exercises with their status and overall progress:

```
exerciser list
exerciser list --solved
exerciser list --unsolved
exerciser list --names
exerciser list --paths
exerciser list --filter vec,hashmap
```

Filters are comma separated and matched, lower-cased, against each exercise's
name and path.

Other options:

- `--nocapture` shows the output of test exercises;
- `-v` / `--version` prints the version.

Set the `NO_EMOJI` environment variable to replace emoji in the output with
plain characters. Colour is used only when standard output is a terminal;
`NO_COLOR` turns it off and `CLICOLOR_FORCE` turns it on.

Exit status is 0 on success and 1 when an exercise fails, cannot be found,
the arguments are wrong, `rustc` is missing, or the command is run outside an
exercise directory.

## Using it from Python

The command-line pieces are importable:

```python
from exerciser.exercise import load_exercises
from exerciser.cli import find_exercise, list_exercises
from exerciser.verify import verify, ExerciseFailed

exercises = load_exercises("info.toml")
list_exercises(exercises, unsolved=True)
try:
    verify(exercises)
except ExerciseFailed as failed:
    print(failed.exercise.hint)
```

`Exercise.state()` returns a `State` whose `context` holds the lines around
the pending marker; `Exercise.looks_done()` is true once the marker is gone.

## Reference solutions

The `exerciser.lessons` package holds worked Python counterparts of many
exercise topics:

- `exerciser.lessons.basics` – functions and conditionals;
- `exerciser.lessons.errors` – error handling and wrapping errors;
- `exerciser.lessons.climate` – a record parser with a descriptive error type;
- `exerciser.lessons.messages` – message types driving a state, and `append_bar`;
- `exerciser.lessons.iterators` – mapping, collecting results and counting;
- `exerciser.lessons.containers` – cons lists, threads, maps, lists and generics;
- `exerciser.lessons.structs` – structs, options, strings and primitive types;
- `exerciser.lessons.misc` – threads, modules, ownership, variables and macros.

```python
from exerciser.lessons.basics import calculate_apple_price
from exerciser.lessons.iterators import capitalize_words_string

calculate_apple_price(65)                         # 65
capitalize_words_string(["hello", " ", "world"])  # "Hello World"
```

## What it does not do

- There are no reference solutions for the type-conversion topics
  (byte and character counting, building a person or a colour from text,
  tuples or slices, and numeric casting).
- It does not ship the exercises themselves or an `info.toml`; it works on an
  exercise directory you already have.