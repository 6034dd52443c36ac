# drillrunner

`drillrunner` walks a learner through a collection of small programming
exercises. It reads the list of exercises from an `info.toml` file in the
current directory, builds each one with `rustc`, runs it or its tests, and
reports the result with coloured output.

## Installing

```
pip install .
```

Exercises are built with the `rustc` compiler, which must be on your `PATH`.

## The exercise list

`drillrunner` must be started from the directory that holds `info.toml`.
Otherwise it prints a hint and exits with status 1. The file lists the
exercises in the order they are meant to be done:

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/if/if1.rs"
mode = "test"
```

Each exercise has one of two modes:

- `compile`: the exercise only has to build.
- `test`: the exercise is built with `--test`, and its tests have to pass.

A malformed entry, or a file without an `exercises` array, makes
`parse_exercises` raise `ValueError`.

While an exercise is checked, the compiled binary is written to
`./temp_<process id>` in the current directory and removed afterwards.

## Commands

```
drillrunner
```

With no subcommand, it prints a welcome banner and then the contents of
`default_out.txt` from the current directory.

```
drillrunner verify      # alias: drillrunner v
```

Checks every exercise in order. It stops at the first one that fails and
exits with status 1.

```
drillrunner run exercises/if/if1.rs      # alias: drillrunner r
```

Checks a single exercise according to its mode. The file must exist, and its
resolved path must end with the path of one of the listed exercises. A
`compile` exercise is built and run, and what it printed is shown; a `test`
exercise has its tests run. If no file name is given, the file is not one of
the listed exercises, or the exercise fails, the exit status is 1.

```
drillrunner watch       # alias: drillrunner w
```

Verifies everything once, then watches `./exercises`. Changes are gathered
for two seconds; for each `.rs` file that was created or changed and still
exists, it verifies again from that exercise onwards. It keeps watching until
interrupted.

The same commands are available through `python -m drillrunner.cli`.

## Using it from Python

- `drillrunner.exercise`: `Exercise` (a path and a `Mode`), with `compile()`,
  `run()` and `clean()`; `parse_exercises(text)` reads the list from TOML text.
- `drillrunner.verify`: `verify(exercises)`, `compile_only(exercise)` and
  `test(exercise)`, which raise `ExerciseFailed` when an exercise fails.
- `drillrunner.run`: `run(exercise)` and `compile_and_run(exercise)`.
- `drillrunner.cli`: `main(argv=None)` returns the exit status;
  `find_exercise(exercises, filename)` and `watch(exercises)`.

## Reference solutions

The `drillrunner.drills` package holds worked solutions to the exercise
topics, written as plain Python functions and classes:

- `error_handling`: `generate_nametag_text`, `parse_int`, `total_cost`,
  `spend_tokens`, `read_and_validate`, `pop_too_much`,
  `PositiveNonzeroInteger`, `CreationError`, `ParseIntError`
- `functions`: `call_me`, `is_even`, `sale_price`, `square`, `bigger`,
  `current_favorite_color`, `is_a_color_word`
- `basics`: `describe_value`, `ten_check`, `greeting`, `classify_character`,
  `array_verdict`, `nice_slice`, `describe_cat`, `second_number`,
  `fill_vec`, `make_sausage`, `favorite_snacks`, `my_macro`
- `quizzes`: `calculate_price`, `times_two`, `is_even`, `string_slice`,
  `string`, `hello_macro`
- `iterators`: `capitalize_first`, `capitalize_words`,
  `capitalize_into_string`, `divide`, `divide_all`, `division_results`,
  `factorial`, with `DivisionError`, `NotDivisibleError`, `DivideByZeroError`
- `concurrency`: `offset_sums`, `run_jobs`, `JobStatus`
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitStruct`, `Order`,
  `create_order_template`

## What it does not do

The package does not ship any exercises. The `.rs` exercise files,
`info.toml` and `default_out.txt` have to be provided in the directory it is
started from. It does not build exercises itself; it needs `rustc`.

## Running the tests

```
pip install .[test]
pytest
```