"""Running a single exercise."""

from __future__ import annotations

from .exercise import Exercise, Mode
from .verify import ExerciseFailed, _console, _ok, _warn, test


def run(exercise: Exercise) -> None:
    """Test or compile-and-run an exercise according to its mode."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile an exercise, run it and show what it printed."""
    console = _console()
    try:
        ran = None
        with console.status(f"Compiling {exercise}...") as status:
            compiled = exercise.compile()
            status.update(f"Running {exercise}...")
            if compiled.success:
                ran = exercise.run()
        if ran is None:
            console.print(
                f"{_warn(console)} Compilation of {exercise} failed! "
                "Compiler error message:\n",
                style="red",
            )
            console.print(compiled.stderr_text)
            raise ExerciseFailed(exercise)
        console.print(ran.stdout_text)
        if ran.success:
            console.print(f"{_ok(console)} Successfully ran {exercise}", style="green")
            return
        console.print(ran.stderr_text)
        console.print(f"{_warn(console)} Ran {exercise} with errors", style="red")
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()