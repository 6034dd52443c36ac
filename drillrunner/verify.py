"""Checking exercises by compiling and testing them."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console

from .exercise import Exercise, Mode


class ExerciseFailed(Exception):
    """Raised when an exercise does not compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


def _emoji(console: Console, symbol: str, fallback: str) -> str:
    return symbol if "utf" in console.encoding else fallback


def _ok(console: Console) -> str:
    return _emoji(console, "✅", "✓")


def _warn(console: Console) -> str:
    return _emoji(console, "⚠️ ", "!")


def verify(exercises: Iterable[Exercise]) -> None:
    """Check exercises in order, stopping at the first that fails."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that an exercise compiles."""
    console = _console()
    try:
        with console.status(f"Compiling {exercise}..."):
            compiled = exercise.compile()
        if compiled.success:
            console.print(
                f"{_ok(console)} Successfully compiled {exercise}!", style="green"
            )
            return
        console.print(
            f"{_warn(console)} Compilation of {exercise} failed! "
            "Compiler error message:\n",
            style="red",
        )
        console.print(compiled.stderr_text)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Compile an exercise's tests and check that they pass."""
    console = _console()
    try:
        ran = None
        with console.status(f"Testing {exercise}...") as status:
            compiled = exercise.compile()
            if compiled.success:
                status.update(f"Running {exercise}...")
                ran = exercise.run()
        if ran is None:
            console.print(
                f"{_warn(console)} Compiling of {exercise} failed! "
                "Please try again. Here's the output:",
                style="red",
            )
            console.print(compiled.stderr_text)
            raise ExerciseFailed(exercise)
        if ran.success:
            console.print(
                f"{_ok(console)} Successfully tested {exercise}!", style="green"
            )
            return
        console.print(
            f"{_warn(console)} Testing of {exercise} failed! "
            "Please try again. Here's the output:",
            style="red",
        )
        console.print(ran.stdout_text)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()