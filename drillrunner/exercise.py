"""Exercise definitions and the compiler invocations behind them."""

from __future__ import annotations

import contextlib
import enum
import os
import subprocess
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Path of the per-process binary that compiled exercises are written to."""
    return f"./temp_{os.getpid()}"


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of a finished command."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def _execute(args: list[str], what: str) -> CommandResult:
    try:
        completed = subprocess.run(args, capture_output=True)
    except OSError as err:
        raise RuntimeError(f"Failed to run '{what}' command.") from err
    return CommandResult(
        completed.returncode, completed.stdout or b"", completed.stderr or b""
    )


@dataclass
class Exercise:
    """A single exercise file and the way it is checked."""

    path: Path
    mode: Mode

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CommandResult:
        """Compile the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        return _execute(args, "compile")

    def run(self) -> CommandResult:
        """Run the previously compiled binary."""
        return _execute([temp_file()], "run")

    def clean(self) -> None:
        """Remove the compiled binary, ignoring any failure."""
        with contextlib.suppress(OSError):
            os.remove(temp_file())

    def __str__(self) -> str:
        return str(self.path)


def parse_exercises(text: str) -> list[Exercise]:
    """Read the exercise list from the text of an info file."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("exercise list is missing the 'exercises' array")
    exercises = []
    for entry in entries:
        try:
            exercises.append(Exercise(Path(entry["path"]), Mode(entry["mode"])))
        except (KeyError, TypeError, ValueError) as err:
            raise ValueError(f"invalid exercise entry: {entry!r}") from err
    return exercises