"""Command-line entry point: verify, watch or run exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, parse_exercises
from .run import run
from .verify import ExerciseFailed, verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
WATCH_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

BANNER = "\n".join(
    [
        r"       welcome to...                      ",
        r"                 _   _ _                  ",
        r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
        r" | '__| | | / __| __| | | '_ \ / _` / __| ",
        r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
        r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
        r"                               |___/      ",
    ]
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustlings",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.set_defaults(command=None)
    commands = parser.add_subparsers()
    verify_cmd = commands.add_parser(
        "verify", aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_cmd.set_defaults(command="verify")
    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")
    run_cmd = commands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_cmd.add_argument("file", nargs="?")
    run_cmd.add_argument(
        "-t", "--test", action="store_true", help="Run the file as a test"
    )
    run_cmd.set_defaults(command="run")
    return parser


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def find_exercise(exercises: Iterable[Exercise], filename: str) -> Exercise | None:
    """Return the exercise whose path the given existing file ends with."""
    try:
        target = Path(filename).resolve(strict=True)
    except OSError:
        return None
    return next((e for e in exercises if _ends_with(target, e.path)), None)


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue) -> None:
        super().__init__()
        self._changes = changes

    def _record(self, event) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event) -> None:
        self._record(event)

    def on_modified(self, event) -> None:
        self._record(event)


def _verify_quietly(exercises: Iterable[Exercise]) -> None:
    try:
        verify(exercises)
    except ExerciseFailed:
        pass


def _starting_from(exercises: Iterable[Exercise], path: Path) -> Iterator[Exercise]:
    return itertools.dropwhile(lambda e: not _ends_with(path, e.path), exercises)


def _collect_changes(changes: queue.Queue) -> list[Path]:
    pending = {changes.get(): None}
    deadline = time.monotonic() + DEBOUNCE_SECONDS
    while (remaining := deadline - time.monotonic()) > 0:
        try:
            pending[changes.get(timeout=remaining)] = None
        except queue.Empty:
            break
    return list(pending)


def watch(exercises: Iterable[Exercise]) -> None:
    """Verify exercises, then re-verify from each edited exercise onwards."""
    exercises = list(exercises)
    changes: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _verify_quietly(exercises)
        while True:
            for changed in _collect_changes(changes):
                if changed.suffix == ".rs" and changed.exists():
                    print("----------**********----------\n")
                    _verify_quietly(_starting_from(exercises, changed.resolve()))
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print()
        print(BANNER)
        print()

    info = Path(INFO_FILE)
    if not info.exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    exercises = parse_exercises(info.read_text(encoding="utf-8"))

    if args.command == "run":
        if not args.file:
            print("Please supply a file name!")
            return 1
        exercise = find_exercise(exercises, args.file)
        if exercise is None:
            print("No exercise found for your file name!")
            return 1
        try:
            run(exercise)
        except ExerciseFailed:
            return 1
    elif args.command == "verify":
        try:
            verify(exercises)
        except ExerciseFailed:
            return 1
    elif args.command == "watch":
        watch(exercises)
    else:
        print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())