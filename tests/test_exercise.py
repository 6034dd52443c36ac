import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from drillrunner.exercise import (
    CommandResult,
    Exercise,
    Mode,
    parse_exercises,
    temp_file,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_clean(workdir):
    Path(temp_file()).touch()
    exercise = Exercise(Path("example.rs"), Mode.TEST)
    exercise.clean()
    assert not Path(temp_file()).exists()


def test_clean_without_binary_keeps_other_files(workdir):
    keep = workdir / "keep.txt"
    keep.write_text("data")
    Exercise(Path("example.rs"), Mode.COMPILE).clean()
    assert not Path(temp_file()).exists()
    assert keep.read_text() == "data"


def test_temp_file_is_per_process():
    name = temp_file()
    assert name.startswith("./temp_")
    assert name.endswith(str(os.getpid()))


def test_str_is_path():
    assert str(Exercise(Path("exercises/a.rs"), Mode.COMPILE)) == "exercises/a.rs"


def test_exercise_converts_fields():
    exercise = Exercise("exercises/a.rs", "test")
    assert exercise.path == Path("exercises/a.rs")
    assert exercise.mode is Mode.TEST


def test_parse_exercises():
    text = """
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/if/if1.rs"
mode = "test"
"""
    exercises = parse_exercises(text)
    assert [(e.path, e.mode) for e in exercises] == [
        (Path("exercises/variables/variables1.rs"), Mode.COMPILE),
        (Path("exercises/if/if1.rs"), Mode.TEST),
    ]


def test_parse_rejects_unknown_mode():
    with pytest.raises(ValueError):
        parse_exercises('[[exercises]]\npath = "a.rs"\nmode = "Compile"\n')


def test_parse_rejects_missing_path():
    with pytest.raises(ValueError):
        parse_exercises('[[exercises]]\nmode = "test"\n')


def test_parse_rejects_missing_list():
    with pytest.raises(ValueError):
        parse_exercises('title = "nothing"\n')


def test_command_result_success():
    assert CommandResult(0).success
    assert not CommandResult(1).success


def test_command_result_decodes_lossily():
    result = CommandResult(0, b"ok\xff", b"err")
    assert result.stdout_text == "ok\ufffd"
    assert result.stderr_text == "err"


def test_compile_mode_arguments():
    done = subprocess.CompletedProcess([], 0, b"", b"")
    with mock.patch("subprocess.run", return_value=done) as fake:
        result = Exercise(Path("exercises/a.rs"), Mode.COMPILE).compile()
    assert result.success
    assert fake.call_args.args[0] == [
        "rustc", "exercises/a.rs", "-o", temp_file(), "--color", "always",
    ]


def test_test_mode_arguments():
    done = subprocess.CompletedProcess([], 1, b"", b"bad")
    with mock.patch("subprocess.run", return_value=done) as fake:
        result = Exercise(Path("exercises/a.rs"), Mode.TEST).compile()
    assert not result.success
    assert result.stderr == b"bad"
    assert fake.call_args.args[0] == [
        "rustc", "--test", "exercises/a.rs", "-o", temp_file(), "--color", "always",
    ]


def test_run_executes_binary():
    done = subprocess.CompletedProcess([], 0, b"out", b"")
    with mock.patch("subprocess.run", return_value=done) as fake:
        result = Exercise(Path("a.rs"), Mode.COMPILE).run()
    assert result.stdout == b"out"
    assert fake.call_args.args[0] == [temp_file()]


def test_missing_compiler_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        with pytest.raises(RuntimeError, match="compile"):
            Exercise(Path("a.rs"), Mode.COMPILE).compile()