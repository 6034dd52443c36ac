import pytest

from drillrunner.drills.basics import (
    array_verdict,
    classify_character,
    describe_cat,
    describe_value,
    favorite_snacks,
    fill_vec,
    greeting,
    make_sausage,
    my_macro,
    nice_slice,
    second_number,
    ten_check,
)


def test_describe_value():
    assert describe_value(5) == "x has the value 5"


@pytest.mark.parametrize("x, expected", [(10, "Ten!"), (9, "Not ten!"), (0, "Not ten!")])
def test_ten_check(x, expected):
    assert ten_check(x) == expected


def test_greeting_morning_only():
    assert greeting(True, False) == ["Good morning!"]


def test_greeting_both():
    assert greeting(True, True) == ["Good morning!", "Good evening!"]


def test_greeting_none():
    assert greeting(False, False) == []


@pytest.mark.parametrize(
    "c, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
        ("🦀", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(c, expected):
    assert classify_character(c) == expected


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classify_character_rejects_non_single(bad):
    with pytest.raises(ValueError):
        classify_character(bad)


def test_array_verdict_big():
    assert array_verdict(["Are we there yet?"] * 100) == "Wow, that's a big array!"


def test_array_verdict_small():
    assert array_verdict([1] * 99) == "Meh, I eat arrays like that for breakfast."


def test_nice_slice():
    a = [1, 2, 3, 4, 5]
    assert nice_slice(a) == [2, 3, 4]


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_second_number():
    assert second_number((1, 2, 3)) == 2


def test_fill_vec_appends_without_mutating():
    original = [1]
    filled = fill_vec(original)
    assert filled == [1, 22, 44, 66]
    assert original == [1]


def test_fill_vec_from_empty():
    filled = fill_vec([])
    filled.append(88)
    assert filled == [22, 44, 66, 88]


def test_fill_vec_default():
    assert fill_vec() == [22, 44, 66]


def test_make_sausage():
    assert make_sausage() == "sausage!"


def test_favorite_snacks():
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_my_macro_no_args():
    assert my_macro() == "Check out my macro!"


def test_my_macro_one_arg():
    assert my_macro(7777) == "Look at this other macro: 7777"


def test_my_macro_too_many():
    with pytest.raises(TypeError):
        my_macro(1, 2)