import re

import pytest

from smartcli.exceptions import FlagDeclarationError
from smartcli.parser import UNLIMITED_NUM_OF_ARGS, ErrorType, Flag, TokenStream


def test_constructor():
    flag = Flag(("hello", "world"), required=True, min_args=1, max_args=5)
    assert flag.min_args == 1
    assert flag.max_args == 5
    assert flag.has_name("hello")
    assert flag.has_name("world")
    assert flag.name == "hello"
    assert not flag.is_set
    assert flag.values == []
    assert flag.pattern is None


def test_single_name_string():
    flag = Flag("output")
    assert flag.names == ("output",)


def test_has_name():
    flag = Flag(("hello", "world"), required=True, min_args=1, max_args=5)
    assert not flag.has_name("helloworld")
    assert not flag.has_name("")
    assert not flag.has_name("--hello")


@pytest.mark.parametrize(
    "bounds,expected",
    [
        ((0, 10), (0, 10)),
        ((10, 0), (0, 10)),
        ((4, UNLIMITED_NUM_OF_ARGS), (4, UNLIMITED_NUM_OF_ARGS)),
        ((-10, 10), (0, 10)),
        ((-10, -10), (0, 0)),
        ((3, 3), (3, 3)),
    ],
)
def test_set_num_of_args(bounds, expected):
    flag = Flag(("hello", "world"), required=True, min_args=1, max_args=5)
    flag.set_num_of_args(*bounds)
    assert (flag.min_args, flag.max_args) == expected


def test_constructor_normalizes_bounds():
    flag = Flag("hello", min_args=5, max_args=2)
    assert (flag.min_args, flag.max_args) == (2, 5)


@pytest.mark.parametrize(
    "names",
    [(), ("",), ("-o",), ("--output",), ("output", "output"), (1,)],
)
def test_invalid_names(names):
    with pytest.raises(FlagDeclarationError):
        Flag(names)


def test_invalid_pattern():
    with pytest.raises(FlagDeclarationError):
        Flag("hello", pattern="(")
    with pytest.raises(FlagDeclarationError):
        Flag("hello", pattern=42)


def test_is_valid_when_unset():
    optional = Flag(("hello", "world"), required=False, min_args=0, max_args=5)
    assert optional.is_valid()
    assert optional.get_errors() == []

    required = Flag(("hello", "world"), required=True, min_args=0, max_args=5)
    assert not required.is_valid()
    errors = required.get_errors()
    assert len(errors) == 1
    assert errors[0].type == ErrorType.REQUIRED_FLAG_NOT_SET


def test_consume_min_args_violation():
    flag = Flag(("hello", "world"), required=True, min_args=2, max_args=2)
    flag.consume(TokenStream(["arg1"]))
    assert not flag.is_valid()
    errors = flag.get_errors()
    assert len(errors) == 1
    assert errors[0].type == ErrorType.MIN_NUMBER_OF_ARGS_VIOLATION


def test_consume_no_pattern():
    flag = Flag(("hello", "world"), required=True, min_args=1, max_args=2)
    stream = TokenStream(["arg1", "arg2", "arg3"])
    flag.consume(stream)
    assert flag.values == ["arg1", "arg2"]
    assert stream.has_next()
    assert stream.peek() == "arg3"
    assert flag.is_valid()
    assert flag.get_errors() == []


def test_consume_with_pattern():
    flag = Flag(("hello", "world"), required=True, min_args=2, max_args=3, pattern="^(abc|def)$")

    flag.consume(TokenStream(["abc", "def"]))
    assert flag.is_valid()
    assert flag.get_errors() == []

    flag.consume(TokenStream(["123"]))
    assert flag.values == ["abc", "def", "123"]
    assert not flag.is_valid()
    errors = flag.get_errors()
    assert len(errors) == 1
    assert errors[0].type == ErrorType.PATTERN_VIOLATION


def test_pattern_must_match_whole_value():
    flag = Flag("number", min_args=1, max_args=1, pattern=re.compile(r"\d+"))
    flag.consume(TokenStream(["12a"]))
    assert not flag.is_valid()


def test_callable_pattern():
    flag = Flag("number", min_args=1, max_args=2, pattern=str.isdigit)
    flag.consume(TokenStream(["12", "34"]))
    assert flag.is_valid()
    assert flag.pattern_text == "isdigit"

    flag.reset()
    flag.consume(TokenStream(["12", "x"]))
    assert flag.get_errors()[0].type == ErrorType.PATTERN_VIOLATION


def test_consume_force_consume():
    tokens = ["arg1", "arg2", "arg3"]
    flag = Flag(("hello", "world"), required=True, min_args=1, max_args=1, force_consume=True)
    stream = TokenStream(tokens)
    flag.consume(stream)
    assert flag.values == tokens
    assert not stream
    assert not flag.is_valid()
    errors = flag.get_errors()
    assert len(errors) == 1
    assert errors[0].type == ErrorType.MAX_NUMBER_OF_ARGS_VIOLATION


def test_consume_stops_at_flag_like_token():
    flag = Flag("hello", min_args=0, max_args=5, force_consume=True)
    stream = TokenStream(["a", "-x", "b"])
    flag.consume(stream)
    assert flag.values == ["a"]
    assert stream.peek() == "-x"


def test_consume_takes_dash_values():
    flag = Flag("hello", max_args=3)
    flag.consume(TokenStream(["-", "--", "-word"]))
    assert flag.values == ["-", "--", "-word"]


def test_switch_is_set_without_values():
    switch = Flag.create_switch(("compress", "c"))
    stream = TokenStream(["file.txt"])
    switch.consume(stream)
    assert switch.is_set
    assert switch.values == []
    assert switch.is_valid()
    assert stream.peek() == "file.txt"


def test_min_args_wins_over_pattern():
    flag = Flag("pair", min_args=2, max_args=2, pattern=r"\d+")
    flag.consume(TokenStream(["bad"]))
    assert [error.type for error in flag.get_errors()] == [
        ErrorType.MIN_NUMBER_OF_ARGS_VIOLATION
    ]


def test_reset():
    flag = Flag("hello", max_args=2)
    flag.consume(TokenStream(["a", "b"]))
    flag.reset()
    assert flag.values == []
    assert not flag.is_set


def test_flags_compare_by_identity():
    first = Flag(("output", "o"))
    second = Flag(("output", "o"))
    assert first != second
    assert len({first, second}) == 2
