from __future__ import annotations

import pytest

from cmdargs import ParsedArguments, parse


def test_add_operations_register_values() -> None:
    args = ParsedArguments()
    args.add_option_arg("foo", None)
    args.add_option_arg("foo", "bar")
    args.add_non_option_arg("one")
    assert args.option_args == {"foo": (None, "bar")}
    assert args.non_option_args == ("one",)
    assert not args.sealed


def test_missing_option_is_distinct_from_valueless_option() -> None:
    result = parse(["--flag"])
    assert result.get_option_values("missing") is None
    assert result.get_option_value("missing") is None
    assert not result.contains_option("missing")
    assert result.get_option_values("flag") == [None]
    assert result.contains_option("flag")


def test_accessors_return_copies() -> None:
    result = parse(["--foo=bar", "pos"])
    values = result.get_option_values("foo")
    assert values is not None
    values.append("mutated")
    result.get_non_option_args().append("mutated")
    result.get_option_names().add("mutated")
    assert result.get_option_values("foo") == ["bar"]
    assert result.get_non_option_args() == ["pos"]
    assert result.get_option_names() == {"foo"}


def test_repeated_reads_are_identical() -> None:
    result = parse(["--a=1", "--a=2", "--b", "x", "y"])
    first = (
        result.get_option_names(),
        result.get_option_values("a"),
        result.get_option_value("a"),
        result.get_non_option_args(),
    )
    second = (
        result.get_option_names(),
        result.get_option_values("a"),
        result.get_option_value("a"),
        result.get_non_option_args(),
    )
    assert first == second


def test_equality_ignores_sealed_state() -> None:
    built = ParsedArguments()
    built.add_option_arg("foo", "bar")
    assert parse(["--foo=bar"]) == built


def test_views_of_sealed_result_cannot_be_mutated() -> None:
    result = parse(["--foo=bar", "pos"])
    assert result.sealed
    with pytest.raises(TypeError):
        result.option_args["ghost"] = ()  # type: ignore[index]
    with pytest.raises(AttributeError):
        result.option_args["foo"].append("injected")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        result.non_option_args.clear()  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        result.option_args = {}  # type: ignore[misc]
    assert result.get_option_values("foo") == ["bar"]
    assert result.get_option_names() == {"foo"}
    assert result.get_non_option_args() == ["pos"]


def test_views_are_snapshots() -> None:
    args = ParsedArguments()
    args.add_option_arg("foo", "bar")
    view = args.option_args
    args.add_option_arg("foo", "baz")
    assert view["foo"] == ("bar",)
    assert args.option_args["foo"] == ("bar", "baz")
