from __future__ import annotations

from cmdargs import ArgumentParser, CommandLinePropertySource, parse


def test_option_properties_join_values() -> None:
    source = CommandLinePropertySource.from_argv(["--foo=bar", "--foo=baz", "--debug"])
    assert source.name == "commandLineArgs"
    assert source.contains_property("foo")
    assert source.get_property("foo") == "bar,baz"
    assert source.get_property("debug") == ""
    assert source.get_property("missing") is None
    assert not source.contains_property("missing")


def test_property_names_are_option_names() -> None:
    source = CommandLinePropertySource(parse(["--b", "--a=1", "pos"]))
    assert source.get_property_names() == ["a", "b"]


def test_non_option_args_property() -> None:
    source = CommandLinePropertySource(parse(["--o", "one", "two"]))
    assert source.contains_property("nonOptionArgs")
    assert source.get_property("nonOptionArgs") == "one,two"
    assert source.get_non_option_args() == ["one", "two"]


def test_non_option_args_property_absent_when_empty() -> None:
    source = CommandLinePropertySource(parse(["--o"]))
    assert not source.contains_property("nonOptionArgs")
    assert source.get_property("nonOptionArgs") is None


def test_custom_non_option_args_property_name() -> None:
    source = CommandLinePropertySource.from_argv(
        ["a", "--nonOptionArgs=x"],
        name="cli",
        non_option_args_property_name="positional",
    )
    assert source.name == "cli"
    assert source.get_property("positional") == "a"
    assert source.get_property("nonOptionArgs") == "x"
    source.non_option_args_property_name = "other"
    assert source.get_property("other") == "a"


def test_delegates_to_custom_parser() -> None:
    parser = ArgumentParser(option_prefix="/")
    source = CommandLinePropertySource.from_argv(["/x=1"], parser=parser)
    assert source.contains_option("x")
    assert source.get_option_values("x") == ["1"]
