"""Expose parsed command-line arguments as named properties."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .args import ParsedArguments
from .config import DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME
from .parser import ArgumentParser

__all__ = [
    "COMMAND_LINE_PROPERTY_SOURCE_NAME",
    "DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME",
    "CommandLinePropertySource",
]

COMMAND_LINE_PROPERTY_SOURCE_NAME = "commandLineArgs"


def _join(values: Iterable[Optional[str]]) -> str:
    return ",".join(value for value in values if value is not None)


class CommandLinePropertySource:
    """Read-only property view over :class:`ParsedArguments`.

    Options are looked up by name and their values joined with commas; an
    option given without a value resolves to ``""``. The reserved
    ``nonOptionArgs`` property (configurable) resolves to the comma-joined
    non-option arguments.
    """

    def __init__(
        self,
        source: ParsedArguments,
        *,
        name: str = COMMAND_LINE_PROPERTY_SOURCE_NAME,
        non_option_args_property_name: str = DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME,
    ) -> None:
        self.name = name
        self.source = source
        self.non_option_args_property_name = non_option_args_property_name

    @classmethod
    def from_argv(
        cls,
        argv: Iterable[str],
        *,
        name: str = COMMAND_LINE_PROPERTY_SOURCE_NAME,
        parser: Optional[ArgumentParser] = None,
        non_option_args_property_name: str = DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME,
    ) -> "CommandLinePropertySource":
        parsed = (parser or ArgumentParser()).parse(argv)
        return cls(
            parsed,
            name=name,
            non_option_args_property_name=non_option_args_property_name,
        )

    def contains_option(self, name: str) -> bool:
        return self.source.contains_option(name)

    def get_option_values(self, name: str) -> Optional[List[Optional[str]]]:
        return self.source.get_option_values(name)

    def get_non_option_args(self) -> List[str]:
        return self.source.get_non_option_args()

    def contains_property(self, name: str) -> bool:
        if name == self.non_option_args_property_name:
            return bool(self.source.get_non_option_args())
        return self.contains_option(name)

    def get_property(self, name: str) -> Optional[str]:
        if name == self.non_option_args_property_name:
            non_option_args = self.get_non_option_args()
            if not non_option_args:
                return None
            return _join(non_option_args)
        values = self.get_option_values(name)
        if values is None:
            return None
        return _join(values)

    def get_property_names(self) -> List[str]:
        return sorted(self.source.get_option_names())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
