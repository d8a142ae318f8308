"""Split raw command-line tokens into option and non-option arguments.

Option arguments must follow the exact syntax ``--name[=value]``: the prefix
is two hyphens and the name and value are separated by ``=`` without spaces.

Valid option arguments::

    --foo
    --foo=bar
    --foo="bar then baz"
    --foo=bar,baz,biz

Everything that does not start with the prefix, including single-dash forms
such as ``-foo``, is kept verbatim as a non-option argument. Values are never
interpreted: ``--foo=bar,baz`` yields the single value ``"bar,baz"`` and only
the first ``=`` splits name from value.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .args import ParsedArguments
from .config import DEFAULT_OPTION_PREFIX, DEFAULT_VALUE_SEPARATOR, ParserConfig
from .errors import ConfigError, InvalidArgumentSyntax

__all__ = [
    "ArgumentParser",
    "OPTION_NAME_PREFIX",
    "OPTION_VALUE_SEPARATOR",
    "parse",
]

OPTION_NAME_PREFIX = DEFAULT_OPTION_PREFIX
OPTION_VALUE_SEPARATOR = DEFAULT_VALUE_SEPARATOR

_LOGGER = logging.getLogger("cmdargs.parser")


class ArgumentParser:
    """Stateless parser producing a read-only :class:`ParsedArguments`."""

    OPTION_NAME_PREFIX: str = OPTION_NAME_PREFIX
    OPTION_VALUE_SEPARATOR: str = OPTION_VALUE_SEPARATOR

    def __init__(
        self,
        *,
        option_prefix: Optional[str] = None,
        value_separator: Optional[str] = None,
    ) -> None:
        self.option_prefix = self.OPTION_NAME_PREFIX if option_prefix is None else option_prefix
        self.value_separator = (
            self.OPTION_VALUE_SEPARATOR if value_separator is None else value_separator
        )
        if not self.option_prefix:
            raise ConfigError("option prefix must not be empty")
        if not self.value_separator:
            raise ConfigError("value separator must not be empty")

    @classmethod
    def from_config(cls, config: ParserConfig) -> "ArgumentParser":
        return cls(option_prefix=config.option_prefix, value_separator=config.value_separator)

    def parse(self, args: Iterable[str]) -> ParsedArguments:
        """Parse ``args`` in order and return the populated result.

        Raises :class:`InvalidArgumentSyntax` for ``--``, ``--=value`` and
        ``--name=``; nothing is returned when that happens.
        """

        result = ParsedArguments()
        for arg in args:
            if arg.startswith(self.option_prefix):
                name = self.parse_option_name(arg)
                value = self.parse_option_value(arg)
                if not name or value == "":
                    raise InvalidArgumentSyntax(arg)
                result.add_option_arg(name, value)
            else:
                result.add_non_option_arg(arg)
        result.seal()
        _LOGGER.debug(
            "Parsed %d option name(s) and %d non-option argument(s)",
            len(result.get_option_names()),
            len(result.get_non_option_args()),
        )
        return result

    def _option_text(self, arg: str) -> str:
        return arg[len(self.option_prefix):]

    def parse_option_name(self, arg: str) -> str:
        name, _, _ = self._option_text(arg).partition(self.value_separator)
        return name

    def parse_option_value(self, arg: str) -> Optional[str]:
        """Return the text after the first separator, or ``None`` without one."""

        _, separator, value = self._option_text(arg).partition(self.value_separator)
        if not separator:
            return None
        return value


def parse(args: Iterable[str], *, config: Optional[ParserConfig] = None) -> ParsedArguments:
    parser = ArgumentParser() if config is None else ArgumentParser.from_config(config)
    return parser.parse(args)
