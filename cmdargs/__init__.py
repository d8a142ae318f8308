"""Parse ``--name[=value]`` command-line arguments into options and positionals."""

from __future__ import annotations

from .args import ParsedArguments
from .config import ParserConfig, get_runtime_config, load_config, reload_config
from .errors import CmdArgsError, ConfigError, InvalidArgumentSyntax
from .parser import OPTION_NAME_PREFIX, OPTION_VALUE_SEPARATOR, ArgumentParser, parse
from .property_source import (
    COMMAND_LINE_PROPERTY_SOURCE_NAME,
    DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME,
    CommandLinePropertySource,
)
from .version import __version__

__all__ = [
    "ArgumentParser",
    "ParsedArguments",
    "CommandLinePropertySource",
    "ParserConfig",
    "CmdArgsError",
    "ConfigError",
    "InvalidArgumentSyntax",
    "OPTION_NAME_PREFIX",
    "OPTION_VALUE_SEPARATOR",
    "COMMAND_LINE_PROPERTY_SOURCE_NAME",
    "DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME",
    "get_runtime_config",
    "load_config",
    "reload_config",
    "parse",
    "__version__",
]
