"""Command-line tool that shows how a token list is parsed.

Everything after the first literal ``--`` is handed to the parser::

    cmdargs --json -- --foo=bar --debug input.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .args import ParsedArguments
from .colors import color
from .config import ParserConfig, get_runtime_config, load_config
from .errors import ConfigError, InvalidArgumentSyntax
from .parser import ArgumentParser
from .property_source import CommandLinePropertySource
from .version import __version__

TOKEN_SEPARATOR = "--"

EXIT_OK = 0
EXIT_MISSING_PROPERTY = 1
EXIT_USAGE = 2


def _path_arg(value: str) -> Path:
    return Path(value).expanduser()


def build_parser(prog: str = "cmdargs") -> argparse.ArgumentParser:
    """Construct the argument parser for the tool's own flags."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Parse TOKENS given after '--' into option and non-option arguments.",
        usage=f"{prog} [options] -- TOKENS...",
    )
    parser.add_argument("--json", action="store_true", help="Print the parse result as JSON.")
    parser.add_argument(
        "--property",
        metavar="NAME",
        action="append",
        default=[],
        help="Resolve NAME through the command-line property source (repeatable).",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=_path_arg,
        default=None,
        help="Load parser settings from a JSON file.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Return ``(tool_args, tokens)`` split at the first ``--``."""
    items = list(argv)
    if TOKEN_SEPARATOR not in items:
        return items, []
    index = items.index(TOKEN_SEPARATOR)
    return items[:index], items[index + 1:]


def _resolve_config(path: Optional[Path]) -> ParserConfig:
    if path is not None:
        return load_config(path)
    return get_runtime_config()


def _print_summary(result: ParsedArguments) -> None:
    print(color("options:", fg="yellow", bold=True))
    if not result.option_args:
        print(color("  (none)", dim=True))
    for name, values in result.option_args.items():
        rendered = ", ".join(
            color("(no value)", dim=True) if value is None else value for value in values
        )
        print(f"  {color(name, fg='cyan')} = {rendered}")
    print(color("non-option args:", fg="yellow", bold=True))
    if not result.non_option_args:
        print(color("  (none)", dim=True))
    for value in result.non_option_args:
        print(f"  {value}")


def _print_json(result: ParsedArguments) -> None:
    payload = {
        "options": {name: list(values) for name, values in result.option_args.items()},
        "non_option_args": result.get_non_option_args(),
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _print_properties(
    source: CommandLinePropertySource, names: Sequence[str], *, as_json: bool = False
) -> int:
    status = EXIT_OK
    if as_json:
        properties: Dict[str, Optional[str]] = {}
        for name in names:
            if not source.contains_property(name):
                status = EXIT_MISSING_PROPERTY
            properties[name] = source.get_property(name)
        print(json.dumps({"properties": properties}, ensure_ascii=False, indent=2))
        return status
    for name in names:
        if not source.contains_property(name):
            print(color(f"{name} is not set", fg="red"))
            status = EXIT_MISSING_PROPERTY
            continue
        print(f"{name}={source.get_property(name)}")
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the cmdargs CLI entrypoint."""
    tool_args, tokens = split_argv(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(tool_args)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        logging.getLogger("cmdargs").setLevel(logging.DEBUG)

    try:
        config = _resolve_config(args.config)
        result = ArgumentParser.from_config(config).parse(tokens)
    except (ConfigError, InvalidArgumentSyntax) as exc:
        print(color(f"error: {exc}", fg="red"), file=sys.stderr)
        return EXIT_USAGE

    if args.property:
        source = CommandLinePropertySource(
            result,
            non_option_args_property_name=config.non_option_args_property_name,
        )
        return _print_properties(source, args.property, as_json=args.json)

    if args.json:
        _print_json(result)
    else:
        _print_summary(result)
    return EXIT_OK


__all__ = ["build_parser", "split_argv", "main"]
