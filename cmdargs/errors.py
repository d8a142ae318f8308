"""Exceptions raised by the command-line argument parser."""

from __future__ import annotations

__all__ = ["CmdArgsError", "InvalidArgumentSyntax", "ConfigError"]


class CmdArgsError(Exception):
    """Base class for errors raised by :mod:`cmdargs`."""


class InvalidArgumentSyntax(CmdArgsError, ValueError):
    """Raised when an option token is malformed (``--``, ``--=x``, ``--name=``)."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Invalid argument syntax: {argument}")
        self.argument = argument


class ConfigError(CmdArgsError, ValueError):
    pass
