"""Container for the result of a command-line parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

__all__ = ["ParsedArguments"]


@dataclass(slots=True)
class ParsedArguments:
    """Option and non-option arguments in the order they were given.

    An option supplied without a value (``--foo``) is stored as a single
    ``None`` entry, so ``None``, ``""`` and an unregistered name stay distinct.
    Storage is private; ``option_args`` and ``non_option_args`` are read-only
    snapshots.
    """

    _option_args: Dict[str, List[Optional[str]]] = field(default_factory=dict)
    _non_option_args: List[str] = field(default_factory=list)
    _sealed: bool = field(default=False, repr=False, compare=False)

    def add_option_arg(self, name: str, value: Optional[str]) -> None:
        self._check_writable()
        self._option_args.setdefault(name, []).append(value)

    def add_non_option_arg(self, value: str) -> None:
        self._check_writable()
        self._non_option_args.append(value)

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def option_args(self) -> Mapping[str, Tuple[Optional[str], ...]]:
        return MappingProxyType({name: tuple(values) for name, values in self._option_args.items()})

    @property
    def non_option_args(self) -> Tuple[str, ...]:
        return tuple(self._non_option_args)

    def _check_writable(self) -> None:
        if self._sealed:
            raise RuntimeError("ParsedArguments is read-only once parsing has completed")

    def contains_option(self, name: str) -> bool:
        return name in self._option_args

    def get_option_names(self) -> Set[str]:
        return set(self._option_args)

    def get_option_values(self, name: str) -> Optional[List[Optional[str]]]:
        """Return a copy of the values recorded for ``name``, or ``None`` if never set."""

        values = self._option_args.get(name)
        if values is None:
            return None
        return list(values)

    def get_option_value(self, name: str) -> Optional[str]:
        """Return the first value for ``name`` (``None`` when absent or valueless)."""

        values = self._option_args.get(name)
        if not values:
            return None
        return values[0]

    def get_non_option_args(self) -> List[str]:
        return list(self._non_option_args)
