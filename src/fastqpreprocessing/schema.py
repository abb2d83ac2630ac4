# src/fastqpreprocessing/schema.py
"""
Declarative flag tables.

A command declares its options as an ordered ``FlagSchema`` of ``FlagSpec``
rows: long name, one-letter alias, arity, help sentence and a setter. The
setter is the only place a flag touches the configuration being built, so
the same generic parser serves every command.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from argparse import Namespace
from typing import Callable, Iterator, Optional, Tuple

from .numeric import to_float, to_int

# setter(values, token): token is None for no-argument flags
Setter = Callable[[Namespace, Optional[str]], None]


class Arity(str, Enum):
    NO_ARGUMENT = "no argument"
    REQUIRED_ARGUMENT = "required argument"


@dataclass(frozen=True)
class FlagSpec:
    name: str
    short: str
    arity: Arity
    help: str
    setter: Setter

    @property
    def takes_value(self) -> bool:
        return self.arity is Arity.REQUIRED_ARGUMENT

    @property
    def option_strings(self) -> Tuple[str, str]:
        return f"-{self.short}", f"--{self.name}"


@dataclass(frozen=True)
class FlagSchema:
    prog: str
    flags: Tuple[FlagSpec, ...]

    def __post_init__(self):
        seen = set()
        for spec in self.flags:
            if len(spec.short) != 1:
                raise ValueError(f"{self.prog}: short alias of --{spec.name} must be one character")
            for key in (spec.name, spec.short):
                if key in seen:
                    raise ValueError(f"{self.prog}: duplicate flag '{key}'")
                seen.add(key)

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def get(self, name: str) -> FlagSpec:
        for spec in self.flags:
            if spec.name == name or spec.short == name:
                return spec
        raise KeyError(name)


# ----------------------------
# Setter factories
# ----------------------------

def enable(field: str) -> Setter:
    """No-argument flag: switch a boolean on."""
    def _set(values: Namespace, _token: Optional[str]) -> None:
        setattr(values, field, True)
    return _set


def store(field: str, convert: Callable[[str], object] = str) -> Setter:
    """Scalar flag; the last occurrence wins."""
    def _set(values: Namespace, token: Optional[str]) -> None:
        setattr(values, field, convert(token))
    return _set


def store_int(field: str) -> Setter:
    return store(field, to_int)


def store_float(field: str) -> Setter:
    return store(field, to_float)


def append(field: str) -> Setter:
    """Repeatable flag; values accumulate in argument order."""
    def _set(values: Namespace, token: Optional[str]) -> None:
        getattr(values, field).append(token)
    return _set


def store_tag(field: str, order_field: str = "tag_order") -> Setter:
    """
    Store a tag value and record it in the tag ordering map.

    The value is stamped with the map size seen before insertion. A value
    already present is re-stamped instead of added, so two flags given the
    same tag leave the map one entry short.
    """
    def _set(values: Namespace, token: Optional[str]) -> None:
        setattr(values, field, token)
        order = getattr(values, order_field)
        size = len(order)
        order[token] = size
    return _set
