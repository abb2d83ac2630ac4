# src/fastqpreprocessing/help.py
from __future__ import annotations
from typing import Callable, List

import typer

from .schema import FlagSchema


def format_help(schema: FlagSchema) -> List[str]:
    """Usage line plus one row per declared flag, in declaration order."""
    lines = [f"Usage: {schema.prog} [options]"]
    for spec in schema:
        lines.append(f"\t--{spec.name:<20}  {spec.arity.value:<25}  {spec.help:<35}")
    return lines


def print_help(schema: FlagSchema, echo: Callable[..., None] = typer.echo) -> None:
    for line in format_help(schema):
        echo(line)
