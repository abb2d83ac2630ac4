# src/fastqpreprocessing/runner.py
"""
Parse + validate one command line and decide how the process should end.

``configure`` performs the command's console output (help, error messages,
the verbose file listing) and returns an ``Outcome``; it never exits.
``run`` is the thin entry point that turns the outcome into a process exit.
``configure_or_raise`` is the quiet variant for Python callers.
"""
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence

import typer

from .commands.base import Command, HelpPolicy
from .config import OptionsModel
from .errors import ConfigurationError, HelpRequested, UsageError
from .help import print_help
from .parser import SchemaParser
from .utils.logging import get_logger
from .validation import ValidationResult, run_rules

log = get_logger(__name__)


class Status(str, Enum):
    VALID = "valid"
    HELP = "help"
    INVALID = "invalid"


@dataclass
class Outcome:
    status: Status
    config: Optional[OptionsModel] = None
    errors: List[str] = field(default_factory=list)
    # None: return control to the caller without terminating
    exit_code: Optional[int] = None


def build_config(command: Command, argv: Sequence[str]) -> OptionsModel:
    """Parse ``argv`` into the command's record. Raises ``UsageError``/``HelpRequested``."""
    values = SchemaParser(command.schema).parse(argv, command.config_model.defaults())
    return command.config_model(**vars(values))


def validate(command: Command, config: OptionsModel) -> ValidationResult:
    return run_rules(config, command.rules, command.policy)


def configure(
    command: Command,
    argv: Sequence[str],
    echo: Callable[..., None] = typer.echo,
) -> Outcome:
    try:
        config = build_config(command, argv)
    except (UsageError, HelpRequested) as e:
        log.debug("%s: %s", command.name, e)
        print_help(command.schema, echo)
        exit_code = 0 if command.help_policy is HelpPolicy.EXIT else None
        return Outcome(Status.HELP, exit_code=exit_code)

    result = validate(command, config)
    for message in result.errors:
        echo(message)
        if command.errors_to_stderr:
            echo(message, err=True)

    if command.diagnostics is not None:
        for line in command.diagnostics(config):
            echo(line)

    if not result.ok:
        log.info("%s: %d configuration error(s)", command.name, len(result.errors))
        return Outcome(Status.INVALID, config=config, errors=result.errors, exit_code=1)
    log.info("%s: configuration validated", command.name)
    return Outcome(Status.VALID, config=config)


def configure_or_raise(command: Command, argv: Sequence[str]) -> OptionsModel:
    """Return the validated record; raise instead of printing or exiting."""
    config = build_config(command, argv)
    result = validate(command, config)
    if not result.ok:
        raise ConfigurationError(result.errors)
    return config


def run(command: Command, argv: Optional[Sequence[str]] = None) -> Optional[OptionsModel]:
    """
    Configure ``command`` from ``argv`` (default ``sys.argv[1:]``).

    Exits the process on invalid input (status 1) and on the tagsort help
    path (status 0). Otherwise returns the validated record, or ``None``
    when help was shown by a command that hands control back.
    """
    outcome = configure(command, sys.argv[1:] if argv is None else argv)
    if outcome.exit_code is not None:
        sys.exit(outcome.exit_code)
    return outcome.config
