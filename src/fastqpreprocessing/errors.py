# src/fastqpreprocessing/errors.py
from __future__ import annotations
from typing import List, Sequence


class OptionsError(Exception):
    """Base class for everything raised by the option layer."""


class UsageError(OptionsError):
    """Malformed command line: unknown flag or a missing required value."""


class HelpRequested(OptionsError):
    """``-h``/``--help`` was given."""


class ConfigurationError(OptionsError):
    """A parsed configuration broke one or more rules."""

    def __init__(self, messages: Sequence[str]):
        self.messages: List[str] = list(messages)
        super().__init__("\n".join(self.messages))
