# src/fastqpreprocessing/commands/base.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Type

from ..config import OptionsModel
from ..schema import FlagSchema
from ..validation import FailurePolicy, Rule


class HelpPolicy(str, Enum):
    EXIT = "exit"        # terminate with status 0 after printing help
    RETURN = "return"    # hand control back to the caller


@dataclass(frozen=True)
class Command:
    """Everything the runner needs to configure one CLI surface."""
    name: str
    schema: FlagSchema
    config_model: Type[OptionsModel]
    rules: Tuple[Rule, ...]
    policy: FailurePolicy
    help_policy: HelpPolicy
    errors_to_stderr: bool = False
    # extra stdout lines printed after validation, before the exit decision
    diagnostics: Optional[Callable[[OptionsModel], List[str]]] = None
