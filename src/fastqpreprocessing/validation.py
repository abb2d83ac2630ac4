# src/fastqpreprocessing/validation.py
"""
Ordered rule evaluation.

A rule is a plain function taking a configuration record and returning an
error message, or ``None`` when the record satisfies it. Nothing here prints
or exits; the runner decides what to do with the result.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from .utils.logging import get_logger

log = get_logger(__name__)

Rule = Callable[[Any], Optional[str]]


class FailurePolicy(str, Enum):
    FAIL_FAST = "fail-fast"      # stop at the first violated rule
    ACCUMULATE = "accumulate"    # evaluate every rule, report them all


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def run_rules(config: Any, rules: Sequence[Rule], policy: FailurePolicy) -> ValidationResult:
    result = ValidationResult()
    for rule in rules:
        message = rule(config)
        if message is None:
            continue
        log.debug("rule %s failed: %s", rule.__name__, message)
        result.errors.append(message)
        if policy is FailurePolicy.FAIL_FAST:
            break
    return result
