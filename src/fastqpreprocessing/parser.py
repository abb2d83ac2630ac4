# src/fastqpreprocessing/parser.py
"""
Schema-driven argument parser.

``SchemaParser`` turns a ``FlagSchema`` into an ``argparse`` parser in which
every flag is bound to one action that calls the flag's setter. argparse
invokes actions in command-line order, so setters observe the same sequence
the user typed (the tag ordering map depends on it).

GNU ``getopt_long`` conventions are kept: unambiguous long-option prefixes,
clustered short flags, attached values, and non-option words are ignored.
A value-taking flag consumes the next token whatever it looks like, so
``--sample-id -S1`` and ``--white-list --`` are plain values. Unknown flags
and missing values raise ``UsageError``; ``-h``/``--help`` raise
``HelpRequested``.
"""
from __future__ import annotations
import argparse
from typing import Any, Dict, List, Optional, Sequence

from .errors import HelpRequested, UsageError
from .schema import FlagSchema, FlagSpec
from .utils.logging import get_logger

log = get_logger(__name__)


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


class _SetterAction(argparse.Action):
    def __init__(self, option_strings, dest, flag: FlagSpec, **kwargs):
        self.flag = flag
        super().__init__(option_strings, dest, nargs=None if flag.takes_value else 0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        token = values if self.flag.takes_value else None
        if token == []:
            # argparse before 3.12 drops an attached "--" value
            token = "--"
        log.debug("--%s %s", self.flag.name, "" if token is None else token)
        self.flag.setter(namespace, token)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested(option_string)


class SchemaParser:
    def __init__(self, schema: FlagSchema):
        self.schema = schema
        self._short: Dict[str, FlagSpec] = {spec.short: spec for spec in schema}
        # long name -> spec; None marks the built-in --help
        self._long: Dict[str, Optional[FlagSpec]] = {spec.name: spec for spec in schema}
        self._parser = _RaisingArgumentParser(prog=schema.prog, add_help=False, allow_abbrev=True)
        for spec in schema:
            self._parser.add_argument(
                *spec.option_strings,
                action=_SetterAction,
                flag=spec,
                dest=argparse.SUPPRESS,
                default=argparse.SUPPRESS,
                help=argparse.SUPPRESS,
            )
        self._has_help = "h" not in self._short and "help" not in self._long
        if self._has_help:
            self._long["help"] = None
            self._parser.add_argument(
                "-h", "--help", action=_HelpAction, dest=argparse.SUPPRESS, default=argparse.SUPPRESS
            )

    def _match_long(self, name: str) -> Optional[FlagSpec]:
        """Flag for an exact or uniquely-prefixed long name, else None."""
        if name in self._long:
            return self._long[name]
        hits = [spec for long_name, spec in self._long.items() if long_name.startswith(name)]
        return hits[0] if len(hits) == 1 else None

    def attach_values(self, argv: Sequence[str]) -> List[str]:
        """
        Rewrite ``argv`` so each value sits in its flag's token as ``--name=value``.

        The token after a value-taking flag is always its value. A bare ``--``
        anywhere else ends option processing and the rest is dropped. Tokens
        this step cannot resolve (unknown or ambiguous long names, a flag with
        no value left) pass through unchanged for argparse to reject.
        """
        out: List[str] = []
        i = 0
        while i < len(argv):
            tok = argv[i]
            i += 1
            if tok == "--":
                break
            if tok.startswith("--"):
                name, sep, _ = tok[2:].partition("=")
                spec = self._match_long(name)
                if spec is not None and spec.takes_value and not sep and i < len(argv):
                    out.append(f"--{spec.name}={argv[i]}")
                    i += 1
                else:
                    out.append(tok)
                continue
            if tok.startswith("-") and tok != "-":
                cluster = tok[1:]
                for pos, ch in enumerate(cluster):
                    if ch == "h" and self._has_help:
                        raise HelpRequested("-h")
                    spec = self._short.get(ch)
                    if spec is None:
                        raise UsageError(f"invalid option -- '{ch}'")
                    if not spec.takes_value:
                        out.append(f"-{ch}")
                        continue
                    attached = cluster[pos + 1:]
                    if attached:
                        out.append(f"--{spec.name}={attached}")
                    elif i < len(argv):
                        out.append(f"--{spec.name}={argv[i]}")
                        i += 1
                    else:
                        out.append(f"-{ch}")
                    break
                continue
            out.append(tok)
        return out

    def parse(self, argv: Sequence[str], defaults: Dict[str, Any]) -> argparse.Namespace:
        """Apply ``argv`` on top of ``defaults`` and return the filled namespace."""
        args = self.attach_values(list(argv))
        namespace = argparse.Namespace(**defaults)
        namespace, extras = self._parser.parse_known_args(args, namespace)
        unknown = [tok for tok in extras if tok.startswith("-") and tok != "-"]
        if unknown:
            raise UsageError(f"unrecognized option '{unknown[0]}'")
        if extras:
            log.debug("%s: ignoring non-option arguments %s", self.schema.prog, extras)
        return namespace
