# src/fastqpreprocessing/cli.py
from __future__ import annotations
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .commands import COMMANDS, FASTQPROCESS, FASTQ_SLIDESEQ, TAGSORT, Command
from .config import OptionsModel
from .runner import Status, configure, run
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False, help="Option front-end for the FASTQ/BAM preprocessing tools")
console = Console()

# hand every token to the schema parser untouched, -h/--help included
_FORWARD = {"allow_extra_args": True, "ignore_unknown_options": True, "help_option_names": []}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fastqpreprocessing {__version__}")
        raise typer.Exit()


@app.callback()
def _main(
    verbose: int = typer.Option(0, "-v", count=True, help="-v/-vv for more logs"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True,
                                 help="Show version and exit"),
):
    setup_logging(verbose)


def _forward(command: Command, args: List[str]) -> None:
    outcome = configure(command, args)
    if outcome.exit_code is not None:
        raise typer.Exit(outcome.exit_code)


@app.command("tagsort", context_settings=_FORWARD)
def tagsort_cmd(ctx: typer.Context):
    """Sort alignments by barcode/UMI/gene tags and compute metrics."""
    _forward(TAGSORT, ctx.args)


@app.command("fastqprocess", context_settings=_FORWARD)
def fastqprocess_cmd(ctx: typer.Context):
    """Convert FASTQ sets given barcode and UMI lengths."""
    _forward(FASTQPROCESS, ctx.args)


@app.command("fastq-slideseq", context_settings=_FORWARD)
def fastq_slideseq_cmd(ctx: typer.Context):
    """Convert FASTQ sets described by a read structure."""
    _forward(FASTQ_SLIDESEQ, ctx.args)


def render_config(config: OptionsModel, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    for name, value in config.model_dump().items():
        if isinstance(value, list):
            value = "\n".join(value) if value else "-"
        elif isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        table.add_row(name, str(value))
    return table


@app.command("show", context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def show(
    ctx: typer.Context,
    command: str = typer.Argument(..., help="tagsort | fastqprocess | fastq-slideseq"),
    json_output: bool = typer.Option(False, "--json", help="Print the record as JSON"),
):
    """Validate a command line and print the resulting configuration."""
    if command not in COMMANDS:
        raise typer.BadParameter(f"unknown command '{command}' (choose from {', '.join(COMMANDS)})")
    outcome = configure(COMMANDS[command], ctx.args)
    if outcome.status is not Status.VALID:
        raise typer.Exit(outcome.exit_code or 0)
    if json_output:
        typer.echo(outcome.config.model_dump_json(indent=2))
    else:
        console.print(render_config(outcome.config, f"{command} configuration"))


# ------------------------------------------------------------------------------------
# Console scripts, one per tool
# ------------------------------------------------------------------------------------
def tagsort_main() -> None:
    setup_logging()
    run(TAGSORT)


def fastqprocess_main() -> None:
    setup_logging()
    run(FASTQPROCESS)


def fastq_slideseq_main() -> None:
    setup_logging()
    run(FASTQ_SLIDESEQ)
