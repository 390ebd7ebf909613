#!/usr/bin/env python3
"""
Codeplan CLI - Command-line interface for request decomposition
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from codeplan.config import CodeplanConfig, load_config
from codeplan.constants import DISPLAY_TRUNCATE_LONG, DISPLAY_TRUNCATE_SHORT
from codeplan.errors import CodeplanError
from codeplan.interpretation import build_lookup_tables, validate_prompt
from codeplan.lexical import analyze as analyze_text
from codeplan.pipeline import Decomposition, decompose as decompose_text
from codeplan.utils.text_helpers import format_optional, truncate_chars

app = typer.Typer(
    name="codeplan",
    help="Decompose software requests into dependency-ordered tasks",
    add_completion=False,
)
console = Console(stderr=False)


def _configure_logging(cfg: CodeplanConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose or cfg.verbose else getattr(logging, cfg.runtime.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load(config: Optional[Path], verbose: bool) -> CodeplanConfig:
    try:
        cfg = load_config(config)
    except CodeplanError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}", style="red")
        raise typer.Exit(1)
    _configure_logging(cfg, verbose)
    return cfg


def _print_json(payload: dict) -> None:
    # Plain echo: rich would soft-wrap long strings inside the JSON
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _print_decomposition(result: Decomposition) -> None:
    request = result.request
    console.print(Panel.fit(
        "[bold cyan]Interpreted Request[/bold cyan]\n"
        f"Language: {format_optional(request.language)}\n"
        f"Framework: {format_optional(request.framework)}\n"
        f"Platform: {format_optional(request.platform)}\n"
        f"Dependencies: {format_optional(request.dependencies)}\n"
        f"Constraints: {format_optional(request.constraints)}\n"
        f"Complexity: {request.complexity}  Priority: {request.priority}  "
        f"Work units: {request.estimated_work_units}",
        border_style="cyan"
    ))

    table = Table(title=f"Tasks ({len(result.tasks)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Kind", style="blue")
    table.add_column("Depends on")
    table.add_column("Complexity", justify="right")
    table.add_column("Description", max_width=DISPLAY_TRUNCATE_SHORT)
    for position, task in enumerate(result.execution_order(), start=1):
        table.add_row(
            str(position),
            task.id,
            task.kind.value,
            format_optional(task.depends_on),
            str(task.estimated_complexity),
            truncate_chars(task.description, DISPLAY_TRUNCATE_SHORT),
        )
    console.print(table)


def _run_decompose(prompt: str, config: Optional[Path], verbose: bool, as_json: bool) -> None:
    cfg = _load(config, verbose)
    if not as_json:
        console.print(Panel.fit(
            "[bold cyan]Codeplan[/bold cyan]\n"
            f"Request: {truncate_chars(prompt, DISPLAY_TRUNCATE_LONG)}",
            border_style="cyan"
        ))

    validation = validate_prompt(prompt, cfg.validation)
    if not validation.is_valid:
        if as_json:
            _print_json({"validation": validation.to_dict()})
        else:
            for error in validation.errors:
                console.print(f"[bold red]Error:[/bold red] {error}")
        raise typer.Exit(1)

    try:
        result = decompose_text(prompt, cfg)
    except CodeplanError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}", style="red")
        raise typer.Exit(1)

    if as_json:
        payload = result.to_dict()
        payload["validation"] = validation.to_dict()
        _print_json(payload)
        return

    for warning in validation.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    _print_decomposition(result)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    command: Optional[str] = typer.Option(
        None,
        "-c",
        "--command",
        help="Decompose a single request without subcommands",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of tables",
    ),
):
    if command:
        _run_decompose(command, config, verbose, as_json)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def decompose(
    prompt: str = typer.Argument(..., help="Request to decompose"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of tables",
    ),
):
    """
    Decompose a request into a dependency-ordered task graph.

    Example:
        codeplan decompose "Build a secure REST API in TypeScript with Express"
        codeplan decompose "Create a Python function to parse CSV files" --json
    """
    _run_decompose(prompt, config, verbose, as_json)


@app.command()
def validate(
    prompt: str = typer.Argument(..., help="Request to validate"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of text",
    ),
):
    """Check a request for problems before decomposing it."""
    cfg = _load(config, False)
    result = validate_prompt(prompt, cfg.validation)

    if as_json:
        _print_json(result.to_dict())
    else:
        status = "[bold green]valid[/bold green]" if result.is_valid else "[bold red]invalid[/bold red]"
        console.print(f"Request is {status}")
        for error in result.errors:
            console.print(f"[red]●[/red] {error}")
        for warning in result.warnings:
            console.print(f"[yellow]●[/yellow] {warning}")
        for suggestion in result.suggestions:
            console.print(f"[dim]●[/dim] {suggestion}")

    if not result.is_valid:
        raise typer.Exit(1)


@app.command()
def analyze(
    prompt: str = typer.Argument(..., help="Request to analyze"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of tables",
    ),
):
    """Show tokens, tags and entities for a request."""
    cfg = _load(config, False)
    try:
        tables = build_lookup_tables(cfg.keywords)
    except CodeplanError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}", style="red")
        raise typer.Exit(1)
    analysis = analyze_text(prompt, extra_technologies=tables.all_values)

    if as_json:
        _print_json(analysis.to_dict())
        return

    table = Table(title=f"Tokens ({len(analysis.tokens)})")
    table.add_column("Token", style="cyan")
    table.add_column("Tag", style="blue")
    for token, token_tag in analysis.tagged():
        table.add_row(token, token_tag)
    console.print(table)

    for category, values in analysis.entities:
        console.print(f"[bold yellow]{category.value}:[/bold yellow] {format_optional(values)}")


@app.command()
def version():
    """Show version information."""
    from codeplan import __version__
    console.print(f"[bold]Codeplan[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
