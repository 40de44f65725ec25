"""Typer CLI application for beancheck."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from beancheck.config import VerifierConfig
from beancheck.errors import BeanCheckError, type_name
from beancheck.strategies import list_strategies
from beancheck.utils.logger import configure_logging
from beancheck.verifier import RecordingPropertyVerifier, VerificationFailure

app = typer.Typer(help="beancheck property round-trip verifier")
console = Console()


@app.callback()
def _callback() -> None:
    """beancheck CLI: round-trip bean accessors from the command line."""


def _load_target(target: str) -> Any:
    """Import ``package.module:ClassName`` (nested names may be dotted)."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        msg = f"Expected 'module:ClassName', got {target!r}"
        raise typer.BadParameter(msg)
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj


def _load_config(config_path: Path | None, mock_strategy: str | None) -> VerifierConfig:
    """Build the verifier config from an optional JSON file and CLI overrides."""
    settings: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            console.print(f"[red]Error: Config file not found: {config_path}[/red]")
            raise typer.Exit(code=1)
        settings = VerifierConfig.model_validate_json(config_path.read_text()).model_dump()
    if mock_strategy is not None:
        settings["mock_strategy"] = mock_strategy
    return VerifierConfig(**settings)


def _failure_table(failures: list[VerificationFailure]) -> Table:
    table = Table(title="Property failures")
    table.add_column("Property", style="cyan")
    table.add_column("Kind")
    table.add_column("Message")
    table.add_column("Expected")
    table.add_column("Actual")
    for failure in failures:
        is_equality = failure.kind == "equality"
        table.add_row(
            escape(failure.property_name or "-"),
            failure.kind,
            escape(failure.message),
            escape(repr(failure.expected)) if is_equality else "",
            escape(repr(failure.actual)) if is_equality else "",
        )
    return table


@app.command()
def verify(
    target: str = typer.Argument(..., help="Bean class to verify, as 'package.module:ClassName'"),
    skip: list[str] | None = typer.Option(None, "--skip", help="Property name to leave untested (repeatable)"),
    mock_strategy: str | None = typer.Option(None, "--mock-strategy", help="Registered mock strategy name"),
    config: Path | None = typer.Option(None, "--config", help="Path to JSON verifier config"),
    log_level: str | None = typer.Option(None, "--log-level", help="QUIET, NORMAL, VERBOSE or DEBUG"),
) -> None:
    """Round-trip every accessor/mutator pair of TARGET and report failures."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    try:
        verifier_config = _load_config(config, mock_strategy)
    except ValidationError as exc:
        console.print(f"[red]Error: Invalid verifier config[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from None

    try:
        target_type = _load_target(target)
    except (ImportError, AttributeError) as exc:
        console.print(f"[red]Error: Cannot import {escape(repr(target))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    verifier = RecordingPropertyVerifier(verifier_config)
    try:
        verifier.verify(target_type, *(skip or []))
    except BeanCheckError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    if verifier.failures:
        console.print(_failure_table(verifier.failures))
        console.print(f"[red]{len(verifier.failures)} failure(s) in {type_name(target_type)}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]{len(verifier.tested)} properties verified on {type_name(target_type)}[/green]")


@app.command()
def strategies() -> None:
    """List registered mock strategy names."""
    for name in list_strategies():
        console.print(name)
