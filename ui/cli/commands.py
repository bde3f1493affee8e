"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from core.orchestrator import Orchestrator
from executor.action_router import ActionRouter
from planner.execution_plan import ExecutionPlan


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def replay(scenario: Path, as_json: bool = False, config_dir: Path | None = None, verbose: bool = False) -> None:
    """Run a scenario file and print the history after every step."""
    _setup_logging(verbose)
    try:
        plan = ExecutionPlan.from_yaml(scenario)
        results = ActionRouter(config_dir=config_dir, debug=verbose).run(plan)
    except (ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(results, indent=2))
        return

    for result in results:
        history = " ".join(result["history"]) or "-"
        typer.echo(f"{result['index']:>3}. {result['detail']:<28} active={result['active']} history=[{history}]")


def config_show(config_dir: Path | None = None) -> None:
    """Show effective runtime settings."""
    try:
        _, settings = Orchestrator(config_dir=config_dir).load_settings()
    except (ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(settings.model_dump(), indent=2))
