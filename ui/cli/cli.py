"""CLI entrypoint for last-used-desktops."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Last used virtual desktop navigation")
config_app = typer.Typer(help="Configuration commands")


@app.command("replay")
def replay_cmd(
    scenario: Path = typer.Argument(..., exists=True, dir_okay=False, help="Scenario YAML file"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory with default.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
) -> None:
    """Replay a desktop navigation scenario."""
    commands.replay(scenario=scenario, as_json=as_json, config_dir=config_dir, verbose=verbose)


@config_app.command("show")
def config_show_cmd(
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory with default.yaml"),
) -> None:
    """Show effective navigation settings."""
    commands.config_show(config_dir=config_dir)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
