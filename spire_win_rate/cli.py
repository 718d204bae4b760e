"""
Command-line interface for the run statistics report.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config import CHARACTERS, ReportConfig
from .errors import RunStatsError
from .logging_utils import setup_logging
from .predicates import filter_ascension
from .report import ReportGenerator, render_streak_table
from .run_source import DirectoryRunSource, load_runs

app = typer.Typer(help="Slay the Spire run statistics - win rates and win streaks from local run files")


def _load_config(config_file: Optional[Path], runs_dir: Optional[Path],
                 ascension: Optional[int], log_level: Optional[str]) -> ReportConfig:
    config = ReportConfig.from_file(config_file) if config_file else ReportConfig()

    overrides = {}
    if runs_dir is not None:
        overrides["runs_dir"] = runs_dir
    if ascension is not None:
        overrides["ascension_level"] = ascension
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        config = ReportConfig(**{**config.dict(), **overrides})
    return config


@app.command()
def report(
    runs_dir: Optional[Path] = typer.Option(None, "--runs-dir", "-r",
                                            help="Runs root with one directory per character"),
    ascension: Optional[int] = typer.Option(None, "--ascension", "-a",
                                            help="Ascension level for win rates (default 9)"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c",
                                               help="Configuration file (YAML/JSON)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """
    Print win rates and best streaks, combined and per character.
    """
    try:
        config = _load_config(config_file, runs_dir, ascension, log_level)
    except (ValueError, OSError) as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    logger = setup_logging(config.log_level)
    logger.info(f"Reading runs from {config.runs_dir}")

    generator = ReportGenerator(
        DirectoryRunSource(config.runs_dir),
        characters=config.characters,
        ascension_level=config.ascension_level,
    )
    try:
        generator.run()
    except RunStatsError as e:
        typer.echo(f"Error during report: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def streaks(
    character: str = typer.Argument(..., help=f"Character: {', '.join(CHARACTERS)}"),
    runs_dir: Optional[Path] = typer.Option(None, "--runs-dir", "-r",
                                            help="Runs root with one directory per character"),
    ascension: Optional[int] = typer.Option(None, "--ascension", "-a",
                                            help="Only count runs at this ascension level"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """List every win streak for one character."""
    character = character.upper()
    if character not in CHARACTERS:
        typer.echo(f"Unknown character {character}, expected one of {', '.join(CHARACTERS)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = _load_config(None, runs_dir, None, log_level)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)
    setup_logging(config.log_level)

    runs = load_runs(DirectoryRunSource(config.runs_dir), character)
    if ascension is not None:
        runs = filter_ascension(runs, ascension)

    try:
        render_streak_table(character, runs, Console(highlight=False))
    except RunStatsError as e:
        typer.echo(f"Error during streak analysis: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def show_config(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c",
                                               help="Configuration file (YAML/JSON)"),
):
    """Show the effective configuration."""
    try:
        config = _load_config(config_file, None, None, None)
    except (ValueError, OSError) as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    for key, value in config.dict().items():
        typer.echo(f"  {key}: {value}")


if __name__ == "__main__":
    app()
