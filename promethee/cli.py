"""Command-line interface for the PROMETHEE preference engine."""

import os
from pathlib import Path
from typing import Optional

import pandas as pd
import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from promethee import __version__
from promethee.config import get_config
from promethee.core.preference_pipeline import PreferencePipeline
from promethee.core.validation import check_configuration
from promethee.exceptions import PrometheeError
from promethee.io.problem_loader import ProblemLoader
from promethee.io.results_writer import ResultsWriter
from promethee.processing.interactions import check_net_balance
from promethee.types import PreferenceMatrix
from promethee.utils.logging import configure_logging

app = typer.Typer(
    name="promethee",
    help="PROMETHEE preference computations with criterion interactions",
    add_completion=False
)

console = Console()


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        print(f"PROMETHEE preferences v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose logging"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """PROMETHEE preference engine."""
    if config_file:
        os.environ["PROMETHEE_CONFIG_PATH"] = str(config_file)

    logging_config = get_config().logging
    configure_logging(
        level="DEBUG" if verbose else logging_config.level,
        format_type=logging_config.format,
        log_file=logging_config.file,
    )


def _matrix_table(title: str, matrix: PreferenceMatrix) -> Table:
    frame = matrix.to_frame()
    table = Table(title=title)
    table.add_column("", style="bold")
    for column in frame.columns:
        table.add_column(str(column), justify="right")
    for entity, row in frame.iterrows():
        table.add_row(
            str(entity),
            *["-" if pd.isna(value) else f"{value:.4f}" for value in row],
        )
    return table


@app.command()
def compute(
    problem_file: Path = typer.Argument(..., help="YAML or JSON problem file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory for result files"),
    discordance: Optional[bool] = typer.Option(
        None,
        "--discordance/--no-discordance",
        help="Also compute discordances (defaults to configuration)"
    ),
):
    """Compute partial and total preferences for a problem."""
    try:
        problem = ProblemLoader().load(problem_file)
        results = PreferencePipeline(compute_discordance=discordance).run(problem)
    except PrometheeError as e:
        console.print(f"[red]✗ Calculation failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(_matrix_table("Total preferences", results.preferences))
    if results.has_discordance:
        console.print(_matrix_table("Discordances", results.discordances))
        console.print(_matrix_table("Preferences with discordance", results.preferences_with_discordance))

    if output:
        written = ResultsWriter(output).write(results)
        console.print(f"[green]✓ Saved {len(written)} files to: {output}[/green]")


@app.command()
def validate(
    problem_file: Path = typer.Argument(..., help="YAML or JSON problem file"),
):
    """Check a problem file without computing preferences."""
    try:
        problem = ProblemLoader().load(problem_file)
        check_configuration(problem)
        check_net_balance(problem)
    except PrometheeError as e:
        console.print(f"[red]✗ Invalid problem: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Problem is valid[/green] "
        f"({len(problem.criteria)} criteria, {len(problem.alternatives)} alternatives, "
        f"{len(problem.profiles)} profiles)"
    )


if __name__ == "__main__":
    app()
