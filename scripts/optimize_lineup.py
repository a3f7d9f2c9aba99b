#!/usr/bin/env python3
"""Softball Lineup Optimizer CLI

Builds a fielding schedule and batting order for one coed softball game using
simulated annealing, then prints the lineup card.

Usage:
    python scripts/optimize_lineup.py
    python scripts/optimize_lineup.py --roster roster.csv --innings 7 --game-type playoff
    python scripts/optimize_lineup.py --seed 42 --iterations 5000 --csv-output lineup.csv

Dependencies:
    - typer (install with: uv add typer)
    - rich (install with: uv add rich)
    - loguru (install with: uv add loguru)
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Add project root
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lineup_picker.config import LineupConfig, load_config  # noqa: E402
from lineup_picker.config.utils import compare_configs, export_config_to_json  # noqa: E402
from lineup_picker.domain.services import (  # noqa: E402
    LineupOptimizationService,
    RosterService,
)
from lineup_picker.domain.services.optimization import AnnealingResult, CostBreakdown  # noqa: E402
from lineup_picker.interfaces.display_utils import (  # noqa: E402
    OUT_CELL,
    build_lineup_dataframe,
    cost_breakdown_rows,
    lineup_to_csv,
)

app = typer.Typer(
    help="Softball Lineup Optimizer",
    add_completion=False,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def build_run_config(
    base: LineupConfig,
    innings: Optional[int],
    game_type: Optional[str],
    max_men: Optional[int],
    iterations: Optional[int],
    initial_temp: Optional[float],
    cooling_rate: Optional[float],
    seed: Optional[int],
    diversity: Optional[bool],
) -> LineupConfig:
    """Apply command line overrides on top of ``base``; raises ValidationError."""
    data = base.model_dump()
    overrides = {
        ("game", "innings"): innings,
        ("game", "game_type"): game_type,
        ("game", "max_men_on_field"): max_men,
        ("annealing", "iterations"): iterations,
        ("annealing", "initial_temperature"): initial_temp,
        ("annealing", "cooling_rate"): cooling_rate,
        ("annealing", "random_seed"): seed,
        ("cost", "diversity_penalty_enabled"): diversity,
    }
    for (section, field), value in overrides.items():
        if value is not None:
            data[section][field] = value
    return LineupConfig(**data)


def print_lineup_table(result: AnnealingResult) -> None:
    """Print the lineup card as a rich table."""
    df = build_lineup_dataframe(result.best_solution)

    table = Table(title=f"\n⚾ Lineup (cost {result.best_cost:.1f})")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    for column in df.columns:
        table.add_column(column, justify="left" if column == "Player" else "center")

    for order, row in df.iterrows():
        values = [str(order)] + [str(v) for v in row.tolist()]
        style = "dim" if OUT_CELL in values else None
        table.add_row(*values, style=style)

    console.print(table)


def print_cost_table(breakdown: CostBreakdown) -> None:
    table = Table(title="📊 Cost Breakdown")
    table.add_column("Term", style="magenta")
    table.add_column("Penalty", justify="right", style="green")
    for label, value in cost_breakdown_rows(breakdown):
        style = "bold cyan" if label == "Total" else None
        table.add_row(label, f"{value:.1f}", style=style)
    console.print(table)


@app.command()
def main(
    roster: Optional[Path] = typer.Option(
        None, "--roster", "-r", help="Roster CSV or JSON file (default: sample roster)"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="JSON configuration file"
    ),
    innings: Optional[int] = typer.Option(None, help="Innings to schedule"),
    game_type: Optional[str] = typer.Option(
        None, "--game-type", help="'regular' or 'playoff'"
    ),
    max_men: Optional[int] = typer.Option(
        None, "--max-men", help="Maximum men on the field per inning"
    ),
    iterations: Optional[int] = typer.Option(None, help="Simulated annealing iterations"),
    initial_temp: Optional[float] = typer.Option(
        None, "--initial-temp", help="Starting temperature"
    ),
    cooling_rate: Optional[float] = typer.Option(
        None, "--cooling-rate", help="Geometric cooling factor (0-1)"
    ),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible lineups"),
    diversity: bool = typer.Option(
        False,
        "--diversity",
        help="Penalise players fielding the same position repeatedly",
    ),
    csv_output: Optional[Path] = typer.Option(
        None, "--csv-output", help="Write the lineup card as CSV"
    ),
    export_config: Optional[Path] = typer.Option(
        None, "--export-config", help="Write the effective configuration as JSON"
    ),
    show_cost: bool = typer.Option(False, "--show-cost", help="Print the cost breakdown"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    configure_logging(verbose)

    base_config = load_config(config_file)
    try:
        run_config = build_run_config(
            base_config,
            innings,
            game_type,
            max_men,
            iterations,
            initial_temp,
            cooling_rate,
            seed,
            diversity or None,
        )
    except ValidationError as e:
        console.print(f"[bold red]❌ Invalid options:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2)

    for path, change in compare_configs(base_config, run_config).items():
        logger.debug(f"Override {path}: {change['config1']} -> {change['config2']}")

    if export_config:
        export_config_to_json(run_config, export_config)

    roster_service = RosterService()
    if roster is None:
        lineup_roster = roster_service.sample_roster()
    else:
        roster_result = roster_service.load_roster(roster)
        if roster_result.is_failure:
            summary, *problems = roster_result.error.describe()
            console.print(f"[bold red]❌ {escape(summary)}[/bold red]")
            for problem in problems:
                console.print(f"   {escape(problem)}")
            raise typer.Exit(code=1)
        lineup_roster = roster_result.value

    service = LineupOptimizationService(lineup_roster, run_config)
    result = service.optimize_lineup()

    print_lineup_table(result)
    if show_cost:
        print_cost_table(service.cost_breakdown(result.best_solution))

    if csv_output:
        csv_output.write_text(lineup_to_csv(result.best_solution))
        console.print(f"💾 Lineup saved to {csv_output}")


if __name__ == "__main__":
    app()
