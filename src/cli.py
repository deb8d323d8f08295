"""
Home Energy Model CLI.

Command-line interface for monthly usage modelling, model accuracy against
utility bills, and improvement payback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .calibration.comparison import BillComparison
from .core.config import settings
from .export.csv_report import (
    write_heat_transfer_breakdown,
    write_model_accuracy,
    write_modelled_bills,
    write_modelled_usage,
    write_scenario_comparison,
)
from .ingest.csv_loader import InputFiles, load_components, load_coefficients, load_input_data
from .orchestrator.home_energy_model import HomeEnergyModel
from .utils.logging_config import setup_logging
from .utils.validation import BillSeriesMismatchError, ValidationError

app = typer.Typer(
    name="hem",
    help="Home Energy Model - monthly gas and cooling usage from building physics",
    add_completion=False,
)
console = Console()


def _fmt(value: Optional[float], suffix: str = "") -> str:
    return "n/a" if value is None else f"{value:,.1f}{suffix}"


def _build_model(
    data_dir: Optional[Path],
    vent_factor: Optional[float] = None,
    name: str = "base",
    files: Optional[InputFiles] = None,
) -> HomeEnergyModel:
    setup_logging(settings.log_level)
    try:
        inputs = load_input_data(data_dir or settings.data_dir, files)
        return HomeEnergyModel(
            inputs,
            parameters=settings.model_parameters(),
            ventilation_factor=vent_factor,
            name=name,
        )
    except (ValidationError, FileNotFoundError) as e:
        console.print(f"[red]Invalid input:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _comparison_table(title: str, comparison: BillComparison, label1: str, label2: str) -> Table:
    table = Table(title=title)
    table.add_column("Period", style="cyan")
    table.add_column(f"{label1} (kWh)", justify="right")
    table.add_column(f"{label2} (kWh)", justify="right")
    table.add_column(f"{label1} ($)", justify="right")
    table.add_column(f"{label2} ($)", justify="right")
    table.add_column("Usage Δ", justify="right")
    table.add_column("Cost Δ", justify="right")

    for record in comparison.rows():
        period = "[bold]Total[/bold]" if record.is_total else f"{record.start_month}-{record.end_month}"
        table.add_row(
            period,
            _fmt(record.usage1),
            _fmt(record.usage2),
            _fmt(record.cost1),
            _fmt(record.cost2),
            _fmt(record.usage_pct_diff, "%"),
            _fmt(record.cost_pct_diff, "%"),
        )
    return table


@app.command()
def usage(
    data_dir: Optional[Path] = typer.Argument(
        None, help="Directory with the input CSV tables (default: HEM_DATA_DIR)"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Write CSV reports here"),
    vent_factor: Optional[float] = typer.Option(
        None, "--vent-factor", help="Override the base ventilation factor (W/K)"
    ),
):
    """
    Show modelled monthly gas and cooling electricity usage.
    """
    model = _build_model(data_dir, vent_factor)

    table = Table(title="Modelled Monthly Usage")
    table.add_column("Month", style="cyan")
    table.add_column("Heat Loss (kWh)", justify="right")
    table.add_column("Heat Gain (kWh)", justify="right")
    table.add_column("Gas (kWh)", justify="right")
    table.add_column("Cooling (kWh)", justify="right")

    for gas, cooling in zip(model.monthly_gas_usage, model.monthly_cooling_usage):
        table.add_row(
            str(gas.month),
            _fmt(gas.heat_loss),
            _fmt(gas.heat_gain),
            _fmt(gas.usage),
            _fmt(cooling.usage),
        )
    console.print(table)
    console.print(
        f"Annual gas: [bold]{model.annual_usage.total_gas_usage:,.0f} kWh[/bold]  "
        f"Annual cooling: [bold]{model.annual_usage.total_cooling_usage:,.0f} kWh[/bold]"
    )

    if output_dir:
        write_modelled_usage(model, "gas", output_dir / "modelled_gas_usage.csv")
        write_modelled_usage(model, "cooling", output_dir / "modelled_cooling_usage.csv")
        write_modelled_bills(model.modelled_gas_bills, output_dir / "modelled_gas_bills.csv")
        write_modelled_bills(model.modelled_cooling_bills, output_dir / "modelled_cooling_bills.csv")
        console.print(f"[green]Reports written to[/green] {output_dir}")


@app.command()
def breakdown(
    data_dir: Optional[Path] = typer.Argument(
        None, help="Directory with the input CSV tables (default: HEM_DATA_DIR)"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Write CSV report here"),
):
    """
    Show the conduction / ventilation / solar share of each month's heat transfer.
    """
    model = _build_model(data_dir)
    rows = model.heat_transfer_breakdown()

    table = Table(title="Heat Transfer Breakdown")
    table.add_column("Month", style="cyan")
    table.add_column("Regime")
    table.add_column("Conduction", justify="right")
    table.add_column("Ventilation", justify="right")
    table.add_column("Solar", justify="right")
    table.add_column("Total (kWh)", justify="right")

    for row in rows:
        table.add_row(
            str(row.month),
            row.regime.value.replace("_", " "),
            _fmt(row.conduction_pct, "%"),
            _fmt(row.ventilation_pct, "%"),
            _fmt(row.solar_pct, "%"),
            _fmt(row.total_kwh),
        )
    console.print(table)

    if output_dir:
        write_heat_transfer_breakdown(rows, output_dir / "heat_transfer_breakdown.csv")
        console.print(f"[green]Report written to[/green] {output_dir}")


@app.command()
def accuracy(
    data_dir: Optional[Path] = typer.Argument(
        None, help="Directory with the input CSV tables (default: HEM_DATA_DIR)"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Write CSV report here"),
):
    """
    Compare modelled bills with the actual utility bills.
    """
    model = _build_model(data_dir)
    result = model.accuracy()

    console.print(_comparison_table("Gas: Actual vs Modelled", result.gas, "Actual", "Modelled"))
    console.print(str(result.gas_metrics))
    console.print(_comparison_table(
        "Cooling Electricity: Actual vs Modelled", result.cooling, "Actual", "Modelled"
    ))
    console.print(str(result.cooling_metrics))

    if output_dir:
        write_model_accuracy(result, output_dir / "model_accuracy.csv")
        console.print(f"[green]Report written to[/green] {output_dir}")


@app.command()
def compare(
    data_dir: Optional[Path] = typer.Argument(
        None, help="Directory with the base input CSV tables (default: HEM_DATA_DIR)"
    ),
    cost: float = typer.Option(..., "--cost", "-c", help="Capital cost of the improvement ($)"),
    name: str = typer.Option("improved", "--name", "-n", help="Scenario name"),
    components: Optional[Path] = typer.Option(
        None, "--components", help="Improved envelope components CSV"
    ),
    shgc: Optional[Path] = typer.Option(None, "--shgc", help="Improved SHGC table CSV"),
    vent_factor: Optional[float] = typer.Option(
        None, "--vent-factor", help="Improved base ventilation factor (W/K)"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Write CSV report here"),
):
    """
    Compare the base home with an improved scenario and compute payback.
    """
    console.print(Panel.fit(
        f"[bold blue]Scenario comparison[/bold blue]\nbase vs {name}",
        border_style="blue"
    ))

    base = _build_model(data_dir)
    try:
        improved_inputs = base.inputs.with_overrides(
            components=load_components(components) if components else None,
            shgc=load_coefficients(shgc) if shgc else None,
        )
        improved = HomeEnergyModel(
            improved_inputs,
            parameters=settings.model_parameters(),
            ventilation_factor=vent_factor,
            name=name,
        )
        result = base.compare_to(improved, additional_cost=cost)
    except (ValidationError, BillSeriesMismatchError, FileNotFoundError) as e:
        console.print(f"[red]Comparison failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(_comparison_table("Gas: Base vs Improved", result.gas, "Base", "New"))
    console.print(_comparison_table(
        "Cooling Electricity: Base vs Improved", result.cooling, "Base", "New"
    ))

    style = "green" if result.payback.is_possible else "yellow"
    console.print(f"\n[{style}]{result.payback.message()}[/{style}]")

    if output_dir:
        write_scenario_comparison(result, output_dir / f"{name}_comparison.csv")
        console.print(f"[green]Report written to[/green] {output_dir}")


if __name__ == "__main__":
    app()
