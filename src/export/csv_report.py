"""
CSV report exporter.

Turns model output into ordered rows (one explicit builder per record
type) and writes the report tables:
- modelled monthly usage (gas or cooling electricity)
- heat transfer breakdown (heat-loss months, then heat-gain months)
- model accuracy (actual vs modelled, gas and cooling)
- scenario comparison (base vs improved, gas and cooling, payback)
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..analysis.energy_breakdown import HeatTransferBreakdown, TransferRegime
from ..calibration.comparison import BillComparison
from ..core.models import BillComparisonRecord, MonthlyUsageSnapshot, UtilityBill
from ..orchestrator.home_energy_model import HomeEnergyModel, ModelAccuracy, ScenarioComparison
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Row = Dict[str, object]


# =============================================================================
# ROW BUILDERS
# =============================================================================


def _optional(value: Optional[float]) -> object:
    return "" if value is None else value


def snapshot_row(snapshot: MonthlyUsageSnapshot, usage_label: str = "Usage (kWh)") -> Row:
    return {
        "Month": snapshot.month,
        "Heat Loss (kWh)": snapshot.heat_loss,
        "Heat Gain (kWh)": snapshot.heat_gain,
        usage_label: snapshot.usage,
    }


def bill_row(bill: UtilityBill) -> Row:
    return {
        "Start Month": bill.start_month,
        "End Month": bill.end_month,
        "Usage (kWh)": bill.usage,
        "Cost ($USD)": bill.cost,
        "Rate ($USD/kWh)": bill.rate,
    }


def comparison_row(
    record: BillComparisonRecord,
    labels: Sequence[str] = ("Usage 1 (kWh)", "Usage 2 (kWh)", "Cost 1 ($USD)",
                             "Cost 2 ($USD)", "Usage Difference (%)", "Cost Difference (%)"),
) -> Row:
    """
    Row for a comparison record. The totals record is labelled "Total"
    in the start-month column and has no end month.
    """
    usage1, usage2, cost1, cost2, usage_pct, cost_pct = labels
    return {
        "Billing Start Month": "Total" if record.is_total else record.start_month,
        "Billing End Month": "" if record.is_total else record.end_month,
        usage1: record.usage1,
        usage2: record.usage2,
        cost1: record.cost1,
        cost2: record.cost2,
        usage_pct: _optional(record.usage_pct_diff),
        cost_pct: _optional(record.cost_pct_diff),
    }


def breakdown_row(breakdown: HeatTransferBreakdown) -> Row:
    row: Row = {
        "Month": breakdown.month,
        "Conduction (%)": _optional(breakdown.conduction_pct),
        "Ventilation (%)": _optional(breakdown.ventilation_pct),
    }
    if breakdown.regime is TransferRegime.HEAT_GAIN:
        row["Solar Heat Gain (%)"] = _optional(breakdown.solar_pct)
        row["Heat Gain (kWh)"] = breakdown.total_kwh
    else:
        row["Heat Loss (kWh)"] = breakdown.total_kwh
    return row


# =============================================================================
# WRITERS
# =============================================================================


def _write_sections(path: Path, sections: List[List[Row]], footer: Optional[str] = None) -> Path:
    """Write one or more row tables separated by blank lines."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        for index, rows in enumerate(sections):
            if index > 0:
                writer.writerow([])
            if not rows:
                continue
            writer.writerow(list(rows[0].keys()))
            for row in rows:
                writer.writerow(list(row.values()))
        if footer:
            writer.writerow([])
            writer.writerow([footer])

    logger.info(f"Wrote {path}")
    return path


def _accuracy_labels(energy: str) -> tuple:
    return (
        f"Actual {energy} Usage (kWh)", f"Modelled {energy} Usage (kWh)",
        "Actual Cost ($USD)", "Modelled Cost ($USD)",
        "Usage Error (%)", "Cost Error (%)",
    )


def _comparison_labels(energy: str) -> tuple:
    return (
        f"Base {energy} Usage (kWh)", f"New {energy} Usage (kWh)",
        "Base Cost ($USD)", "New Cost ($USD)",
        "Usage Reduction (%)", "Cost Reduction (%)",
    )


def _comparison_rows(comparison: BillComparison, labels: Sequence[str]) -> List[Row]:
    return [comparison_row(record, labels) for record in comparison.rows()]


def write_modelled_usage(model: HomeEnergyModel, energy: str, path: Path) -> Path:
    """
    Write modelled monthly usage.

    Args:
        model: Built home energy model
        energy: "gas" or "cooling"
        path: Output CSV path
    """
    if energy == "gas":
        label, snapshots = "Gas Usage (kWh)", model.monthly_gas_usage
    elif energy == "cooling":
        label, snapshots = "Cooling Electricity Usage (kWh)", model.monthly_cooling_usage
    else:
        raise ValueError(f"Unknown energy type: {energy!r} (expected 'gas' or 'cooling')")

    return _write_sections(path, [[snapshot_row(s, label) for s in snapshots]])


def write_modelled_bills(bills: Sequence[UtilityBill], path: Path) -> Path:
    """Write a modelled bill series."""
    return _write_sections(path, [[bill_row(b) for b in bills]])


def write_heat_transfer_breakdown(breakdown: Sequence[HeatTransferBreakdown], path: Path) -> Path:
    """Write heat-loss months then heat-gain months as two tables."""
    loss = [breakdown_row(b) for b in breakdown if b.regime is TransferRegime.HEAT_LOSS]
    gain = [breakdown_row(b) for b in breakdown if b.regime is TransferRegime.HEAT_GAIN]
    return _write_sections(path, [loss, gain])


def write_model_accuracy(accuracy: ModelAccuracy, path: Path) -> Path:
    """Write actual-vs-modelled comparison tables for gas and cooling."""
    return _write_sections(path, [
        _comparison_rows(accuracy.gas, _accuracy_labels("Gas")),
        _comparison_rows(accuracy.cooling, _accuracy_labels("Cooling Electricity")),
    ])


def write_scenario_comparison(comparison: ScenarioComparison, path: Path) -> Path:
    """Write base-vs-improved tables followed by the payback statement."""
    return _write_sections(
        path,
        [
            _comparison_rows(comparison.gas, _comparison_labels("Gas")),
            _comparison_rows(comparison.cooling, _comparison_labels("Cooling Electricity")),
        ],
        footer=comparison.payback.message(),
    )
