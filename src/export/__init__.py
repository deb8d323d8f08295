"""Report export."""

from .csv_report import (
    snapshot_row,
    bill_row,
    comparison_row,
    breakdown_row,
    write_modelled_usage,
    write_modelled_bills,
    write_heat_transfer_breakdown,
    write_model_accuracy,
    write_scenario_comparison,
)

__all__ = [
    "snapshot_row",
    "bill_row",
    "comparison_row",
    "breakdown_row",
    "write_modelled_usage",
    "write_modelled_bills",
    "write_heat_transfer_breakdown",
    "write_model_accuracy",
    "write_scenario_comparison",
]
