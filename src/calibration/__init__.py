"""
Calibration Module - Compare the model with utility bills.

Key components:
- calendarize_bills: Map monthly usage onto billing periods
- compare_bills: Positional bill comparison with totals record
- CalibrationMetrics: ASHRAE Guideline 14 NMBE / CVRMSE

Usage:
    from src.calibration import calendarize_bills, compare_bills

    modelled = calendarize_bills(actual_bills, usage.gas)
    comparison = compare_bills(actual_bills, modelled)
    print(f"Total error: {comparison.total.usage_pct_diff:.1f}%")
"""

from .calendarizer import calendarize_bills
from .comparison import BillComparison, compare_bills, percentage_difference
from .metrics import CalibrationMetrics

__all__ = [
    "calendarize_bills",
    "BillComparison",
    "compare_bills",
    "percentage_difference",
    "CalibrationMetrics",
]
