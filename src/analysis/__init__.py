"""
Analysis Module - Monthly heat balance of the building envelope.

Features:
- Conduction and ventilation heat transfer
- Solar heat gain through glazing
- Per-mechanism heat transfer breakdown
"""

from .thermal_balance import ThermalBalanceCalculator
from .energy_breakdown import (
    HeatTransferBreakdown,
    TransferRegime,
    breakdown_month,
    breakdown_year,
)

__all__ = [
    'ThermalBalanceCalculator',
    'HeatTransferBreakdown',
    'TransferRegime',
    'breakdown_month',
    'breakdown_year',
]
