"""
Simulation Module - Annual gas and cooling usage.

Features:
- Heating/cooling decision rule per month
- Base gas load
"""

from .usage_simulator import AnnualUsageSimulator, AnnualUsage

__all__ = [
    'AnnualUsageSimulator',
    'AnnualUsage',
]
