"""
Payback Calculator - simple payback for a home improvement.

Yearly savings come from the totals of the base and improved scenario
bill comparisons:

    savings = (base gas cost + base cooling cost)
              - (improved gas cost + improved cooling cost)
    payback = additional cost / savings            (only if savings > 0)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PaybackResult:
    """Simple payback of an improvement over a base scenario."""
    additional_cost: float
    base_annual_cost: float
    improved_annual_cost: float
    yearly_savings: float
    payback_years: Optional[float]  # None if savings <= 0

    @property
    def is_possible(self) -> bool:
        return self.payback_years is not None

    def message(self) -> str:
        """Human-readable payback statement."""
        if not self.is_possible:
            return "Payback is not possible since supposed improved home is as or more costly!"
        return (
            f"Payback period for ${self.additional_cost:,.2f} investment with yearly savings "
            f"of ${self.yearly_savings:,.2f} is {self.payback_years:.2f} years."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "additional_cost": self.additional_cost,
            "base_annual_cost": self.base_annual_cost,
            "improved_annual_cost": self.improved_annual_cost,
            "yearly_savings": self.yearly_savings,
            "payback_years": self.payback_years,
            "payback_possible": self.is_possible,
        }


def calculate_payback(
    base_annual_cost: float,
    improved_annual_cost: float,
    additional_cost: float,
) -> PaybackResult:
    """
    Calculate simple payback.

    Args:
        base_annual_cost: Total yearly energy cost before the improvement
        improved_annual_cost: Total yearly energy cost after the improvement
        additional_cost: Capital cost of the improvement

    Returns:
        PaybackResult; payback_years is None when savings are not positive
    """
    yearly_savings = base_annual_cost - improved_annual_cost

    if yearly_savings > 0:
        payback = additional_cost / yearly_savings
    else:
        payback = None

    return PaybackResult(
        additional_cost=additional_cost,
        base_annual_cost=base_annual_cost,
        improved_annual_cost=improved_annual_cost,
        yearly_savings=yearly_savings,
        payback_years=payback,
    )
