"""
Heat Transfer Breakdown by mechanism.

Splits each month's heat transfer into conduction, ventilation and solar
shares for reporting. Months with a net temperature-driven loss are
reported as heat-loss months (conduction + ventilation); the rest as
heat-gain months (conduction + ventilation + solar).

Each term is recomputed on its own here; none of these figures feed back
into the usage simulation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .thermal_balance import ThermalBalanceCalculator


class TransferRegime(Enum):
    """Whether a month is dominated by heat loss or heat gain."""
    HEAT_LOSS = "heat_loss"
    HEAT_GAIN = "heat_gain"


@dataclass(frozen=True)
class HeatTransferBreakdown:
    """
    Magnitudes of each heat transfer mechanism for one month (kWh).

    solar_kwh is only counted towards the total for heat-gain months.
    """
    month: int
    regime: TransferRegime
    conduction_kwh: float
    ventilation_kwh: float
    solar_kwh: float

    @property
    def total_kwh(self) -> float:
        total = self.conduction_kwh + self.ventilation_kwh
        if self.regime is TransferRegime.HEAT_GAIN:
            total += self.solar_kwh
        return total

    def _share(self, value: float) -> Optional[float]:
        total = self.total_kwh
        return value / total * 100 if total > 0 else None

    @property
    def conduction_pct(self) -> Optional[float]:
        return self._share(self.conduction_kwh)

    @property
    def ventilation_pct(self) -> Optional[float]:
        return self._share(self.ventilation_kwh)

    @property
    def solar_pct(self) -> Optional[float]:
        if self.regime is TransferRegime.HEAT_LOSS:
            return None
        return self._share(self.solar_kwh)


def breakdown_month(calculator: ThermalBalanceCalculator, month: int) -> HeatTransferBreakdown:
    """Breakdown of heat transfer mechanisms for one month."""
    transfer = calculator.temperature_driven_transfer(month)
    regime = TransferRegime.HEAT_LOSS if transfer < 0 else TransferRegime.HEAT_GAIN

    return HeatTransferBreakdown(
        month=month,
        regime=regime,
        conduction_kwh=abs(calculator.conduction_transfer(month)),
        ventilation_kwh=abs(calculator.ventilation_transfer(month)),
        solar_kwh=calculator.solar_heat_gain(month),
    )


def breakdown_year(calculator: ThermalBalanceCalculator) -> List[HeatTransferBreakdown]:
    """Breakdown for all twelve months."""
    return [breakdown_month(calculator, month) for month in range(1, 13)]
