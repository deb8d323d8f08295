"""
Annual Usage Simulator - monthly gas and cooling electricity from the heat balance.

For each calendar month:
- heat loss = max(0, -temperature-driven transfer)
- heat gain = solar gain + max(0, temperature-driven transfer)
- net loss is met by the furnace: gas = base + (loss - gain) / efficiency
- otherwise the AC removes the surplus: cooling = (gain - loss) / COP

The base gas load (water heating, cooking) is added every month.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..analysis.thermal_balance import ThermalBalanceCalculator
from ..core.config import ModelParameters
from ..core.models import MonthlyUsageSnapshot
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

MONTHS = range(1, 13)


@dataclass(frozen=True)
class AnnualUsage:
    """Twelve monthly snapshots each for gas and cooling electricity."""
    gas: Tuple[MonthlyUsageSnapshot, ...]
    cooling: Tuple[MonthlyUsageSnapshot, ...]

    @property
    def total_gas_usage(self) -> float:
        return sum(s.usage for s in self.gas)

    @property
    def total_cooling_usage(self) -> float:
        return sum(s.usage for s in self.cooling)


class AnnualUsageSimulator:
    """
    Run the heating/cooling decision rule over all twelve months.

    Usage:
        simulator = AnnualUsageSimulator(calculator)
        usage = simulator.run()
        print(usage.gas[0].usage)
    """

    def __init__(
        self,
        calculator: ThermalBalanceCalculator,
        parameters: Optional[ModelParameters] = None,
    ):
        self.calculator = calculator
        self.parameters = parameters or calculator.parameters

    def simulate_month(self, month: int) -> Tuple[MonthlyUsageSnapshot, MonthlyUsageSnapshot]:
        """Gas and cooling snapshots for one month."""
        transfer = self.calculator.temperature_driven_transfer(month)
        solar_gain = self.calculator.solar_heat_gain(month)

        heat_loss = max(0.0, -transfer)
        heat_gain = solar_gain + max(0.0, transfer)

        gas_usage = self.parameters.base_gas_usage_kwh
        cooling_usage = 0.0

        if heat_loss > heat_gain:
            gas_usage += (heat_loss - heat_gain) / self.parameters.furnace_efficiency
        else:
            cooling_usage = (heat_gain - heat_loss) / self.parameters.cooling_cop

        return (
            MonthlyUsageSnapshot(month, heat_loss, heat_gain, gas_usage),
            MonthlyUsageSnapshot(month, heat_loss, heat_gain, cooling_usage),
        )

    def run(self) -> AnnualUsage:
        """Simulate every calendar month."""
        gas, cooling = zip(*(self.simulate_month(month) for month in MONTHS))
        usage = AnnualUsage(gas=tuple(gas), cooling=tuple(cooling))
        logger.debug(
            f"Annual usage: gas {usage.total_gas_usage:.0f} kWh, "
            f"cooling {usage.total_cooling_usage:.0f} kWh"
        )
        return usage
