"""
Home Energy Model - one building scenario, simulated once at construction.

Owns an input data set and its parameters, runs the annual usage
simulation eagerly, and calendarizes the result onto the actual gas and
cooling-electricity bills. Scenarios are compared through their modelled
bills only.

Usage:
    base = HomeEnergyModel(inputs)
    vent = HomeEnergyModel(inputs, ventilation_factor=113.6, name="ventilation")

    print(base.accuracy().gas.total.usage_pct_diff)
    comparison = base.compare_to(vent, additional_cost=1000)
    print(comparison.payback.message())
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..analysis.energy_breakdown import HeatTransferBreakdown, breakdown_year
from ..analysis.thermal_balance import ThermalBalanceCalculator
from ..calibration.calendarizer import calendarize_bills
from ..calibration.comparison import BillComparison, compare_bills
from ..calibration.metrics import CalibrationMetrics
from ..core.config import ModelParameters
from ..core.models import InputDataSet, MonthlyUsageSnapshot, UtilityBill
from ..roi.calculator import PaybackResult, calculate_payback
from ..simulation.usage_simulator import AnnualUsageSimulator
from ..utils.logging_config import get_logger


@dataclass(frozen=True)
class ModelAccuracy:
    """Actual (series 1) vs modelled (series 2) bills for gas and cooling."""
    gas: BillComparison
    cooling: BillComparison
    gas_metrics: CalibrationMetrics
    cooling_metrics: CalibrationMetrics


@dataclass(frozen=True)
class ScenarioComparison:
    """Base (series 1) vs improved (series 2) modelled bills, with payback."""
    base_name: str
    improved_name: str
    gas: BillComparison
    cooling: BillComparison
    payback: PaybackResult


class HomeEnergyModel:
    """
    Monthly energy model of one home scenario.

    Args:
        inputs: Complete input data set
        parameters: Heat balance constants (defaults if omitted)
        ventilation_factor: Override of the base ventilation factor for
            this scenario only
        name: Scenario label used in logs and reports
    """

    def __init__(
        self,
        inputs: InputDataSet,
        parameters: Optional[ModelParameters] = None,
        ventilation_factor: Optional[float] = None,
        name: str = "base",
    ):
        parameters = parameters or ModelParameters()
        if ventilation_factor is not None:
            parameters = replace(parameters, base_ventilation_factor=ventilation_factor)

        self.name = name
        self.log = get_logger(__name__, scenario=name)
        self.inputs = inputs
        self.parameters = parameters
        self.calculator = ThermalBalanceCalculator(inputs, parameters)

        usage = AnnualUsageSimulator(self.calculator, parameters).run()
        self.annual_usage = usage
        self.modelled_gas_bills: Tuple[UtilityBill, ...] = tuple(
            calendarize_bills(inputs.gas_bills, usage.gas)
        )
        self.modelled_cooling_bills: Tuple[UtilityBill, ...] = tuple(
            calendarize_bills(inputs.cooling_bills, usage.cooling)
        )

        self.log.info(
            f"Model built: gas {usage.total_gas_usage:,.0f} kWh/yr, "
            f"cooling {usage.total_cooling_usage:,.0f} kWh/yr"
        )

    @property
    def monthly_gas_usage(self) -> Tuple[MonthlyUsageSnapshot, ...]:
        return self.annual_usage.gas

    @property
    def monthly_cooling_usage(self) -> Tuple[MonthlyUsageSnapshot, ...]:
        return self.annual_usage.cooling

    def accuracy(self) -> ModelAccuracy:
        """Compare the modelled bills against the actual bills."""
        return ModelAccuracy(
            gas=compare_bills(self.inputs.gas_bills, self.modelled_gas_bills),
            cooling=compare_bills(self.inputs.cooling_bills, self.modelled_cooling_bills),
            gas_metrics=CalibrationMetrics.from_bills(self.inputs.gas_bills, self.modelled_gas_bills),
            cooling_metrics=CalibrationMetrics.from_bills(
                self.inputs.cooling_bills, self.modelled_cooling_bills
            ),
        )

    def compare_to(self, improved: "HomeEnergyModel", additional_cost: float) -> ScenarioComparison:
        """
        Compare this (base) model with an improved scenario.

        Args:
            improved: Model of the improved home
            additional_cost: Capital cost of the improvement

        Returns:
            ScenarioComparison with gas and cooling comparisons and payback

        Raises:
            BillSeriesMismatchError: If the scenarios were built on bill
                series of different lengths
        """
        gas = compare_bills(self.modelled_gas_bills, improved.modelled_gas_bills)
        cooling = compare_bills(self.modelled_cooling_bills, improved.modelled_cooling_bills)

        payback = calculate_payback(
            base_annual_cost=gas.total.cost1 + cooling.total.cost1,
            improved_annual_cost=gas.total.cost2 + cooling.total.cost2,
            additional_cost=additional_cost,
        )
        improved.log.info(payback.message())

        return ScenarioComparison(
            base_name=self.name,
            improved_name=improved.name,
            gas=gas,
            cooling=cooling,
            payback=payback,
        )

    def heat_transfer_breakdown(self) -> List[HeatTransferBreakdown]:
        """Per-month conduction/ventilation/solar breakdown for reporting."""
        return breakdown_year(self.calculator)
