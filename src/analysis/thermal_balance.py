"""
Monthly thermal balance of the building envelope.

Uses simplified steady-state calculations for one calendar month:

Temperature-driven transfer (conduction + ventilation):
    K = Σ(U×A) + K_vent × |T_in - T_out| / ΔT_ref
    E = K × (T_out - T_in) / 1000 × 24 × days          (kWh)

    Negative E is a net heat loss, positive E a net heat gain.

Solar heat gain through glazing:
    q_beam    = E_beam × cos(θ) × SHGC(θ)
    q_diffuse = E_diffuse × SHGC(diffuse)
    E = Σ (q_beam × exposure + q_diffuse) / 1000 × A × daylight_h × days
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.config import ModelParameters
from ..core.models import DIFFUSE_BUCKET, InputDataSet
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

W_TO_KW = 0.001
HOURS_PER_DAY = 24


class ThermalBalanceCalculator:
    """
    Heat transfer and solar gain for single months of an input data set.

    Usage:
        calculator = ThermalBalanceCalculator(inputs, ModelParameters())
        transfer = calculator.temperature_driven_transfer(1)   # kWh, signed
        solar = calculator.solar_heat_gain(1)                  # kWh, >= 0
    """

    def __init__(self, inputs: InputDataSet, parameters: Optional[ModelParameters] = None):
        self.inputs = inputs
        self.parameters = parameters or ModelParameters()
        self.conductance = sum(c.conductance for c in inputs.components)

    def ventilation_conductance(self, month: int) -> float:
        """
        Ventilation factor de-rated by how extreme the month is.

        Scales linearly with the indoor/outdoor temperature difference
        relative to the reference difference.
        """
        record = self.inputs.climate_record(month)
        delta_t = abs(self.parameters.indoor_temp_c - record.avg_temp_c)
        return (
            self.parameters.base_ventilation_factor
            * delta_t
            / self.parameters.ventilation_reference_temp_diff
        )

    def _transfer(self, month: int, conductance: float) -> float:
        record = self.inputs.climate_record(month)
        rate_kw = conductance * (record.avg_temp_c - self.parameters.indoor_temp_c) * W_TO_KW
        return rate_kw * HOURS_PER_DAY * record.num_days

    def temperature_driven_transfer(self, month: int) -> float:
        """
        Conduction plus ventilation heat transfer for a month (kWh).

        Positive: heat gain. Negative: heat loss.
        """
        return self._transfer(month, self.conductance + self.ventilation_conductance(month))

    def conduction_transfer(self, month: int) -> float:
        """Conduction-only share of the temperature-driven transfer (kWh, signed)."""
        return self._transfer(month, self.conductance)

    def ventilation_transfer(self, month: int) -> float:
        """Ventilation-only share of the temperature-driven transfer (kWh, signed)."""
        return self._transfer(month, self.ventilation_conductance(month))

    def solar_heat_gain(self, month: int) -> float:
        """
        Solar heat gain through all glazing for a month (kWh).

        Raises:
            MissingLookupError: If a glazing orientation has no geometry entry
                for the month, or an angle has no coefficient
        """
        record = self.inputs.climate_record(month)
        diffuse_shgc = None
        gain = 0.0

        for component in self.inputs.glazing:
            geometry = self.inputs.geometry(month, component.orientation)
            angle = geometry.incidence_angle

            beam_flux = (
                record.avg_beam_flux
                * math.cos(math.radians(angle))
                * self.inputs.coefficient(angle, month=month)
            )
            if diffuse_shgc is None:
                diffuse_shgc = self.inputs.coefficient(DIFFUSE_BUCKET, month=month)
            diffuse_flux = record.avg_diffuse_flux * diffuse_shgc

            gain += (
                (beam_flux * geometry.exposure_fraction + diffuse_flux)
                * W_TO_KW
                * component.area
                * record.avg_daylight_hours
                * record.num_days
            )

        logger.debug(f"Solar heat gain {gain:.1f} kWh", extra={"month": month})
        return gain
