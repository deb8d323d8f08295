"""
Configuration management for the Home Energy Model.
"""

from dataclasses import dataclass
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class ModelParameters:
    """
    Fixed constants of the monthly heat balance.

    Passed explicitly into the thermal balance calculator and usage
    simulator; a scenario with a different ventilation factor gets its own
    instance via ``dataclasses.replace``.
    """
    indoor_temp_c: float = 21.1
    base_gas_usage_kwh: float = 732.503          # ~25 therm/month (water heating, cooking)
    furnace_efficiency: float = 0.96
    base_ventilation_factor: float = 142.0       # W/K at the reference temperature difference
    ventilation_reference_temp_diff: float = 21.1
    cooling_cop: float = 4.27


_DEFAULTS = ModelParameters()


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"))

    log_level: str = Field(default="INFO", description="Root log level")

    # Heat balance constants, defaulting to ModelParameters
    indoor_temp_c: float = Field(
        default=_DEFAULTS.indoor_temp_c, description="Indoor reference temperature (°C)"
    )
    base_gas_usage_kwh: float = Field(
        default=_DEFAULTS.base_gas_usage_kwh, description="Non-heating gas usage per month (kWh)"
    )
    furnace_efficiency: float = Field(
        default=_DEFAULTS.furnace_efficiency, gt=0, le=1, description="Heating system efficiency"
    )
    base_ventilation_factor: float = Field(
        default=_DEFAULTS.base_ventilation_factor, ge=0, description="Ventilation conductance (W/K)"
    )
    ventilation_reference_temp_diff: float = Field(
        default=_DEFAULTS.ventilation_reference_temp_diff,
        gt=0,
        description="Temperature difference at which the ventilation factor applies (K)",
    )
    cooling_cop: float = Field(
        default=_DEFAULTS.cooling_cop, gt=0, description="Cooling coefficient of performance"
    )

    def model_parameters(self) -> ModelParameters:
        """Build the immutable parameter set consumed by the core."""
        return ModelParameters(
            indoor_temp_c=self.indoor_temp_c,
            base_gas_usage_kwh=self.base_gas_usage_kwh,
            furnace_efficiency=self.furnace_efficiency,
            base_ventilation_factor=self.base_ventilation_factor,
            ventilation_reference_temp_diff=self.ventilation_reference_temp_diff,
            cooling_cop=self.cooling_cop,
        )


# Global settings instance
settings = Settings()
