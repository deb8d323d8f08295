"""Input table loading."""

from .csv_loader import (
    InputFiles,
    load_input_data,
    load_climate,
    load_components,
    load_coefficients,
    load_solar_geometry,
    load_bills,
)

__all__ = [
    "InputFiles",
    "load_input_data",
    "load_climate",
    "load_components",
    "load_coefficients",
    "load_solar_geometry",
    "load_bills",
]
