"""Core models and configuration."""

from .config import ModelParameters, Settings, settings
from .models import (
    DIFFUSE_BUCKET,
    BillComparisonRecord,
    ComponentKind,
    EnvelopeComponent,
    InputDataSet,
    MonthlyClimateRecord,
    MonthlyUsageSnapshot,
    SolarGeometryParameter,
    UtilityBill,
    expand_solar_geometry,
)

__all__ = [
    "ModelParameters",
    "Settings",
    "settings",
    "DIFFUSE_BUCKET",
    "BillComparisonRecord",
    "ComponentKind",
    "EnvelopeComponent",
    "InputDataSet",
    "MonthlyClimateRecord",
    "MonthlyUsageSnapshot",
    "SolarGeometryParameter",
    "UtilityBill",
    "expand_solar_geometry",
]
