"""
Pytest configuration and fixtures for Home Energy Model tests.

Provides reusable test fixtures for:
- Climate records and envelope components
- Reduced single-wall input data set
- Full sample home (examples/sample_home)
- Bill series
"""

import pytest
from pathlib import Path
import tempfile
import shutil

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import ModelParameters
from src.core.models import (
    ComponentKind,
    EnvelopeComponent,
    InputDataSet,
    MonthlyClimateRecord,
    SolarGeometryParameter,
    UtilityBill,
)
from src.ingest.csv_loader import load_input_data


DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# Mild climate: cold winters, hot summers
MONTHLY_TEMPS = [-5.0, -2.0, 4.0, 10.0, 16.0, 22.0, 27.0, 26.0, 20.0, 12.0, 5.0, -1.0]


# =============================================================================
# PATH FIXTURES
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_home_dir(project_root) -> Path:
    """Sample home input tables."""
    return project_root / "examples" / "sample_home"


@pytest.fixture
def temp_dir():
    """Temporary directory for test outputs, cleaned up after test."""
    tmp = tempfile.mkdtemp(prefix="hem_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# =============================================================================
# INPUT FIXTURES
# =============================================================================

@pytest.fixture
def parameters() -> ModelParameters:
    """Default heat balance constants."""
    return ModelParameters()


@pytest.fixture
def climate() -> list:
    """Twelve climate records with constant daylight and radiation."""
    return [
        MonthlyClimateRecord(
            month=m,
            num_days=DAYS_IN_MONTH[m - 1],
            avg_temp_c=MONTHLY_TEMPS[m - 1],
            avg_daylight_hours=12,
            avg_beam_flux=500.0,
            avg_diffuse_flux=100.0,
        )
        for m in range(1, 13)
    ]


@pytest.fixture
def wall() -> EnvelopeComponent:
    """Single opaque wall, UA = 30 W/K."""
    return EnvelopeComponent(
        name="Wall", kind=ComponentKind.OPAQUE, orientation="S", area=100.0, transmittance=0.3
    )


@pytest.fixture
def south_window() -> EnvelopeComponent:
    """South-facing glazing, 10 m²."""
    return EnvelopeComponent(
        name="South Window", kind=ComponentKind.GLAZING, orientation="S", area=10.0, transmittance=2.8
    )


@pytest.fixture
def shgc() -> dict:
    """SHGC table with diffuse bucket."""
    return {-1: 0.5, 0: 0.6, 30: 0.55, 60: 0.4}


@pytest.fixture
def south_geometry() -> dict:
    """South orientation geometry for every month (30°, 60% exposure)."""
    parameter = SolarGeometryParameter(incidence_angle=30, exposure_fraction=0.6)
    return {m: {"S": parameter} for m in range(1, 13)}


@pytest.fixture
def two_month_bills() -> list:
    """Eleven consecutive two-month bills at a flat rate."""
    return [
        UtilityBill(start_month=m, end_month=m + 1, usage=1000.0, cost=100.0, rate=0.10)
        for m in range(1, 12)
    ]


@pytest.fixture
def wall_only_inputs(climate, wall, shgc, two_month_bills) -> InputDataSet:
    """Opaque wall only: no solar gain."""
    return InputDataSet(
        climate=climate,
        components=[wall],
        shgc=shgc,
        solar_geometry={},
        gas_bills=two_month_bills,
        cooling_bills=two_month_bills,
    )


@pytest.fixture
def glazed_inputs(climate, wall, south_window, shgc, south_geometry, two_month_bills) -> InputDataSet:
    """Wall plus south window."""
    return InputDataSet(
        climate=climate,
        components=[wall, south_window],
        shgc=shgc,
        solar_geometry=south_geometry,
        gas_bills=two_month_bills,
        cooling_bills=two_month_bills,
    )


@pytest.fixture
def no_vent_parameters() -> ModelParameters:
    """Parameters with ventilation switched off."""
    return ModelParameters(base_ventilation_factor=0.0)


@pytest.fixture
def sample_inputs(sample_home_dir) -> InputDataSet:
    """Input data set loaded from the sample home tables."""
    return load_input_data(sample_home_dir)
