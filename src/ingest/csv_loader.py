"""
CSV loader for the model's input tables.

Parses the headered CSV files into validated Pydantic rows and then into
the core value types. Every defect (unparseable number, missing column,
out-of-range month) is fatal and reported with file name and line number.

Expected files in a data directory (names overridable per scenario):
    climate.csv       month,month_name,num_days,avg_temp_c,avg_daylight_hours,avg_beam_flux,avg_diffuse_flux
    components.csv    name,type,orientation,area,transmittance
    shgc.csv          angle,coefficient            (angle -1 = diffuse)
    geometry.csv      months,orientation,angle,exposure_percent
    gas_bills.csv     start_month,end_month,usage,cost,rate
    cooling_bills.csv start_month,end_month,usage,cost,rate
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from ..core.models import (
    ComponentKind,
    EnvelopeComponent,
    InputDataSet,
    MonthlyClimateRecord,
    SolarGeometryParameter,
    UtilityBill,
    expand_solar_geometry,
)
from ..utils.logging_config import get_logger
from ..utils.validation import ValidationError, validate_month

logger = get_logger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)


# =============================================================================
# ROW SCHEMAS
# =============================================================================


class ClimateRow(BaseModel):
    month: int
    month_name: str = ""
    num_days: int = Field(ge=28, le=31)
    avg_temp_c: float
    avg_daylight_hours: float = Field(ge=0, le=24)
    avg_beam_flux: float = Field(ge=0)
    avg_diffuse_flux: float = Field(ge=0)

    @field_validator("month")
    @classmethod
    def _month_in_range(cls, v: int) -> int:
        return validate_month(v)


class ComponentRow(BaseModel):
    name: str
    type: str
    orientation: str
    area: float = Field(ge=0)
    transmittance: float = Field(ge=0)

    @field_validator("type")
    @classmethod
    def _known_type_code(cls, v: str) -> str:
        return ComponentKind.from_code(v).value


class CoefficientRow(BaseModel):
    angle: int = Field(ge=-1, le=90)
    coefficient: float = Field(ge=0)


class GeometryRow(BaseModel):
    months: List[int]
    orientation: str
    angle: int = Field(ge=0, le=90)
    exposure_percent: float = Field(ge=0, le=100)

    @field_validator("months", mode="before")
    @classmethod
    def _split_months(cls, v):
        if isinstance(v, str):
            v = [part for part in v.split(",") if part.strip()]
        return [validate_month(m) for m in v]


class BillRow(BaseModel):
    start_month: int
    end_month: int
    usage: float = Field(ge=0)
    cost: float = Field(ge=0)
    rate: float = Field(ge=0)

    @field_validator("start_month", "end_month")
    @classmethod
    def _month_in_range(cls, v: int) -> int:
        return validate_month(v)


# =============================================================================
# FILE READING
# =============================================================================


def _read_rows(path: Path, schema: Type[RowT]) -> Iterator[Tuple[int, RowT]]:
    """Yield (line number, validated row) for each data line of a CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Input table not found: {path}")

    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        missing = set(schema.model_fields) - set(reader.fieldnames or [])
        required = {name for name, info in schema.model_fields.items() if info.is_required()}
        if missing & required:
            raise ValidationError(
                f"{path.name}: missing columns {sorted(missing & required)}",
                field=path.name,
            )

        for row in reader:
            line = reader.line_num
            if not any((value or "").strip() for value in row.values()):
                continue
            data = {k.strip(): (v or "").strip() for k, v in row.items() if k is not None}
            try:
                yield line, schema.model_validate(data)
            except (PydanticValidationError, ValidationError) as e:
                raise ValidationError(f"{path.name} line {line}: {e}", field=path.name) from e


def load_climate(path: Path) -> List[MonthlyClimateRecord]:
    """Load monthly climate records; every month 1-12 must appear exactly once."""
    records: Dict[int, MonthlyClimateRecord] = {}
    for line, row in _read_rows(path, ClimateRow):
        if row.month in records:
            raise ValidationError(f"{path.name} line {line}: duplicate month {row.month}", field="month")
        records[row.month] = MonthlyClimateRecord(
            month=row.month,
            num_days=row.num_days,
            avg_temp_c=row.avg_temp_c,
            avg_daylight_hours=row.avg_daylight_hours,
            avg_beam_flux=row.avg_beam_flux,
            avg_diffuse_flux=row.avg_diffuse_flux,
        )

    missing = [m for m in range(1, 13) if m not in records]
    if missing:
        raise ValidationError(f"{path.name}: no climate data for months {missing}", field="month")
    return [records[m] for m in range(1, 13)]


def load_components(path: Path) -> List[EnvelopeComponent]:
    """Load envelope components."""
    return [
        EnvelopeComponent(
            name=row.name,
            kind=ComponentKind(row.type),
            orientation=row.orientation,
            area=row.area,
            transmittance=row.transmittance,
        )
        for _, row in _read_rows(path, ComponentRow)
    ]


def load_coefficients(path: Path) -> Dict[int, float]:
    """Load the SHGC table keyed by incidence angle (-1 = diffuse)."""
    table: Dict[int, float] = {}
    for line, row in _read_rows(path, CoefficientRow):
        if row.angle in table:
            raise ValidationError(f"{path.name} line {line}: duplicate angle {row.angle}", field="angle")
        table[row.angle] = row.coefficient
    return table


def load_solar_geometry(path: Path) -> Dict[int, Dict[str, SolarGeometryParameter]]:
    """Load and expand the compact months-list geometry table."""
    rows = [
        (
            row.months,
            row.orientation,
            SolarGeometryParameter(
                incidence_angle=row.angle,
                exposure_fraction=row.exposure_percent / 100,
            ),
        )
        for _, row in _read_rows(path, GeometryRow)
    ]
    try:
        return expand_solar_geometry(rows)
    except ValidationError as e:
        raise ValidationError(f"{path.name}: {e}", field=e.field) from e


def load_bills(path: Path) -> List[UtilityBill]:
    """Load bills in file order (the order defines pairing for comparison)."""
    return [
        UtilityBill(
            start_month=row.start_month,
            end_month=row.end_month,
            usage=row.usage,
            cost=row.cost,
            rate=row.rate,
        )
        for _, row in _read_rows(path, BillRow)
    ]


@dataclass(frozen=True)
class InputFiles:
    """File names of the six input tables inside a data directory."""
    climate: str = "climate.csv"
    components: str = "components.csv"
    shgc: str = "shgc.csv"
    geometry: str = "geometry.csv"
    gas_bills: str = "gas_bills.csv"
    cooling_bills: str = "cooling_bills.csv"


def load_input_data(data_dir: Path | str, files: InputFiles | None = None) -> InputDataSet:
    """
    Load a complete input data set from a directory.

    Args:
        data_dir: Directory holding the CSV tables
        files: File name overrides (e.g. an improved components table)

    Returns:
        InputDataSet ready for HomeEnergyModel
    """
    data_dir = Path(data_dir)
    files = files or InputFiles()

    inputs = InputDataSet(
        climate=load_climate(data_dir / files.climate),
        components=load_components(data_dir / files.components),
        shgc=load_coefficients(data_dir / files.shgc),
        solar_geometry=load_solar_geometry(data_dir / files.geometry),
        gas_bills=load_bills(data_dir / files.gas_bills),
        cooling_bills=load_bills(data_dir / files.cooling_bills),
    )

    logger.info(
        f"Loaded {len(inputs.components)} components, {len(inputs.gas_bills)} gas bills, "
        f"{len(inputs.cooling_bills)} cooling bills from {data_dir}"
    )
    return inputs
