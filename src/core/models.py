"""
Data models for the monthly home energy balance.

Covers the input tables (climate, envelope, solar heat gain coefficients,
solar geometry, utility bills) and the records produced by the model
(monthly usage snapshots, bill comparisons).

All types are immutable value objects; a model instance builds them once
and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..utils.validation import (
    MissingLookupError,
    ValidationError,
    validate_fraction,
    validate_non_negative,
)


# Coefficient table key reserved for the diffuse-radiation SHGC
DIFFUSE_BUCKET = -1


# =============================================================================
# ENUMS
# =============================================================================


class ComponentKind(str, Enum):
    """Envelope component kind. Only glazing participates in solar gain."""
    OPAQUE = "opaque"
    GLAZING = "glazing"

    @classmethod
    def from_code(cls, code: str) -> "ComponentKind":
        """
        Map a components table type code to a kind.

        W (wall), R (roof) and D (door) are opaque, G is glazing. Any other
        code is rejected rather than treated as opaque.
        """
        key = code.strip().upper()
        if key not in TYPE_CODES:
            raise ValidationError(
                f"Unknown component type code '{code}'",
                field="type",
                suggestions=[f"Use one of: {', '.join(TYPE_CODES)}"],
            )
        return cls(TYPE_CODES[key])


# Component type codes used in the components table
TYPE_CODES = {"W": "opaque", "R": "opaque", "D": "opaque", "G": "glazing"}


# =============================================================================
# INPUT TABLES
# =============================================================================


@dataclass(frozen=True)
class MonthlyClimateRecord:
    """Average weather and daylight for one calendar month."""
    month: int
    num_days: int
    avg_temp_c: float
    avg_daylight_hours: float
    avg_beam_flux: float      # W/m², direct normal
    avg_diffuse_flux: float   # W/m²


@dataclass(frozen=True)
class EnvelopeComponent:
    """A wall, roof, door or window section of the building envelope."""
    name: str
    kind: ComponentKind
    orientation: str
    area: float               # m²
    transmittance: float      # U-value, W/m²K

    def __post_init__(self):
        validate_non_negative(self.area, "area")
        validate_non_negative(self.transmittance, "transmittance")

    @property
    def is_glazing(self) -> bool:
        return self.kind is ComponentKind.GLAZING

    @property
    def conductance(self) -> float:
        """UA value (W/K)."""
        return self.transmittance * self.area


@dataclass(frozen=True)
class SolarGeometryParameter:
    """
    Effective beam incidence for a surface orientation in a given month.

    Attributes:
        incidence_angle: Average angle of incidence (degrees), a key into
            the SHGC table
        exposure_fraction: Fraction of daylight hours the surface sees
            direct beam radiation (0-1)
    """
    incidence_angle: int
    exposure_fraction: float

    def __post_init__(self):
        validate_fraction(self.exposure_fraction, "exposure_fraction")


@dataclass(frozen=True)
class UtilityBill:
    """
    A metered or modelled bill.

    The billing period runs from start_month to end_month inclusive within
    a single calendar year. The rate is an input of its own and is not
    re-derived from cost and usage.
    """
    start_month: int
    end_month: int
    usage: float              # kWh
    cost: float               # $
    rate: float               # $/kWh


# =============================================================================
# MODEL OUTPUT
# =============================================================================


@dataclass(frozen=True)
class MonthlyUsageSnapshot:
    """Heat balance and resulting energy usage for one month (all kWh)."""
    month: int
    heat_loss: float
    heat_gain: float
    usage: float


@dataclass(frozen=True)
class BillComparisonRecord:
    """
    Positional pairing of two bills.

    Percentage differences are (value1 - value2) / value1 × 100 and are
    None when they are not meaningful (zero usage on either side). The
    totals record has no period bounds.
    """
    start_month: Optional[int]
    end_month: Optional[int]
    usage1: float
    usage2: float
    cost1: float
    cost2: float
    usage_pct_diff: Optional[float] = None
    cost_pct_diff: Optional[float] = None

    @property
    def is_total(self) -> bool:
        return self.start_month is None and self.end_month is None

    @property
    def is_meaningful(self) -> bool:
        return self.usage_pct_diff is not None


# =============================================================================
# INPUT DATA SET
# =============================================================================


@dataclass(frozen=True)
class InputDataSet:
    """
    Complete, consistent input for one home energy model.

    Lookups raise MissingLookupError instead of returning a default, since
    a missing climate month, geometry entry or coefficient leaves the heat
    balance undefined. The coefficient and geometry tables are copied into
    read-only mappings, so later changes to the caller's dicts do not
    reach a built model.
    """
    climate: Tuple[MonthlyClimateRecord, ...]
    components: Tuple[EnvelopeComponent, ...]
    shgc: Mapping[int, float]
    solar_geometry: Mapping[int, Mapping[str, SolarGeometryParameter]]
    gas_bills: Tuple[UtilityBill, ...] = ()
    cooling_bills: Tuple[UtilityBill, ...] = ()
    _climate_by_month: Dict[int, MonthlyClimateRecord] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, "climate", tuple(self.climate))
        object.__setattr__(self, "components", tuple(self.components))
        object.__setattr__(self, "gas_bills", tuple(self.gas_bills))
        object.__setattr__(self, "cooling_bills", tuple(self.cooling_bills))
        # Read-only copies: scenarios derived via with_overrides share these
        object.__setattr__(self, "shgc", MappingProxyType(dict(self.shgc)))
        object.__setattr__(
            self,
            "solar_geometry",
            MappingProxyType({
                month: MappingProxyType(dict(by_orientation))
                for month, by_orientation in self.solar_geometry.items()
            }),
        )
        object.__setattr__(
            self, "_climate_by_month", {record.month: record for record in self.climate}
        )

    def climate_record(self, month: int) -> MonthlyClimateRecord:
        """Climate record for a 1-based month."""
        try:
            return self._climate_by_month[month]
        except KeyError:
            raise MissingLookupError(
                f"No climate record for month {month}",
                field="climate",
                month=month,
            ) from None

    def geometry(self, month: int, orientation: str) -> SolarGeometryParameter:
        """Solar geometry for a (month, orientation) pair."""
        try:
            return self.solar_geometry[month][orientation]
        except KeyError:
            raise MissingLookupError(
                f"No solar geometry parameter for month {month}, orientation '{orientation}'",
                field="solar_geometry",
                month=month,
                orientation=orientation,
            ) from None

    def coefficient(self, angle: int, month: Optional[int] = None) -> float:
        """SHGC for an incidence angle bucket (DIFFUSE_BUCKET for diffuse)."""
        try:
            return self.shgc[angle]
        except KeyError:
            label = "diffuse bucket" if angle == DIFFUSE_BUCKET else f"incidence angle {angle}°"
            raise MissingLookupError(
                f"No solar heat gain coefficient for {label}",
                field="shgc",
                month=month,
                angle=angle,
            ) from None

    @property
    def glazing(self) -> Tuple[EnvelopeComponent, ...]:
        return tuple(c for c in self.components if c.is_glazing)

    def with_overrides(
        self,
        components: Optional[Sequence[EnvelopeComponent]] = None,
        shgc: Optional[Mapping[int, float]] = None,
        solar_geometry: Optional[Mapping[int, Mapping[str, SolarGeometryParameter]]] = None,
    ) -> "InputDataSet":
        """
        New data set with some tables substituted.

        Used to build improved scenarios (new windows, more roof insulation)
        from a base data set without touching it.
        """
        return InputDataSet(
            climate=self.climate,
            components=tuple(components) if components is not None else self.components,
            shgc=shgc if shgc is not None else self.shgc,
            solar_geometry=solar_geometry if solar_geometry is not None else self.solar_geometry,
            gas_bills=self.gas_bills,
            cooling_bills=self.cooling_bills,
        )


def expand_solar_geometry(
    rows: Sequence[Tuple[Sequence[int], str, SolarGeometryParameter]],
) -> Dict[int, Dict[str, SolarGeometryParameter]]:
    """
    Expand compact (months, orientation, parameter) rows into a per-month lookup.

    Each row applies one parameter to every month in its list. A (month,
    orientation) pair listed twice is rejected so every pair resolves to
    exactly one entry.
    """
    table: Dict[int, Dict[str, SolarGeometryParameter]] = {}
    for months, orientation, parameter in rows:
        for month in months:
            by_orientation = table.setdefault(month, {})
            if orientation in by_orientation:
                raise ValidationError(
                    f"Duplicate solar geometry entry for month {month}, orientation '{orientation}'",
                    field="solar_geometry",
                )
            by_orientation[orientation] = parameter
    return table
