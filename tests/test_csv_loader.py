"""
Tests for the CSV input loader.
"""

import pytest

from src.core.models import ComponentKind
from src.ingest.csv_loader import (
    InputFiles,
    load_bills,
    load_climate,
    load_coefficients,
    load_components,
    load_input_data,
    load_solar_geometry,
)
from src.utils.validation import ValidationError

CLIMATE_HEADER = "month,month_name,num_days,avg_temp_c,avg_daylight_hours,avg_beam_flux,avg_diffuse_flux"


def _write(path, *lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _climate_lines(months=range(1, 13)):
    return [f"{m},M{m},30,{m}.0,12,500,100" for m in months]


class TestLoadClimate:

    def test_loads_twelve_months_in_order(self, temp_dir):
        lines = _climate_lines()
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *reversed(lines))

        records = load_climate(path)

        assert [r.month for r in records] == list(range(1, 13))
        assert records[4].avg_temp_c == 5.0

    def test_missing_month(self, temp_dir):
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *_climate_lines(range(1, 12)))

        with pytest.raises(ValidationError, match=r"months \[12\]"):
            load_climate(path)

    def test_duplicate_month(self, temp_dir):
        lines = _climate_lines() + ["3,March,31,9.0,12,500,100"]
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *lines)

        with pytest.raises(ValidationError, match="duplicate month 3"):
            load_climate(path)

    def test_month_out_of_range_reports_line(self, temp_dir):
        lines = _climate_lines(range(1, 12)) + ["13,Undecember,30,1.0,12,500,100"]
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *lines)

        with pytest.raises(ValidationError, match="climate.csv line 13"):
            load_climate(path)

    def test_unparseable_number(self, temp_dir):
        lines = _climate_lines()
        lines[0] = "1,January,31,cold,12,500,100"
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *lines)

        with pytest.raises(ValidationError, match="line 2"):
            load_climate(path)

    def test_blank_rows_skipped(self, temp_dir):
        lines = _climate_lines()
        path = _write(temp_dir / "climate.csv", CLIMATE_HEADER, *lines[:6], ",,,,,,", *lines[6:])

        assert len(load_climate(path)) == 12

    def test_missing_column(self, temp_dir):
        path = _write(temp_dir / "climate.csv", "month,num_days,avg_temp_c", "1,31,5.0")

        with pytest.raises(ValidationError, match="missing columns"):
            load_climate(path)

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_climate(temp_dir / "nope.csv")


class TestLoadComponents:

    def test_glazing_code(self, temp_dir):
        path = _write(
            temp_dir / "components.csv",
            "name,type,orientation,area,transmittance",
            "Wall,W,S,100,0.3",
            "Window,G,S,10,2.8",
            "Skylight,g,H,1.5,2.0",
        )

        components = load_components(path)

        assert [c.kind for c in components] == [
            ComponentKind.OPAQUE, ComponentKind.GLAZING, ComponentKind.GLAZING
        ]
        assert components[0].conductance == pytest.approx(30.0)

    @pytest.mark.parametrize("code", ["Glazing", "GL", "X", ""])
    def test_unknown_type_code_rejected(self, temp_dir, code):
        """A type code outside W, R, D, G is an error, not an opaque default."""
        path = _write(
            temp_dir / "components.csv",
            "name,type,orientation,area,transmittance",
            "Wall,W,S,100,0.3",
            f"South window,{code},S,10,2.0",
        )

        with pytest.raises(ValidationError, match="components.csv line 3"):
            load_components(path)

    def test_opaque_codes(self, temp_dir):
        path = _write(
            temp_dir / "components.csv",
            "name,type,orientation,area,transmittance",
            "Wall,W,S,100,0.3",
            "Roof,R,H,140,0.34",
            "Door,d,N,2,2.1",
        )

        assert {c.kind for c in load_components(path)} == {ComponentKind.OPAQUE}

    def test_negative_area_rejected(self, temp_dir):
        path = _write(
            temp_dir / "components.csv",
            "name,type,orientation,area,transmittance",
            "Wall,W,S,-1,0.3",
        )

        with pytest.raises(ValidationError):
            load_components(path)


class TestLoadCoefficients:

    def test_diffuse_bucket(self, temp_dir):
        path = _write(temp_dir / "shgc.csv", "angle,coefficient", "-1,0.5", "0,0.6", "30,0.55")

        table = load_coefficients(path)

        assert table == {-1: 0.5, 0: 0.6, 30: 0.55}

    def test_duplicate_angle(self, temp_dir):
        path = _write(temp_dir / "shgc.csv", "angle,coefficient", "30,0.5", "30,0.6")

        with pytest.raises(ValidationError, match="duplicate angle 30"):
            load_coefficients(path)


class TestLoadSolarGeometry:

    def test_expands_month_lists(self, temp_dir):
        path = _write(
            temp_dir / "geometry.csv",
            "months,orientation,angle,exposure_percent",
            '"1,2",S,30,75',
            '"1,2",N,80,0',
            "3,S,50,60",
        )

        geometry = load_solar_geometry(path)

        assert set(geometry) == {1, 2, 3}
        assert geometry[2]["S"].incidence_angle == 30
        assert geometry[2]["S"].exposure_fraction == pytest.approx(0.75)
        assert geometry[3]["S"].exposure_fraction == pytest.approx(0.6)
        assert "N" not in geometry[3]

    def test_duplicate_pair_rejected(self, temp_dir):
        path = _write(
            temp_dir / "geometry.csv",
            "months,orientation,angle,exposure_percent",
            '"1,2",S,30,75',
            '"2,3",S,40,70',
        )

        with pytest.raises(ValidationError, match="month 2, orientation 'S'"):
            load_solar_geometry(path)

    def test_exposure_above_hundred_rejected(self, temp_dir):
        path = _write(
            temp_dir / "geometry.csv",
            "months,orientation,angle,exposure_percent",
            "1,S,30,120",
        )

        with pytest.raises(ValidationError):
            load_solar_geometry(path)


class TestLoadBills:

    def test_file_order_kept(self, temp_dir):
        path = _write(
            temp_dir / "bills.csv",
            "start_month,end_month,usage,cost,rate",
            "3,4,100,10,0.1",
            "1,2,200,20,0.1",
        )

        bills = load_bills(path)

        assert [b.start_month for b in bills] == [3, 1]
        assert bills[1].usage == 200.0

    def test_month_out_of_range(self, temp_dir):
        path = _write(
            temp_dir / "bills.csv",
            "start_month,end_month,usage,cost,rate",
            "12,13,100,10,0.1",
        )

        with pytest.raises(ValidationError, match="bills.csv line 2"):
            load_bills(path)


class TestLoadInputData:

    def test_sample_home(self, sample_home_dir):
        inputs = load_input_data(sample_home_dir)

        assert len(inputs.climate) == 12
        assert len(inputs.glazing) == 4
        assert len(inputs.gas_bills) == 11
        assert len(inputs.cooling_bills) == 11
        assert inputs.coefficient(-1) == pytest.approx(0.52)
        assert inputs.geometry(7, "S").incidence_angle == 70

    def test_file_overrides(self, sample_home_dir):
        files = InputFiles(components="components_improved_roof.csv")

        inputs = load_input_data(sample_home_dir, files)
        roof = next(c for c in inputs.components if c.name == "Roof")

        assert roof.transmittance == pytest.approx(0.18)

    def test_missing_directory(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_input_data(temp_dir / "missing")
