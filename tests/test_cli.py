"""
Tests for the hem command-line interface.
"""

import pytest
from typer.testing import CliRunner

from src.cli import app

runner = CliRunner()


class TestUsageCommand:

    def test_prints_table(self, sample_home_dir):
        result = runner.invoke(app, ["usage", str(sample_home_dir)])

        assert result.exit_code == 0, result.output
        assert "Modelled Monthly Usage" in result.output
        assert "Annual gas" in result.output

    def test_writes_reports(self, sample_home_dir, temp_dir):
        result = runner.invoke(app, ["usage", str(sample_home_dir), "--output", str(temp_dir)])

        assert result.exit_code == 0, result.output
        for name in (
            "modelled_gas_usage.csv",
            "modelled_cooling_usage.csv",
            "modelled_gas_bills.csv",
            "modelled_cooling_bills.csv",
        ):
            assert (temp_dir / name).exists()

    def test_missing_inputs_exit_code(self, temp_dir):
        result = runner.invoke(app, ["usage", str(temp_dir)])

        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_invalid_table_exit_code(self, sample_home_dir, temp_dir):
        for path in sample_home_dir.glob("*.csv"):
            (temp_dir / path.name).write_text(path.read_text())
        (temp_dir / "gas_bills.csv").write_text(
            "start_month,end_month,usage,cost,rate\n12,13,100,10,0.1\n"
        )

        result = runner.invoke(app, ["usage", str(temp_dir)])

        assert result.exit_code == 1
        assert "gas_bills.csv" in result.output


class TestBreakdownCommand:

    def test_breakdown(self, sample_home_dir, temp_dir):
        result = runner.invoke(app, ["breakdown", str(sample_home_dir), "-o", str(temp_dir)])

        assert result.exit_code == 0, result.output
        assert "Heat Transfer Breakdown" in result.output
        assert (temp_dir / "heat_transfer_breakdown.csv").exists()


class TestAccuracyCommand:

    def test_accuracy(self, sample_home_dir, temp_dir):
        result = runner.invoke(app, ["accuracy", str(sample_home_dir), "-o", str(temp_dir)])

        assert result.exit_code == 0, result.output
        assert "ASHRAE" in result.output
        assert (temp_dir / "model_accuracy.csv").exists()


class TestCompareCommand:

    def test_roof_scenario(self, sample_home_dir, temp_dir):
        result = runner.invoke(app, [
            "compare", str(sample_home_dir),
            "--cost", "3000",
            "--name", "roof",
            "--components", str(sample_home_dir / "components_improved_roof.csv"),
            "--output", str(temp_dir),
        ])

        assert result.exit_code == 0, result.output
        assert "Payback period" in result.output
        assert (temp_dir / "roof_comparison.csv").exists()

    def test_ventilation_scenario(self, sample_home_dir):
        result = runner.invoke(app, [
            "compare", str(sample_home_dir), "-c", "1000", "--vent-factor", "113.6",
        ])

        assert result.exit_code == 0, result.output
        assert "Payback period" in result.output

    def test_cost_required(self, sample_home_dir):
        result = runner.invoke(app, ["compare", str(sample_home_dir)])

        assert result.exit_code != 0

    @pytest.mark.parametrize("option", ["--components", "--shgc"])
    def test_missing_override_file(self, sample_home_dir, temp_dir, option):
        result = runner.invoke(app, [
            "compare", str(sample_home_dir), "-c", "1000", option, str(temp_dir / "none.csv"),
        ])

        assert result.exit_code == 1
        assert "Comparison failed" in result.output
