"""
Tests for utility modules: logging, validation.

Run with: pytest tests/test_utils.py -v
"""

import json
import logging

import pytest

from src.core.models import EnvelopeComponent, ComponentKind, SolarGeometryParameter
from src.utils import (
    ContextFormatter,
    JsonLinesFormatter,
    ScenarioAdapter,
    ValidationError,
    get_logger,
    setup_logging,
    validate_bill_period,
    validate_fraction,
    validate_month,
    validate_non_negative,
)


class TestLogging:
    """Tests for logging configuration."""

    def test_get_logger(self):
        """Test getting a logger instance."""
        logger = get_logger("test_module")
        assert logger is not None
        assert logger.name == "test_module"

    def test_logger_has_handlers(self):
        """Test that logging is set up with handlers."""
        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) > 0

    def test_setup_logging_level(self):
        setup_logging("warning")
        assert logging.getLogger().level == logging.WARNING
        setup_logging("INFO")

    def test_formatter_appends_context(self):
        """Month and orientation passed via extra appear in the message."""
        record = logging.LogRecord("src.test", logging.INFO, __file__, 1, "Solar gain", None, None)
        record.month = 7
        record.orientation = "S"

        text = ContextFormatter().format(record)

        assert "Solar gain" in text
        assert "month=7" in text
        assert "orientation=S" in text

    def test_json_lines_formatter(self):
        record = logging.LogRecord("src.test", logging.WARNING, __file__, 1, "Odd bill", None, None)
        record.bill_index = 3

        entry = json.loads(JsonLinesFormatter().format(record))

        assert entry["bill_index"] == 3
        assert entry["level"] == "WARNING"
        assert entry["message"] == "Odd bill"

    def test_scenario_logger(self, caplog):
        """A scenario-bound logger tags every record."""
        logger = get_logger("src.test.scenario", scenario="roof")
        assert isinstance(logger, ScenarioAdapter)

        with caplog.at_level(logging.INFO, logger="src.test.scenario"):
            logger.info("built", extra={"month": 2})

        assert caplog.records[0].scenario == "roof"
        assert caplog.records[0].month == 2

    def test_log_to_file(self, temp_dir):
        log_file = temp_dir / "hem.log"
        setup_logging("INFO", log_to_file=True, log_file=str(log_file))

        get_logger("src.test").info("written", extra={"scenario": "base"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["scenario"] == "base"
        setup_logging("INFO")


class TestMonthValidation:

    def test_valid_int(self):
        assert validate_month(1) == 1
        assert validate_month(12) == 12

    def test_numeric_string(self):
        assert validate_month(" 7 ") == 7

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_out_of_range(self, month):
        with pytest.raises(ValidationError) as exc_info:
            validate_month(month)
        assert exc_info.value.field == "month"
        assert exc_info.value.suggestions

    @pytest.mark.parametrize("month", ["July", None, True, 1.5])
    def test_not_a_month(self, month):
        with pytest.raises(ValidationError):
            validate_month(month)

    def test_bill_period_fields(self):
        assert validate_bill_period(12, 1) == (12, 1)
        with pytest.raises(ValidationError) as exc_info:
            validate_bill_period(0, 1)
        assert exc_info.value.field == "start_month"


class TestNumericValidation:

    def test_non_negative(self):
        assert validate_non_negative(0.0, "area") == 0.0
        with pytest.raises(ValidationError, match="area"):
            validate_non_negative(-0.1, "area")

    def test_fraction(self):
        assert validate_fraction(1.0, "exposure") == 1.0
        with pytest.raises(ValidationError):
            validate_fraction(1.5, "exposure")

    def test_component_rejects_negative_area(self):
        with pytest.raises(ValidationError):
            EnvelopeComponent("Wall", ComponentKind.OPAQUE, "S", -5.0, 0.3)

    def test_geometry_rejects_percent(self):
        """Exposure must be a fraction, not a percentage."""
        with pytest.raises(ValidationError):
            SolarGeometryParameter(incidence_angle=30, exposure_fraction=75)

    def test_component_type_codes(self):
        assert ComponentKind.from_code(" g ") is ComponentKind.GLAZING
        assert ComponentKind.from_code("R") is ComponentKind.OPAQUE
        with pytest.raises(ValidationError) as exc_info:
            ComponentKind.from_code("X")
        assert exc_info.value.field == "type"
