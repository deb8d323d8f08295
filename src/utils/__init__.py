"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    ContextFormatter,
    JsonLinesFormatter,
    ScenarioAdapter,
)
from .validation import (
    validate_month,
    validate_bill_period,
    validate_non_negative,
    validate_fraction,
    ValidationError,
    MissingLookupError,
    BillSeriesMismatchError,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "ContextFormatter",
    "JsonLinesFormatter",
    "ScenarioAdapter",
    # Validation
    "validate_month",
    "validate_bill_period",
    "validate_non_negative",
    "validate_fraction",
    "ValidationError",
    "MissingLookupError",
    "BillSeriesMismatchError",
]
