"""
Input validation utilities for the home energy model.

Provides the error types raised on malformed input tables and the small
range checks shared by the loader and the core calculators.

Usage:
    from src.utils.validation import (
        validate_month,
        validate_bill_period,
        ValidationError,
    )

    month = validate_month("7")
    start, end = validate_bill_period(1, 2)
"""

from typing import List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


MONTHS_PER_YEAR = 12


class ValidationError(ValueError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = "", suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.suggestions = suggestions or []


class MissingLookupError(ValidationError):
    """
    Raised when a table lookup required by the heat balance has no entry.

    Carries the month, orientation and incidence angle (whichever apply)
    so the defective input row can be located.
    """

    def __init__(
        self,
        message: str,
        field: str = "",
        month: Optional[int] = None,
        orientation: Optional[str] = None,
        angle: Optional[int] = None,
    ):
        super().__init__(message, field=field)
        self.month = month
        self.orientation = orientation
        self.angle = angle


class BillSeriesMismatchError(ValueError):
    """Raised when two bill series to be compared differ in length."""

    def __init__(self, length1: int, length2: int):
        super().__init__(
            f"Bill series are not comparable: {length1} bills vs {length2} bills"
        )
        self.length1 = length1
        self.length2 = length2


def validate_month(month, field: str = "month") -> int:
    """
    Validate a 1-based calendar month index.

    Args:
        month: Month number (int or numeric string)
        field: Field name reported on failure

    Returns:
        Month as int in [1, 12]

    Raises:
        ValidationError: If month is not an integer in range
    """
    if isinstance(month, bool):
        raise ValidationError(f"Month must be a number: got {month!r}", field=field)

    if not isinstance(month, int):
        try:
            month = int(str(month).strip())
        except (ValueError, TypeError):
            raise ValidationError(
                f"Month must be a number: got {month!r}",
                field=field,
            )

    if not (1 <= month <= MONTHS_PER_YEAR):
        raise ValidationError(
            f"Invalid month {month}: must be between 1 and {MONTHS_PER_YEAR}",
            field=field,
            suggestions=["Months are 1-based (January = 1)", "Year wraparound is not supported"],
        )

    return month


def validate_bill_period(start_month, end_month) -> Tuple[int, int]:
    """
    Validate the inclusive month bounds of a billing period.

    Both bounds must be valid months. A period whose end precedes its start
    (December to January) is accepted here; calendarization flags it.

    Returns:
        Tuple of (start_month, end_month)
    """
    start = validate_month(start_month, field="start_month")
    end = validate_month(end_month, field="end_month")
    return start, end


def validate_non_negative(value: float, field: str) -> float:
    """Validate that a numeric input is >= 0."""
    if value < 0:
        raise ValidationError(f"{field} must be non-negative: got {value}", field=field)
    return value


def validate_fraction(value: float, field: str) -> float:
    """Validate that a value lies in [0, 1]."""
    if not (0.0 <= value <= 1.0):
        raise ValidationError(
            f"{field} must be between 0 and 1: got {value}",
            field=field,
            suggestions=["Exposure is stored as a percentage in the source table"],
        )
    return value
