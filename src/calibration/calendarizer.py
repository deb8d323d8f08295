"""
Bill calendarization - map modelled monthly usage onto billing periods.

Meter reads fall roughly mid-month, so a bill running from month s to
month e is modelled as half of month s plus half of month e. This only
matches the true duration for bills spanning exactly two consecutive
months; other spans are logged and computed with the same split.
"""

from typing import List, Sequence

from ..core.models import MonthlyUsageSnapshot, UtilityBill
from ..utils.logging_config import get_logger
from ..utils.validation import ValidationError, validate_bill_period

logger = get_logger(__name__)


def _usage_by_month(monthly_usage: Sequence[MonthlyUsageSnapshot]) -> dict:
    by_month = {snapshot.month: snapshot.usage for snapshot in monthly_usage}
    missing = [m for m in range(1, 13) if m not in by_month]
    if missing:
        raise ValidationError(
            f"Monthly usage is missing months {missing}",
            field="monthly_usage",
        )
    return by_month


def calendarize_bills(
    actual_bills: Sequence[UtilityBill],
    monthly_usage: Sequence[MonthlyUsageSnapshot],
) -> List[UtilityBill]:
    """
    Build one modelled bill per actual bill.

    Billing bounds and rate come from the actual bill; usage and cost are
    replaced with modelled values (cost = actual rate × modelled usage).

    Args:
        actual_bills: Metered bills, in billing order
        monthly_usage: Twelve monthly usage snapshots

    Returns:
        Modelled bills in the same order

    Raises:
        ValidationError: If a bill month is outside 1-12 or a month is
            missing from the usage snapshots
    """
    usage = _usage_by_month(monthly_usage)
    modelled = []

    for index, bill in enumerate(actual_bills):
        try:
            start, end = validate_bill_period(bill.start_month, bill.end_month)
        except ValidationError as e:
            raise ValidationError(f"Bill {index}: {e}", field=e.field) from e

        if end - start != 1:
            logger.warning(
                f"Billing period {start}-{end} does not span two consecutive months; "
                "half-month split may misstate usage",
                extra={"bill_index": index},
            )

        modelled_usage = usage[start] / 2 + usage[end] / 2
        modelled.append(
            UtilityBill(
                start_month=start,
                end_month=end,
                usage=modelled_usage,
                cost=bill.rate * modelled_usage,
                rate=bill.rate,
            )
        )

    return modelled
