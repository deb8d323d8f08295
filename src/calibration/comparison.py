"""
Bill comparison - positional pairing of two bill series with totals.

Used both for model accuracy (actual vs modelled) and for scenario
comparison (base vs improved). Percentage difference is

    (value1 - value2) / value1 × 100

so a positive value is an over-estimate by series 1 (accuracy) or a
reduction achieved by series 2 (scenario comparison).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.models import BillComparisonRecord, UtilityBill
from ..utils.logging_config import get_logger
from ..utils.validation import BillSeriesMismatchError

logger = get_logger(__name__)


def percentage_difference(value1: float, value2: float) -> float:
    return (value1 - value2) / value1 * 100


def _compare(
    start_month: Optional[int],
    end_month: Optional[int],
    usage1: float,
    usage2: float,
    cost1: float,
    cost2: float,
) -> BillComparisonRecord:
    usage_pct = cost_pct = None
    # Zero usage on either side makes the percentage meaningless
    if usage1 != 0 and usage2 != 0:
        usage_pct = percentage_difference(usage1, usage2)
        if cost1 != 0:
            cost_pct = percentage_difference(cost1, cost2)

    return BillComparisonRecord(
        start_month=start_month,
        end_month=end_month,
        usage1=usage1,
        usage2=usage2,
        cost1=cost1,
        cost2=cost2,
        usage_pct_diff=usage_pct,
        cost_pct_diff=cost_pct,
    )


@dataclass(frozen=True)
class BillComparison:
    """Per-bill comparison records plus the synthetic totals record."""
    records: Tuple[BillComparisonRecord, ...]
    total: BillComparisonRecord

    def rows(self) -> List[BillComparisonRecord]:
        """Records followed by the totals record."""
        return list(self.records) + [self.total]

    def __len__(self) -> int:
        return len(self.records)


def compare_bills(
    bills1: Sequence[UtilityBill],
    bills2: Sequence[UtilityBill],
) -> BillComparison:
    """
    Compare two bill series pairwise by position.

    Args:
        bills1: Reference series (actual, or base scenario)
        bills2: Compared series (modelled, or improved scenario)

    Returns:
        BillComparison with one record per pair and a totals record

    Raises:
        BillSeriesMismatchError: If the series differ in length
    """
    if len(bills1) != len(bills2):
        raise BillSeriesMismatchError(len(bills1), len(bills2))

    records = []
    for index, (bill1, bill2) in enumerate(zip(bills1, bills2)):
        record = _compare(
            bill1.start_month, bill1.end_month,
            bill1.usage, bill2.usage,
            bill1.cost, bill2.cost,
        )
        if not record.is_meaningful:
            logger.debug(
                "Zero usage, percentage difference not computed",
                extra={"bill_index": index},
            )
        records.append(record)

    total = _compare(
        None, None,
        sum(r.usage1 for r in records),
        sum(r.usage2 for r in records),
        sum(r.cost1 for r in records),
        sum(r.cost2 for r in records),
    )

    return BillComparison(records=tuple(records), total=total)
