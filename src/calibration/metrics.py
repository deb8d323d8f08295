"""
ASHRAE Guideline 14 goodness-of-fit for billing-period data.

Scores modelled bills against metered bills, paired by position the same
way the bill comparison pairs them:
- NMBE (Normalized Mean Bias Error): systematic over/under-prediction
- CVRMSE (Coefficient of Variation of RMSE): period-to-period scatter
- Billed-total error: the single figure shown in the totals record

Reference: ASHRAE Guideline 14-2014, monthly/billing data:
NMBE within ±10%, CVRMSE under 30%.

Usage:
    from src.calibration.metrics import CalibrationMetrics

    metrics = CalibrationMetrics.from_bills(actual_bills, modelled_bills)
    if metrics.passes_ashrae:
        print(f"Calibrated: NMBE {metrics.nmbe:+.1f}%")
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence

import numpy as np

from ..core.models import UtilityBill
from ..utils.logging_config import get_logger
from ..utils.validation import BillSeriesMismatchError

logger = get_logger(__name__)

NMBE_LIMIT = 10.0
CVRMSE_LIMIT = 30.0


@dataclass
class CalibrationMetrics:
    """
    Fit of a modelled bill series to the metered one.

    Sign convention follows the Guideline: positive NMBE means the model
    under-predicts. When the metered usage averages zero (a cooling series
    in a cold climate, say) the normalized figures are undefined and
    ``meaningful`` is False.
    """

    n_points: int = 0
    measured_total: float = 0.0
    simulated_total: float = 0.0

    nmbe: float = 0.0
    cvrmse: float = 0.0
    r_squared: float = 0.0
    meaningful: bool = False

    ashrae_nmbe_limit: float = NMBE_LIMIT
    ashrae_cvrmse_limit: float = CVRMSE_LIMIT

    @property
    def total_error_percent(self) -> float:
        """Billed-total error, (measured - simulated) / measured × 100."""
        if self.measured_total == 0:
            return 0.0
        return (self.measured_total - self.simulated_total) / self.measured_total * 100

    @property
    def passes_ashrae_nmbe(self) -> bool:
        return self.meaningful and abs(self.nmbe) <= self.ashrae_nmbe_limit

    @property
    def passes_ashrae_cvrmse(self) -> bool:
        return self.meaningful and self.cvrmse <= self.ashrae_cvrmse_limit

    @property
    def passes_ashrae(self) -> bool:
        """Both NMBE and CVRMSE within the billing-data limits."""
        return self.passes_ashrae_nmbe and self.passes_ashrae_cvrmse

    @classmethod
    def from_usage(
        cls,
        measured: Sequence[float],
        simulated: Sequence[float],
    ) -> "CalibrationMetrics":
        """
        Score paired usage values (kWh per billing period).

        Raises:
            BillSeriesMismatchError: If the two series differ in length
        """
        m = np.asarray(measured, dtype=float)
        s = np.asarray(simulated, dtype=float)
        if m.shape != s.shape:
            raise BillSeriesMismatchError(len(m), len(s))

        metrics = cls(
            n_points=len(m),
            measured_total=float(m.sum()),
            simulated_total=float(s.sum()),
        )
        if metrics.n_points == 0 or m.mean() == 0:
            logger.warning("Metered usage averages zero; NMBE and CVRMSE are undefined")
            return metrics

        mean_m = m.mean()
        residuals = m - s

        # NMBE = Σ(Mi - Si) / (n × M̄) × 100
        metrics.nmbe = float(residuals.sum() / (metrics.n_points * mean_m) * 100)
        # CVRMSE = sqrt(Σ(Mi - Si)² / n) / M̄ × 100
        metrics.cvrmse = float(np.sqrt(np.mean(residuals ** 2)) / mean_m * 100)

        ss_tot = float(np.sum((m - mean_m) ** 2))
        if ss_tot > 0:
            metrics.r_squared = 1 - float(np.sum(residuals ** 2)) / ss_tot
        metrics.meaningful = True
        return metrics

    @classmethod
    def from_bills(
        cls,
        measured: Sequence[UtilityBill],
        simulated: Sequence[UtilityBill],
    ) -> "CalibrationMetrics":
        """Score the usage of two bill series, paired by position."""
        return cls.from_usage(
            [bill.usage for bill in measured],
            [bill.usage for bill in simulated],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_points": self.n_points,
            "measured_total": round(self.measured_total, 2),
            "simulated_total": round(self.simulated_total, 2),
            "total_error_percent": round(self.total_error_percent, 2),
            "nmbe_percent": round(self.nmbe, 2),
            "cvrmse_percent": round(self.cvrmse, 2),
            "r_squared": round(self.r_squared, 4),
            "meaningful": self.meaningful,
            "passes_ashrae": self.passes_ashrae,
        }

    def __str__(self) -> str:
        header = f"Guideline 14 fit over {self.n_points} bills"
        if not self.meaningful:
            return f"{header}: not computable (zero metered usage)"

        def mark(ok: bool) -> str:
            return "✓" if ok else "✗"

        return "\n".join([
            f"{header}:",
            f"  NMBE   {self.nmbe:+7.2f}%  (±{self.ashrae_nmbe_limit:g}%)  {mark(self.passes_ashrae_nmbe)}",
            f"  CVRMSE {self.cvrmse:7.2f}%  (<{self.ashrae_cvrmse_limit:g}%)  {mark(self.passes_ashrae_cvrmse)}",
            f"  R²     {self.r_squared:7.4f}",
            f"  {'PASSES' if self.passes_ashrae else 'FAILS'} ASHRAE Guideline 14",
        ])
