"""Rating context: calibration window, recency and event-importance knobs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class RankingContext:
    """Holds the settings the rating engine is calibrated with.

    The calibration window may end before the latest processed match: matches in
    the trailing grace period are still rated, they just sit past the end of the
    recency ramp and receive the full modifier.
    """

    def __init__(
        self,
        *,
        recency_min_multiplier: float = 1.0,
        hve_mod: float = 1.0,
        outlier_count: int = 5,
        hve_prize_pool: int = 1_000_000,
    ) -> None:
        if recency_min_multiplier < 0.0 or recency_min_multiplier > 1.0:
            raise ValueError("recency_min_multiplier must be between 0 and 1")
        self.recency_min_multiplier = recency_min_multiplier
        self.hve_mod = hve_mod
        self.outlier_count = outlier_count
        self.hve_prize_pool = hve_prize_pool
        self.start_time = -1
        self.end_time = -1

    def set_time_window(self, start_time: int, end_time: int) -> None:
        self.start_time = start_time
        self.end_time = end_time

    def set_hve_mod(self, value: float) -> None:
        if value <= 0.0:
            raise ValueError("hve_mod must be > 0")
        self.hve_mod = value

    def set_outlier_count(self, count: int) -> None:
        if count < 1:
            raise ValueError("outlier_count must be >= 1")
        self.outlier_count = count

    def get_timestamp_modifier(self, timestamp: int) -> float:
        if self.recency_min_multiplier == 1.0:
            return 1.0
        if self.start_time < 0 or self.end_time <= self.start_time:
            return 1.0

        age_fraction = (self.end_time - timestamp) / float(self.end_time - self.start_time)
        age_fraction = max(0.0, min(age_fraction, 1.0))
        return 1.0 - ((1.0 - self.recency_min_multiplier) * age_fraction)

    def event_importance(self, event: Any) -> float:
        """Extra weight for high-value events (by prize pool)."""
        if event is None:
            return 1.0
        if self.hve_prize_pool > 0 and event.prize_pool >= self.hve_prize_pool:
            return self.hve_mod
        return 1.0

    def nth_highest(self, values: Iterable[float]) -> float:
        """Return the ``outlier_count``-th largest value so top outliers share a ceiling."""
        ordered = sorted(values, reverse=True)
        if not ordered:
            return 0.0
        index = min(self.outlier_count, len(ordered)) - 1
        return float(ordered[index])


__all__ = ["RankingContext"]
