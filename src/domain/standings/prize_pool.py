"""Prize-pool string normalisation."""

from __future__ import annotations


def parse_prize_pool(prize_pool: str | None) -> int:
    """Parse strings like ``"$1,000,000"`` into an int, degrading to 0."""
    if prize_pool is None:
        return 0

    cleaned = prize_pool.replace(",", "").replace("$", "")
    if cleaned.isascii() and cleaned.isdigit():
        return int(cleaned)
    return 0


__all__ = ["parse_prize_pool"]
