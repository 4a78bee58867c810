"""Standings data-pipeline domain modules."""

from domain.common import (
    EventRecord,
    MapRecord,
    MatchData,
    MatchRecord,
    PlayerRecord,
    PrizeDistributionRecord,
)
from domain.protocol import SortOrder

__all__ = [
    "EventRecord",
    "MapRecord",
    "MatchData",
    "MatchRecord",
    "PlayerRecord",
    "PrizeDistributionRecord",
    "SortOrder",
]
