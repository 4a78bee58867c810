"""Match filtering, windowing and ordering helpers."""

from __future__ import annotations

from collections.abc import Iterable

from domain.common import MatchRecord
from domain.protocol import SortOrder

ROSTER_SIZE = 5


class EmptyDatasetError(ValueError):
    """Raised when a time window is requested over zero candidate matches."""


def filter_incomplete_matches(matches: Iterable[MatchRecord]) -> list[MatchRecord]:
    """Keep matches where both sides fielded a full five-player roster."""
    return [
        match
        for match in matches
        if len(match.team1_players) == ROSTER_SIZE and len(match.team2_players) == ROSTER_SIZE
    ]


def filter_matches_by_time(
    matches: Iterable[MatchRecord],
    start_time: int,
    end_time: int,
) -> list[MatchRecord]:
    """Keep matches inside ``[start_time, end_time]``; a negative bound is open."""
    return [
        match
        for match in matches
        if (end_time < 0 or match.match_start_time <= end_time)
        and (start_time < 0 or match.match_start_time >= start_time)
    ]


def find_time_window(
    matches: Iterable[MatchRecord],
    filter_end: int,
    data_window: int,
) -> tuple[int, int]:
    """Return the inclusive ``(start_time, end_time)`` covered by a load.

    Without an explicit end the most recent match start defines it. A negative
    ``data_window`` leaves the start unbounded.
    """
    end_time = filter_end
    if end_time < 0:
        start_times = [match.match_start_time for match in matches]
        if not start_times:
            raise EmptyDatasetError("Cannot derive a time window from zero matches")
        end_time = max(start_times)

    if data_window < 0:
        return -1, end_time
    return end_time - data_window, end_time


def sort_matches(matches: list[MatchRecord], order: SortOrder = SortOrder.DESC) -> None:
    """Stable in-place sort by match start time."""
    matches.sort(key=lambda match: match.match_start_time, reverse=order == SortOrder.DESC)


__all__ = [
    "EmptyDatasetError",
    "ROSTER_SIZE",
    "filter_incomplete_matches",
    "filter_matches_by_time",
    "find_time_window",
    "sort_matches",
]
