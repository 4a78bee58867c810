"""Shared protocols and enums for the standings pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from domain.common import EventRecord, MatchRecord, PlayerRecord


class SortOrder(str, Enum):
    """Chronological direction for match ordering."""

    ASC = "asc"
    DESC = "desc"


@runtime_checkable
class MatchDataSource(Protocol):
    """Read-only corpus of events and matches."""

    @property
    def events(self) -> Sequence[EventRecord]: ...

    @property
    def matches(self) -> Sequence[MatchRecord]: ...


@runtime_checkable
class RankingContextLike(Protocol):
    """Rating-context knobs the loader drives."""

    def set_time_window(self, start_time: int, end_time: int) -> None: ...

    def get_timestamp_modifier(self, timestamp: int) -> float: ...

    def set_hve_mod(self, value: float) -> None: ...

    def set_outlier_count(self, count: int) -> None: ...

    def event_importance(self, event: Any) -> float: ...

    def nth_highest(self, values: Iterable[float]) -> float: ...


class RosterLike(Protocol):
    """Contract the roster resolver needs from a roster implementation."""

    roster_id: int
    name: str

    def __init__(self, roster_id: int, name: str, players: Sequence[PlayerRecord]) -> None: ...

    def shares_roster(self, players: Sequence[PlayerRecord]) -> bool: ...

    def accumulate_match(self, match: MatchRecord) -> None: ...

    def record_event_participation(self, event: Any, team_id: int) -> None: ...

    @staticmethod
    def initialize_seeding_modifiers(
        rosters: Sequence[Any], context: RankingContextLike
    ) -> None: ...


__all__ = [
    "MatchDataSource",
    "RankingContextLike",
    "RosterLike",
    "SortOrder",
]
