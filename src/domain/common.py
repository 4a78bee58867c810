"""Shared record types for the standings data pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PlayerRecord:
    """One player fielded by a team in a match."""

    player_id: int
    nick: str = ""


@dataclass
class MapRecord:
    """Per-map outcome inside a match."""

    map_name: str | None = None
    team1_score: int = 0
    team2_score: int = 0


@dataclass
class PrizeDistributionRecord:
    """One team's placement and prize at an event."""

    team_id: int
    placement: int | None = None
    prize: int = 0
    shared: bool = False


@dataclass
class EventRecord:
    """Raw tournament event payload from the source corpus."""

    event_id: int
    event_name: str
    prize_pool: str | None = None
    lan: bool = False
    prize_distribution: list[PrizeDistributionRecord] = field(default_factory=list)


@dataclass
class MatchRecord:
    """Match payload; mutated in place during a load after being cloned."""

    match_start_time: int
    team1_name: str
    team2_name: str
    team1_id: int
    team2_id: int
    team1_players: list[PlayerRecord] = field(default_factory=list)
    team2_players: list[PlayerRecord] = field(default_factory=list)
    maps: list[MapRecord] = field(default_factory=list)
    event_id: int | None = None
    match_id: int | None = None
    information_content: float | None = None
    team1: Any = None
    team2: Any = None

    @property
    def team1_maps_won(self) -> int:
        return sum(1 for map_record in self.maps if map_record.team1_score > map_record.team2_score)

    @property
    def team2_maps_won(self) -> int:
        return sum(1 for map_record in self.maps if map_record.team2_score > map_record.team1_score)

    @property
    def winner(self) -> int | None:
        """Return 1 or 2 for the side that won more maps, ``None`` on a draw."""
        if self.team1_maps_won > self.team2_maps_won:
            return 1
        if self.team2_maps_won > self.team1_maps_won:
            return 2
        return None


@dataclass(frozen=True)
class MatchData:
    """Read-only source corpus handed to the loader."""

    events: tuple[EventRecord, ...] = ()
    matches: tuple[MatchRecord, ...] = ()
