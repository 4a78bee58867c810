"""Tournament events and their prize distributions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.common import EventRecord, MatchRecord, PrizeDistributionRecord
from domain.standings.prize_pool import parse_prize_pool
from domain.standings.sanitize import clone_event


@dataclass(frozen=True)
class EventTeam:
    """Placement and prize a team took home from one event."""

    placement: int | None
    prize: int
    shared: bool

    @classmethod
    def from_record(cls, record: PrizeDistributionRecord) -> EventTeam:
        return cls(placement=record.placement, prize=record.prize, shared=record.shared)


class Event:
    """Event entity built once per load from a cloned record."""

    def __init__(self, record: EventRecord) -> None:
        self.event_id = record.event_id
        self.name = record.event_name
        self.prize_pool = parse_prize_pool(record.prize_pool)
        self.lan = record.lan
        self.last_match_time = -1
        self.prize_distribution_by_team_id: dict[int, EventTeam] = {
            team.team_id: EventTeam.from_record(team) for team in record.prize_distribution
        }

    def accumulate_match(self, match: MatchRecord) -> None:
        self.last_match_time = max(self.last_match_time, match.match_start_time)

    def __repr__(self) -> str:
        return f"Event(event_id={self.event_id!r}, name={self.name!r}, prize_pool={self.prize_pool})"


def build_event_registry(records: Iterable[EventRecord]) -> dict[int, Event]:
    """Map event id to a fresh Event built from a clone of each record."""
    return {record.event_id: Event(clone_event(record)) for record in records}


def accrue_matches(events: dict[int, Event], matches: Iterable[MatchRecord]) -> None:
    """Let each event know which matches were played at it."""
    for match in matches:
        if match.event_id is None:
            continue
        event = events.get(match.event_id)
        if event is not None:
            event.accumulate_match(match)


__all__ = ["Event", "EventTeam", "accrue_matches", "build_event_registry"]
