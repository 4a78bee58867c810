"""Copies of source records so a load never mutates the corpus."""

from __future__ import annotations

from dataclasses import replace

from domain.common import EventRecord, MatchRecord


def clone_event(event: EventRecord) -> EventRecord:
    return replace(
        event,
        prize_distribution=[replace(team) for team in event.prize_distribution],
    )


def clone_match(match: MatchRecord) -> MatchRecord:
    return replace(
        match,
        team1_players=[replace(player) for player in match.team1_players],
        team2_players=[replace(player) for player in match.team2_players],
        maps=[replace(map_record) for map_record in match.maps],
    )


__all__ = ["clone_event", "clone_match"]
