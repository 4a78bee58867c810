"""Load the static match corpus from its JSON export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from domain.common import (
    EventRecord,
    MapRecord,
    MatchData,
    MatchRecord,
    PlayerRecord,
    PrizeDistributionRecord,
)


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def _parse_player(raw: dict[str, Any]) -> PlayerRecord:
    return PlayerRecord(player_id=int(raw["playerId"]), nick=str(raw.get("nick", "")))


def _parse_map(raw: dict[str, Any]) -> MapRecord:
    return MapRecord(
        map_name=raw.get("name"),
        team1_score=int(raw.get("team1Score", 0)),
        team2_score=int(raw.get("team2Score", 0)),
    )


def _parse_prize_entry(raw: dict[str, Any]) -> PrizeDistributionRecord:
    return PrizeDistributionRecord(
        team_id=int(raw["teamId"]),
        placement=_optional_int(raw.get("placement")),
        prize=int(raw.get("prize") or 0),
        shared=bool(raw.get("shared", False)),
    )


def parse_event(raw: dict[str, Any]) -> EventRecord:
    prize_pool = raw.get("prizePool")
    return EventRecord(
        event_id=int(raw["eventId"]),
        event_name=str(raw.get("eventName", "")),
        prize_pool=None if prize_pool is None else str(prize_pool),
        lan=bool(raw.get("lan", False)),
        prize_distribution=[_parse_prize_entry(entry) for entry in raw.get("prizeDistribution", [])],
    )


def parse_match(raw: dict[str, Any]) -> MatchRecord:
    return MatchRecord(
        match_id=_optional_int(raw.get("matchId")),
        match_start_time=int(raw["matchStartTime"]),
        event_id=_optional_int(raw.get("eventId")),
        team1_name=str(raw.get("team1Name", "")),
        team2_name=str(raw.get("team2Name", "")),
        team1_id=int(raw["team1Id"]),
        team2_id=int(raw["team2Id"]),
        team1_players=[_parse_player(player) for player in raw.get("team1Players", [])],
        team2_players=[_parse_player(player) for player in raw.get("team2Players", [])],
        maps=[_parse_map(map_raw) for map_raw in raw.get("maps", [])],
    )


def parse_match_data(raw: dict[str, Any]) -> MatchData:
    """Convert the camelCase ``matchdata.json`` payload into records."""
    return MatchData(
        events=tuple(parse_event(event) for event in raw.get("events", [])),
        matches=tuple(parse_match(match) for match in raw.get("matches", [])),
    )


def load_match_data_json(path: Path) -> MatchData:
    if not path.exists():
        raise FileNotFoundError(f"Match data file not found: {path}")
    with path.open("r", encoding="utf-8") as file:
        raw = json.load(file)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object with 'events' and 'matches'")
    return parse_match_data(raw)


__all__ = ["load_match_data_json", "parse_event", "parse_match", "parse_match_data"]
