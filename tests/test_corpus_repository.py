"""Tests for reading the match corpus from the database."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from sqlalchemy import insert
from sqlalchemy.orm import Session

from db import create_db_engine, create_session_factory
from repositories import corpus_repository as repo


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_db_engine("sqlite://")
    repo._metadata.create_all(engine)
    start = datetime(2026, 1, 1, 12, 0, 0)

    with engine.begin() as connection:
        connection.execute(insert(repo._teams), [{"id": 100, "name": "Alpha"}, {"id": 200, "name": "Bravo"}])
        connection.execute(
            insert(repo._events),
            [{"id": 7, "name": "Major", "lan": True, "prize_pool": "$1,000,000"}],
        )
        connection.execute(
            insert(repo._event_prize_distribution),
            [
                {"event_id": 7, "team_id": 200, "placement": 2, "prize": 100000, "shared": False},
                {"event_id": 7, "team_id": 100, "placement": 1, "prize": 500000, "shared": False},
            ],
        )
        connection.execute(
            insert(repo._matches),
            [
                {"id": 1, "team1_id": 100, "team2_id": 200, "event_id": 7, "status": "FINISHED", "date": start},
                {"id": 2, "team1_id": 100, "team2_id": 200, "event_id": None, "status": "SCHEDULED", "date": start},
            ],
        )
        connection.execute(
            insert(repo._maps),
            [
                {"id": 11, "match_id": 1, "map_name": "de_nuke", "map_number": 2, "score_team1": 9, "score_team2": 13},
                {"id": 10, "match_id": 1, "map_name": "de_mirage", "map_number": 1, "score_team1": 13, "score_team2": 5},
            ],
        )
        stats = []
        for map_id in (10, 11):
            for player_id in range(1, 6):
                stats.append({"map_id": map_id, "player_id": player_id, "team_id": 100, "side": "BOTH"})
                stats.append({"map_id": map_id, "player_id": player_id, "team_id": 100, "side": "CT"})
            for player_id in range(6, 11):
                stats.append({"map_id": map_id, "player_id": player_id, "team_id": 200, "side": "BOTH"})
        connection.execute(insert(repo._map_player_stats), stats)
        connection.execute(
            insert(repo._players),
            [{"id": player_id, "nickname": f"player{player_id}"} for player_id in range(1, 11)],
        )

    with create_session_factory(engine)() as db_session:
        yield db_session
    engine.dispose()


def test_fetch_matches_reads_finished_matches_with_maps_and_players(session: Session) -> None:
    matches = repo.fetch_matches(session)

    assert len(matches) == 1
    match = matches[0]
    assert match.match_id == 1
    assert match.match_start_time == int(datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC).timestamp())
    assert match.event_id == 7
    assert (match.team1_name, match.team2_name) == ("Alpha", "Bravo")
    assert [map_record.map_name for map_record in match.maps] == ["de_mirage", "de_nuke"]
    assert [player.player_id for player in match.team1_players] == [1, 2, 3, 4, 5]
    assert [player.player_id for player in match.team2_players] == [6, 7, 8, 9, 10]
    assert match.team1_players[0].nick == "player1"


def test_fetch_events_groups_prize_distribution(session: Session) -> None:
    events = repo.fetch_events(session)

    assert len(events) == 1
    event = events[0]
    assert event.event_name == "Major"
    assert event.lan is True
    assert event.prize_pool == "$1,000,000"
    assert [entry.team_id for entry in event.prize_distribution] == [100, 200]


def test_fetch_match_data_snapshot(session: Session) -> None:
    data = repo.fetch_match_data(session)

    assert len(data.events) == 1
    assert len(data.matches) == 1
