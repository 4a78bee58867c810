"""Read the match corpus from the scraped CS2 database."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    cast,
    func,
    select,
)
from sqlalchemy.orm import Session

from domain.common import (
    EventRecord,
    MapRecord,
    MatchData,
    MatchRecord,
    PlayerRecord,
    PrizeDistributionRecord,
)

_metadata = MetaData()

_matches = Table(
    "matches",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("team1_id", Integer),
    Column("team2_id", Integer),
    Column("event_id", Integer),
    Column("status", String),
    Column("date", DateTime(timezone=False)),
    Column("updated_at", DateTime(timezone=False)),
    Column("created_at", DateTime(timezone=False)),
)

_teams = Table(
    "teams",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String),
)

_events = Table(
    "events",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String),
    Column("lan", Boolean),
    Column("prize_pool", String),
)

_event_prize_distribution = Table(
    "event_prize_distribution",
    _metadata,
    Column("event_id", Integer),
    Column("team_id", Integer),
    Column("placement", Integer),
    Column("prize", Integer),
    Column("shared", Boolean),
)

_maps = Table(
    "maps",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("match_id", Integer),
    Column("map_name", String),
    Column("map_number", Integer),
    Column("score_team1", Integer),
    Column("score_team2", Integer),
)

_map_player_stats = Table(
    "map_player_stats",
    _metadata,
    Column("map_id", Integer),
    Column("player_id", Integer),
    Column("team_id", Integer),
    Column("side", String),
)

_players = Table(
    "players",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("nickname", String),
)


def _build_cutoff_time(lookback_days: int | None) -> datetime | None:
    if lookback_days is None or lookback_days <= 0:
        return None
    return datetime.now(UTC).replace(tzinfo=None) - timedelta(days=lookback_days)


def _event_time_expr():
    return func.coalesce(
        _matches.c.date,
        _matches.c.updated_at,
        _matches.c.created_at,
    )


def _to_timestamp(event_time: datetime) -> int:
    """Naive database datetimes are UTC."""
    if event_time.tzinfo is None:
        event_time = event_time.replace(tzinfo=UTC)
    return int(event_time.timestamp())


def fetch_events(session: Session) -> list[EventRecord]:
    """Fetch every event with its prize distribution."""
    prize_rows = session.execute(
        select(
            _event_prize_distribution.c.event_id,
            _event_prize_distribution.c.team_id,
            _event_prize_distribution.c.placement,
            _event_prize_distribution.c.prize,
            _event_prize_distribution.c.shared,
        ).order_by(
            _event_prize_distribution.c.event_id,
            _event_prize_distribution.c.placement,
            _event_prize_distribution.c.team_id,
        )
    ).mappings().all()

    prizes_by_event: dict[int, list[PrizeDistributionRecord]] = {}
    for row in prize_rows:
        prizes_by_event.setdefault(int(row["event_id"]), []).append(
            PrizeDistributionRecord(
                team_id=int(row["team_id"]),
                placement=None if row["placement"] is None else int(row["placement"]),
                prize=int(row["prize"] or 0),
                shared=bool(row["shared"]),
            )
        )

    event_rows = session.execute(
        select(
            _events.c.id,
            cast(_events.c.name, String).label("name"),
            func.coalesce(_events.c.lan, False).label("lan"),
            _events.c.prize_pool,
        ).order_by(_events.c.id)
    ).mappings().all()

    return [
        EventRecord(
            event_id=int(row["id"]),
            event_name=row["name"] or "",
            prize_pool=row["prize_pool"],
            lan=bool(row["lan"]),
            prize_distribution=prizes_by_event.get(int(row["id"]), []),
        )
        for row in event_rows
    ]


def fetch_matches(session: Session, lookback_days: int | None = None) -> list[MatchRecord]:
    """Fetch finished matches with their maps and fielded players, oldest first."""
    cutoff_time = _build_cutoff_time(lookback_days)
    event_time = _event_time_expr()
    team1 = _teams.alias("team1")
    team2 = _teams.alias("team2")

    conditions: list[Any] = [cast(_matches.c.status, String) == "FINISHED"]
    if cutoff_time is not None:
        conditions.append(event_time >= cutoff_time)

    match_rows = session.execute(
        select(
            _matches.c.id.label("match_id"),
            event_time.label("event_time"),
            _matches.c.event_id,
            _matches.c.team1_id,
            _matches.c.team2_id,
            func.coalesce(team1.c.name, "").label("team1_name"),
            func.coalesce(team2.c.name, "").label("team2_name"),
        )
        .select_from(
            _matches.outerjoin(team1, _matches.c.team1_id == team1.c.id).outerjoin(
                team2,
                _matches.c.team2_id == team2.c.id,
            )
        )
        .where(*conditions)
        .order_by(event_time, _matches.c.id)
    ).mappings().all()

    matches: dict[int, MatchRecord] = {}
    for row in match_rows:
        match_id = int(row["match_id"])
        row_time = row["event_time"]
        if not isinstance(row_time, datetime):
            raise ValueError(f"match_id={match_id} has invalid event_time={row_time!r}")

        matches[match_id] = MatchRecord(
            match_id=match_id,
            match_start_time=_to_timestamp(row_time),
            event_id=None if row["event_id"] is None else int(row["event_id"]),
            team1_name=row["team1_name"],
            team2_name=row["team2_name"],
            team1_id=int(row["team1_id"]),
            team2_id=int(row["team2_id"]),
        )

    if not matches:
        return []

    map_rows = session.execute(
        select(
            _maps.c.match_id,
            cast(_maps.c.map_name, String).label("map_name"),
            _maps.c.score_team1,
            _maps.c.score_team2,
        )
        .where(_maps.c.match_id.in_(list(matches)))
        .order_by(_maps.c.match_id, _maps.c.map_number, _maps.c.id)
    ).mappings().all()

    for row in map_rows:
        matches[int(row["match_id"])].maps.append(
            MapRecord(
                map_name=row["map_name"],
                team1_score=int(row["score_team1"] or 0),
                team2_score=int(row["score_team2"] or 0),
            )
        )

    player_rows = session.execute(
        select(
            _maps.c.match_id,
            _map_player_stats.c.team_id,
            _map_player_stats.c.player_id,
            func.coalesce(_players.c.nickname, "").label("nick"),
        )
        .distinct()
        .select_from(
            _map_player_stats.join(_maps, _map_player_stats.c.map_id == _maps.c.id).outerjoin(
                _players,
                _map_player_stats.c.player_id == _players.c.id,
            )
        )
        .where(
            _maps.c.match_id.in_(list(matches)),
            _map_player_stats.c.player_id.is_not(None),
            cast(_map_player_stats.c.side, String) == "BOTH",
        )
        .order_by(_maps.c.match_id, _map_player_stats.c.team_id, _map_player_stats.c.player_id)
    ).mappings().all()

    for row in player_rows:
        match = matches[int(row["match_id"])]
        player = PlayerRecord(player_id=int(row["player_id"]), nick=row["nick"])
        if row["team_id"] == match.team1_id:
            match.team1_players.append(player)
        elif row["team_id"] == match.team2_id:
            match.team2_players.append(player)

    return list(matches.values())


def fetch_match_data(session: Session, lookback_days: int | None = None) -> MatchData:
    """Snapshot the database corpus as a read-only ``MatchData``."""
    return MatchData(
        events=tuple(fetch_events(session)),
        matches=tuple(fetch_matches(session, lookback_days)),
    )


__all__ = ["fetch_events", "fetch_match_data", "fetch_matches"]
