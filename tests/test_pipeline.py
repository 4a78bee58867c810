"""Tests for the config-driven load pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.common import MatchData
from domain.pipeline import create_loader, load_standings
from domain.standings.config import StandingsConfig, StandingsParameters
from domain.standings.loader import SECONDS_PER_DAY
from factories import make_event, make_match


def _config(lookback_days: int = 10, **parameters) -> StandingsConfig:
    return StandingsConfig(
        name="test",
        description=None,
        file_path=Path("test.toml"),
        lookback_days=lookback_days,
        parameters=StandingsParameters(**parameters),
    )


def test_create_loader_applies_config() -> None:
    config = _config(
        lookback_days=10,
        grace_period_days=2,
        recency_min_multiplier=0.4,
        hve_mod=3.0,
        outlier_count=7,
    )

    loader = create_loader(MatchData(), config)

    assert loader.filter_window == 10 * SECONDS_PER_DAY
    assert loader.grace_period == 2 * SECONDS_PER_DAY
    assert loader.ranking_context.recency_min_multiplier == pytest.approx(0.4)
    assert loader.ranking_context.hve_mod == pytest.approx(3.0)
    assert loader.ranking_context.outlier_count == 7


def test_zero_lookback_clears_time_filter() -> None:
    loader = create_loader(MatchData(), _config(lookback_days=0))

    assert loader.filter_end_time == -1
    assert loader.filter_window == -1


def test_load_standings_summarises_result() -> None:
    day = SECONDS_PER_DAY
    corpus = MatchData(
        events=(make_event(1, prizes=[(100, 1, 5_000)]),),
        matches=(
            make_match(1 * day, event_id=1),
            make_match(20 * day, event_id=1),
            make_match(25 * day, team1=(11, 12, 13, 14, 15), team1_name="Charlie"),
        ),
    )
    lines: list[str] = []

    loader, summary = load_standings(
        data_source=corpus,
        system_config=_config(lookback_days=10, grace_period_days=3),
        echo=lines.append,
    )

    assert summary.start_time == 15 * day
    assert summary.end_time == 25 * day
    assert summary.calibration_end_time == 22 * day
    assert summary.source_matches == 3
    assert summary.loaded_matches == 2
    assert summary.resolved_rosters == 3
    assert summary.loaded_events == 1
    assert [match.match_start_time for match in loader.matches] == [20 * day, 25 * day]
    assert lines[-1] == (
        "completed config=test.toml system=test source_matches=3 "
        "loaded_matches=2 resolved_rosters=3 loaded_events=1"
    )
