"""Tests for event entities and match accrual."""

from __future__ import annotations

from domain.standings.event import Event, EventTeam, accrue_matches, build_event_registry
from factories import make_event, make_match


def test_event_parses_prize_pool_and_distribution() -> None:
    event = Event(make_event(5, prize_pool="$1,250,000", lan=True, prizes=[(100, 1, 500_000)]))

    assert event.event_id == 5
    assert event.name == "Event 5"
    assert event.prize_pool == 1_250_000
    assert event.lan is True
    assert event.last_match_time == -1
    assert event.prize_distribution_by_team_id == {
        100: EventTeam(placement=1, prize=500_000, shared=False)
    }


def test_unparseable_prize_pool_is_zero() -> None:
    assert Event(make_event(1, prize_pool="TBD")).prize_pool == 0
    assert Event(make_event(2, prize_pool=None)).prize_pool == 0


def test_accumulate_match_keeps_running_maximum() -> None:
    event = Event(make_event(1))

    event.accumulate_match(make_match(300))
    event.accumulate_match(make_match(100))

    assert event.last_match_time == 300


def test_registry_is_built_from_clones() -> None:
    record = make_event(1, prizes=[(100, 1, 10)])

    events = build_event_registry([record])
    record.prize_distribution[0].prize = 999

    assert events[1].prize_distribution_by_team_id[100].prize == 10


def test_accrual_skips_unknown_and_missing_event_ids() -> None:
    events = build_event_registry([make_event(1), make_event(2)])

    accrue_matches(
        events,
        [
            make_match(100, event_id=1),
            make_match(250, event_id=1),
            make_match(400, event_id=99),
            make_match(500),
        ],
    )

    assert events[1].last_match_time == 250
    assert events[2].last_match_time == -1
