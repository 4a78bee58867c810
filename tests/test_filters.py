"""Tests for completeness/time filters, windowing and ordering."""

from __future__ import annotations

import pytest

from domain.protocol import SortOrder
from domain.standings.filters import (
    EmptyDatasetError,
    filter_incomplete_matches,
    filter_matches_by_time,
    find_time_window,
    sort_matches,
)
from factories import make_match


def test_incomplete_matches_are_dropped_in_order() -> None:
    full_a = make_match(100)
    short_team1 = make_match(200, team1=(1, 2, 3, 4))
    full_b = make_match(300)
    long_team2 = make_match(400, team2=(6, 7, 8, 9, 10, 11))
    empty = make_match(500, team1=(), team2=())

    result = filter_incomplete_matches([full_a, short_team1, full_b, long_team2, empty])

    assert result == [full_a, full_b]
    assert result[0] is full_a


def test_time_filter_bounds_are_inclusive() -> None:
    matches = [make_match(t) for t in (100, 150, 200, 250, 300)]

    result = filter_matches_by_time(matches, 150, 250)

    assert [match.match_start_time for match in result] == [150, 200, 250]


def test_time_filter_negative_bounds_are_unbounded() -> None:
    matches = [make_match(t) for t in (300, 100, 200)]

    assert filter_matches_by_time(matches, -1, -1) == matches
    assert [m.match_start_time for m in filter_matches_by_time(matches, 200, -1)] == [300, 200]
    assert [m.match_start_time for m in filter_matches_by_time(matches, -1, 200)] == [100, 200]


def test_time_window_defaults_end_to_latest_match() -> None:
    matches = [make_match(t) for t in (100, 300, 200)]

    assert find_time_window(matches, -1, 150) == (150, 300)


def test_time_window_uses_explicit_end() -> None:
    matches = [make_match(t) for t in (100, 300)]

    assert find_time_window(matches, 250, 100) == (150, 250)


def test_time_window_with_cleared_window_is_open_at_start() -> None:
    matches = [make_match(t) for t in (100, 300)]

    assert find_time_window(matches, -1, -1) == (-1, 300)


def test_time_window_over_no_matches_raises() -> None:
    with pytest.raises(EmptyDatasetError, match="zero matches"):
        find_time_window([], -1, 150)


def test_time_window_over_no_matches_with_explicit_end() -> None:
    assert find_time_window([], 500, 100) == (400, 500)


def test_sort_is_idempotent_and_stable() -> None:
    first = make_match(200, match_id=1)
    tie = make_match(200, match_id=2)
    matches = [make_match(300, match_id=3), first, make_match(100, match_id=4), tie]

    sort_matches(matches, SortOrder.DESC)
    once = list(matches)
    sort_matches(matches, SortOrder.DESC)

    assert matches == once
    assert [m.match_id for m in matches] == [3, 1, 2, 4]


def test_sort_ascending_reverses_descending_order() -> None:
    matches = [make_match(t, match_id=t) for t in (200, 100, 300)]

    sort_matches(matches)
    assert [m.match_start_time for m in matches] == [300, 200, 100]

    descending = list(matches)
    sort_matches(matches, SortOrder.ASC)
    assert matches == list(reversed(descending))
