"""Per-match information content (how much the rating engine trusts a match)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from domain.common import MatchRecord
from domain.protocol import RankingContextLike


def calculate_match_information_content(
    match: MatchRecord,
    context: RankingContextLike,
    events: Mapping[int, Any],
) -> float:
    # Product of modifier terms; recent matches say more about current skill.
    information_content = 1.0
    information_content *= context.get_timestamp_modifier(match.match_start_time)
    return information_content


def assign_information_content(
    matches: Iterable[MatchRecord],
    context: RankingContextLike,
    events: Mapping[int, Any],
) -> None:
    for match in matches:
        match.information_content = calculate_match_information_content(match, context, events)


__all__ = ["assign_information_content", "calculate_match_information_content"]
