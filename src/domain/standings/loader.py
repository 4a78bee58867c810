"""Turn the source corpus into time-bounded, roster-resolved match data."""

from __future__ import annotations

from collections.abc import Callable

from domain.common import MatchRecord
from domain.protocol import MatchDataSource, RankingContextLike, RosterLike, SortOrder
from domain.standings.event import Event, accrue_matches, build_event_registry
from domain.standings.filters import (
    filter_incomplete_matches,
    filter_matches_by_time,
    find_time_window,
    sort_matches,
)
from domain.standings.information import assign_information_content
from domain.standings.roster import Roster, RosterResolver
from domain.standings.sanitize import clone_match

SECONDS_PER_DAY = 24 * 3600
DEFAULT_DATA_WINDOW = 6 * 30 * SECONDS_PER_DAY
DEFAULT_GRACE_PERIOD = 30 * SECONDS_PER_DAY


class DataLoader:
    """Load matches, events and rosters for one version of the standings.

    Every ``load_data`` call starts again from the source corpus, which is only
    ever read. Results are published on ``matches`` (oldest first), ``teams``
    and ``events``.
    """

    def __init__(
        self,
        data_source: MatchDataSource,
        ranking_context: RankingContextLike,
        *,
        roster_class: type[RosterLike] = Roster,
        grace_period: int = DEFAULT_GRACE_PERIOD,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self.data_source = data_source
        self.ranking_context = ranking_context
        self.roster_class = roster_class
        self.grace_period = grace_period
        self.echo = echo

        self.matches: list[MatchRecord] = []
        self.events: dict[int, Event] = {}
        self.teams: list[RosterLike] = []
        self.filter_end_time = -1
        self.filter_window = DEFAULT_DATA_WINDOW
        self.time_window: tuple[int, int] | None = None

    def set_time_filter(self, end_time: int = -1, data_window: int = DEFAULT_DATA_WINDOW) -> DataLoader:
        self.filter_end_time = end_time
        self.filter_window = data_window
        return self

    def clear_time_filter(self) -> DataLoader:
        self.filter_end_time = -1
        self.filter_window = -1
        return self

    def set_hve_mod(self, value: float) -> None:
        """How much extra weight high-value events carry."""
        self.ranking_context.set_hve_mod(value)

    def set_nth_highest(self, nth: int) -> None:
        """How many top outliers share a ceiling when normalising team data."""
        self.ranking_context.set_outlier_count(nth)

    def load_data(self, version_timestamp: int = -1) -> None:
        filter_end = version_timestamp if version_timestamp >= 0 else self.filter_end_time

        matches = filter_incomplete_matches(self.data_source.matches)
        start_time, end_time = find_time_window(matches, filter_end, self.filter_window)
        self.ranking_context.set_time_window(start_time, end_time - self.grace_period)
        matches = [clone_match(match) for match in filter_matches_by_time(matches, start_time, end_time)]

        events = build_event_registry(self.data_source.events)
        accrue_matches(events, matches)

        assign_information_content(matches, self.ranking_context, events)

        # Newest first so the most recent lineup defines each roster's identity.
        sort_matches(matches, SortOrder.DESC)
        teams = RosterResolver(self.roster_class).resolve(matches, events)
        self.roster_class.initialize_seeding_modifiers(teams, self.ranking_context)

        # Ratings replay history forward.
        sort_matches(matches, SortOrder.ASC)

        self.matches = matches
        self.teams = teams
        self.events = events
        self.time_window = (start_time, end_time)

        if self.echo is not None:
            self.echo(
                f"loaded start_time={start_time} end_time={end_time} "
                f"calibration_end_time={end_time - self.grace_period} "
                f"matches={len(matches)} rosters={len(teams)} events={len(events)}"
            )


__all__ = [
    "DEFAULT_DATA_WINDOW",
    "DEFAULT_GRACE_PERIOD",
    "DataLoader",
    "SECONDS_PER_DAY",
]
