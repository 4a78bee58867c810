"""Roster identity: map raw per-match team labels onto player-overlap rosters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from domain.common import MatchRecord, PlayerRecord
from domain.protocol import RankingContextLike, RosterLike
from domain.standings.event import Event

# Teams sharing at least this many players are the same roster (Major rules).
CORE_PLAYER_OVERLAP = 3


@dataclass(frozen=True)
class EventParticipation:
    """A roster's result at one event, keyed by the event's own team id."""

    event: Event
    team_id: int
    placement: int | None
    prize: int
    shared: bool


class Roster:
    """Competitive entity identified by its players rather than its team label."""

    def __init__(self, roster_id: int, name: str, players: Sequence[PlayerRecord]) -> None:
        self.roster_id = roster_id
        self.name = name
        self.players = list(players)
        self.player_ids = frozenset(player.player_id for player in players)
        self.matches: list[MatchRecord] = []
        self.wins = 0
        self.defeated_roster_ids: set[int] = set()
        self.participations: dict[int, EventParticipation] = {}
        self.prize_winnings = 0.0
        self.prize_modifier = 0.0
        self.network_modifier = 0.0
        self.seed_modifier = 0.0

    def shares_roster(self, players: Sequence[PlayerRecord]) -> bool:
        shared = sum(1 for player in players if player.player_id in self.player_ids)
        return shared >= CORE_PLAYER_OVERLAP

    def accumulate_match(self, match: MatchRecord) -> None:
        self.matches.append(match)

        if match.team1 is self:
            side, opponent = 1, match.team2
        elif match.team2 is self:
            side, opponent = 2, match.team1
        else:
            return

        if match.winner == side:
            self.wins += 1
            if opponent is not None and opponent is not self:
                self.defeated_roster_ids.add(opponent.roster_id)

    def record_event_participation(self, event: Event | None, team_id: int) -> None:
        """Attach placement/prize data using the event's own team id.

        ``team_id`` must be the per-event id from the match that referenced the
        event; once rosters replace team ids nothing else links the two.
        """
        if event is None or event.event_id in self.participations:
            return
        entry = event.prize_distribution_by_team_id.get(team_id)
        if entry is None:
            return

        self.participations[event.event_id] = EventParticipation(
            event=event,
            team_id=team_id,
            placement=entry.placement,
            prize=entry.prize,
            shared=entry.shared,
        )

    @staticmethod
    def initialize_seeding_modifiers(rosters: Sequence[Roster], context: RankingContextLike) -> None:
        """Derive seeding modifiers from prize money won and distinct opponents beaten."""
        for roster in rosters:
            roster.prize_winnings = sum(
                participation.prize
                * context.get_timestamp_modifier(participation.event.last_match_time)
                * context.event_importance(participation.event)
                for participation in roster.participations.values()
            )

        prize_ceiling = context.nth_highest(roster.prize_winnings for roster in rosters)
        network_ceiling = context.nth_highest(len(roster.defeated_roster_ids) for roster in rosters)

        for roster in rosters:
            roster.prize_modifier = _scaled(roster.prize_winnings, prize_ceiling)
            roster.network_modifier = _scaled(len(roster.defeated_roster_ids), network_ceiling)
            roster.seed_modifier = (roster.prize_modifier + roster.network_modifier) / 2.0

    def __repr__(self) -> str:
        return f"Roster(roster_id={self.roster_id}, name={self.name!r}, matches={len(self.matches)})"


def _scaled(value: float, ceiling: float) -> float:
    if ceiling <= 0.0:
        return 0.0
    return max(0.0, min(value / ceiling, 1.0))


class RosterResolver:
    """Registry of rosters created during one load.

    Candidates are looked up through a player index; a roster that shares no
    player with the query is never asked. Among candidates the earliest created
    roster wins, so the first (most recent) lineup seen names the roster.
    """

    def __init__(self, roster_class: type[RosterLike] = Roster) -> None:
        self.roster_class = roster_class
        self.rosters: list[RosterLike] = []
        self._rosters_by_player: dict[int, list[int]] = {}

    def insert_team(self, name: str, players: Sequence[PlayerRecord]) -> RosterLike:
        candidate_indexes: set[int] = set()
        for player in players:
            candidate_indexes.update(self._rosters_by_player.get(player.player_id, ()))

        for index in sorted(candidate_indexes):
            roster = self.rosters[index]
            if roster.shares_roster(players):
                return roster

        index = len(self.rosters)
        roster = self.roster_class(index, name, players)
        self.rosters.append(roster)
        for player in players:
            self._rosters_by_player.setdefault(player.player_id, []).append(index)
        return roster

    def resolve(self, matches: Iterable[MatchRecord], events: Mapping[int, Event]) -> list[RosterLike]:
        """Assign rosters to both sides of each match in the order given."""
        for match in matches:
            match.team1 = self.insert_team(match.team1_name, match.team1_players)
            match.team2 = self.insert_team(match.team2_name, match.team2_players)

            match.team1.accumulate_match(match)
            # Both lineups can fold into one roster; count the match once.
            if match.team2 is not match.team1:
                match.team2.accumulate_match(match)

            if match.event_id is not None:
                event = events.get(match.event_id)
                match.team1.record_event_participation(event, match.team1_id)
                match.team2.record_event_participation(event, match.team2_id)

        return self.rosters


__all__ = [
    "CORE_PLAYER_OVERLAP",
    "EventParticipation",
    "Roster",
    "RosterResolver",
]
