"""Standings ingestion: filtering, events, rosters and the data loader."""

from domain.standings.context import RankingContext
from domain.standings.event import Event, EventTeam
from domain.standings.filters import EmptyDatasetError
from domain.standings.loader import DataLoader
from domain.standings.roster import Roster, RosterResolver

__all__ = [
    "DataLoader",
    "EmptyDatasetError",
    "Event",
    "EventTeam",
    "RankingContext",
    "Roster",
    "RosterResolver",
]
