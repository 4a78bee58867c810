"""Config-driven standings load pipeline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from domain.protocol import MatchDataSource
from domain.standings.config import StandingsConfig
from domain.standings.context import RankingContext
from domain.standings.loader import SECONDS_PER_DAY, DataLoader


@dataclass(frozen=True)
class LoadSummary:
    """Outcome for one standings load."""

    system_name: str
    config_file: str
    start_time: int
    end_time: int
    calibration_end_time: int
    source_matches: int
    loaded_matches: int
    resolved_rosters: int
    loaded_events: int


def create_loader(
    data_source: MatchDataSource,
    system_config: StandingsConfig,
    *,
    echo: Callable[[str], None] | None = None,
) -> DataLoader:
    """Build a loader and rating context from one standings config."""
    parameters = system_config.parameters
    context = RankingContext(
        recency_min_multiplier=parameters.recency_min_multiplier,
        hve_prize_pool=parameters.hve_prize_pool,
    )
    loader = DataLoader(
        data_source,
        context,
        grace_period=parameters.grace_period_days * SECONDS_PER_DAY,
        echo=echo,
    )
    loader.set_hve_mod(parameters.hve_mod)
    loader.set_nth_highest(parameters.outlier_count)

    if system_config.lookback_days == 0:
        loader.clear_time_filter()
    else:
        loader.set_time_filter(data_window=system_config.lookback_days * SECONDS_PER_DAY)
    return loader


def load_standings(
    *,
    data_source: MatchDataSource,
    system_config: StandingsConfig,
    version_timestamp: int = -1,
    echo: Callable[[str], None] | None = None,
) -> tuple[DataLoader, LoadSummary]:
    """Run one load for a config and summarise what it produced."""
    loader = create_loader(data_source, system_config, echo=echo)
    loader.load_data(version_timestamp)

    if loader.time_window is None:
        raise RuntimeError("load_data finished without publishing a time window")
    start_time, end_time = loader.time_window
    summary = LoadSummary(
        system_name=system_config.name,
        config_file=system_config.file_path.name,
        start_time=start_time,
        end_time=end_time,
        calibration_end_time=end_time - loader.grace_period,
        source_matches=len(data_source.matches),
        loaded_matches=len(loader.matches),
        resolved_rosters=len(loader.teams),
        loaded_events=len(loader.events),
    )
    if echo is not None:
        echo(
            "completed "
            f"config={summary.config_file} "
            f"system={summary.system_name} "
            f"source_matches={summary.source_matches} "
            f"loaded_matches={summary.loaded_matches} "
            f"resolved_rosters={summary.resolved_rosters} "
            f"loaded_events={summary.loaded_events}"
        )
    return loader, summary


__all__ = ["LoadSummary", "create_loader", "load_standings"]
