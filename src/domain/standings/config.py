"""Load standings loader settings from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_configs, parse_system_metadata


@dataclass(frozen=True)
class StandingsParameters:
    grace_period_days: int = 30
    recency_min_multiplier: float = 1.0
    hve_mod: float = 1.0
    hve_prize_pool: int = 1_000_000
    outlier_count: int = 5


@dataclass(frozen=True)
class StandingsConfig(BaseSystemConfig):
    """Configuration for one standings data load."""

    parameters: StandingsParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "lookback_days": self.lookback_days,
            "grace_period_days": self.parameters.grace_period_days,
            "recency_min_multiplier": self.parameters.recency_min_multiplier,
            "hve_mod": self.parameters.hve_mod,
            "hve_prize_pool": self.parameters.hve_prize_pool,
            "outlier_count": self.parameters.outlier_count,
        }


def load_standings_configs(config_dir: Path) -> list[StandingsConfig]:
    """Load and validate all standings TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_standings_config,
        duplicate_name_label="standings",
    )


def _parse_standings_config(raw: dict[str, Any], file_path: Path) -> StandingsConfig:
    name, description, lookback_days = parse_system_metadata(raw, file_path)
    standings_raw = raw.get("standings", {})

    parameters = StandingsParameters(
        grace_period_days=int(standings_raw.get("grace_period_days", 30)),
        recency_min_multiplier=float(standings_raw.get("recency_min_multiplier", 1.0)),
        hve_mod=float(standings_raw.get("hve_mod", 1.0)),
        hve_prize_pool=int(standings_raw.get("hve_prize_pool", 1_000_000)),
        outlier_count=int(standings_raw.get("outlier_count", 5)),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return StandingsConfig(
        name=name,
        description=description,
        file_path=file_path,
        lookback_days=lookback_days,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: StandingsParameters) -> None:
    if parameters.grace_period_days < 0:
        raise ValueError(f"{file_path}: [standings].grace_period_days must be >= 0")
    if parameters.recency_min_multiplier < 0.0 or parameters.recency_min_multiplier > 1.0:
        raise ValueError(f"{file_path}: [standings].recency_min_multiplier must be between 0 and 1")
    if parameters.hve_mod <= 0.0:
        raise ValueError(f"{file_path}: [standings].hve_mod must be > 0")
    if parameters.hve_prize_pool < 0:
        raise ValueError(f"{file_path}: [standings].hve_prize_pool must be >= 0")
    if parameters.outlier_count < 1:
        raise ValueError(f"{file_path}: [standings].outlier_count must be >= 1")
