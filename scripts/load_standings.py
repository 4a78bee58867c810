#!/usr/bin/env python3
"""Load the match corpus into roster-resolved standings data and report on it."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import read_only_session
from domain.common import MatchData
from domain.pipeline import load_standings
from domain.standings.config import StandingsConfig, load_standings_configs
from domain.standings.filters import EmptyDatasetError
from repositories.corpus import load_match_data_json
from repositories.corpus_repository import fetch_match_data

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "standings"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Standings data-loading commands.",
)


def _select_configs(config_dir: Path, config_name: str | None) -> list[StandingsConfig]:
    configs = load_standings_configs(config_dir)
    if config_name is None:
        return configs

    configs = [config for config in configs if config.file_path.name == config_name]
    if not configs:
        raise typer.BadParameter(
            f"No config named '{config_name}' found in {config_dir}",
            param_hint="--config-name",
        )
    return configs


def _read_corpus(corpus: Path | None, db_url: str | None) -> MatchData:
    if corpus is not None and db_url is not None:
        raise typer.BadParameter("Pass either --corpus or --db-url, not both")
    if corpus is not None:
        return load_match_data_json(corpus)
    if db_url is not None:
        with read_only_session(db_url) as session:
            return fetch_match_data(session)
    raise typer.BadParameter("One of --corpus or --db-url is required")


@app.command()
def load(
    corpus: Annotated[
        Path | None,
        typer.Option("--corpus", help="Path to a matchdata.json export."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL to read the corpus from instead of JSON."),
    ] = None,
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of standings TOML configs."),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str | None,
        typer.Option(
            "--config-name",
            help="Optional single config filename (for example: default.toml).",
        ),
    ] = None,
    version_timestamp: Annotated[
        int,
        typer.Option(
            "--version-timestamp",
            help="Unix time the standings are computed as of. Defaults to the latest match.",
        ),
    ] = -1,
    top: Annotated[
        int,
        typer.Option("--top", help="Number of rosters to print, by seed modifier."),
    ] = 10,
) -> None:
    """Run the standings load for all or one config file."""
    if top < 0:
        raise typer.BadParameter("--top must be >= 0")

    configs = _select_configs(config_dir, config_name)
    match_data = _read_corpus(corpus, db_url)
    typer.echo(
        f"loaded_configs={len(configs)} "
        f"config_dir={config_dir} "
        f"source_events={len(match_data.events)} "
        f"source_matches={len(match_data.matches)}"
    )

    for config in configs:
        try:
            loader, _ = load_standings(
                data_source=match_data,
                system_config=config,
                version_timestamp=version_timestamp,
                echo=typer.echo,
            )
        except EmptyDatasetError as exc:
            typer.echo(f"skipped config={config.file_path.name} reason={exc}", err=True)
            continue

        ranked = sorted(loader.teams, key=lambda roster: (-roster.seed_modifier, roster.roster_id))
        for position, roster in enumerate(ranked[:top], start=1):
            players = ",".join(player.nick for player in roster.players)
            typer.echo(
                f"{position:>3}. {roster.name:<24} "
                f"roster_id={roster.roster_id} "
                f"seed={roster.seed_modifier:.3f} "
                f"prize={roster.prize_modifier:.3f} "
                f"network={roster.network_modifier:.3f} "
                f"matches={len(roster.matches)} "
                f"wins={roster.wins} "
                f"players={players}"
            )


@app.command()
def list_configs(
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of standings TOML configs."),
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """Print every standings config found in the config directory."""
    for config in load_standings_configs(config_dir):
        typer.echo(f"{config.file_path.name} system={config.name} {config.as_config_json()}")


if __name__ == "__main__":
    app()
