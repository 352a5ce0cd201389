#!/usr/bin/env python3
"""Compute per-player rating deltas for one match file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.ratings.elo.calculator import MatchEloCalculator
from domain.ratings.elo.config import EloSystemConfig, load_elo_system_configs
from domain.ratings.elo.match_adapter import build_match
from domain.ratings.elo.match_file import load_match_file

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "elo"
DEFAULT_CONFIG_NAME = "default.toml"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Match Elo settlement commands.",
)


def select_config(config_dir: Path, config_name: str) -> EloSystemConfig:
    configs = load_elo_system_configs(config_dir)
    for config in configs:
        if config.file_path.name == config_name:
            return config
    raise typer.BadParameter(
        f"No config named '{config_name}' found in {config_dir}",
        param_hint="--config-name",
    )


@app.command()
def compute(
    match_file: Annotated[
        Path,
        typer.Argument(help="TOML file with [home] and [away] player tables."),
    ],
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of Elo system TOML files."),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str,
        typer.Option("--config-name", help="Config filename to use (for example: default.toml)."),
    ] = DEFAULT_CONFIG_NAME,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log per-side and per-player intermediate values."),
    ] = False,
) -> None:
    """Print the rating delta of every player in MATCH_FILE."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = select_config(config_dir, config_name)
    try:
        snapshot = load_match_file(match_file)
        match = build_match(
            snapshot.home_players,
            snapshot.away_players,
            params=config.parameters,
            home_goalkeeper_id=snapshot.home_goalkeeper_id,
            away_goalkeeper_id=snapshot.away_goalkeeper_id,
        )
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="MATCH_FILE") from exc

    events = MatchEloCalculator(config.parameters).process_match(match)

    typer.echo(
        f"system={config.name} score={match.home_goals}-{match.away_goals} "
        f"home_working_rating={match.home.working_rating:.1f} "
        f"away_working_rating={match.away.working_rating:.1f}"
    )
    for event in events:
        typer.echo(
            f"side={event.side} player_id={event.player_id} name={event.name} "
            f"goals={event.goals} delta={event.rating_delta:+.2f}"
        )
    typer.echo(f"total_delta={sum(event.rating_delta for event in events):.6f}")


@app.command()
def list_systems(
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of Elo system TOML files."),
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """Print every Elo system config found in the config directory."""
    for config in load_elo_system_configs(config_dir):
        typer.echo(f"{config.file_path.name} system={config.name} description={config.description}")


if __name__ == "__main__":
    app()
