"""Smoke tests for the compute_match CLI."""

from __future__ import annotations

import importlib.util
from pathlib import Path

from typer.testing import CliRunner

ROOT_DIR = Path(__file__).resolve().parents[1]


def _load_cli():
    spec = importlib.util.spec_from_file_location("compute_match", ROOT_DIR / "scripts" / "compute_match.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_compute_prints_one_line_per_player() -> None:
    cli = _load_cli()
    result = CliRunner().invoke(cli.app, ["compute", str(ROOT_DIR / "data" / "sample_match.toml")])

    assert result.exit_code == 0, result.output
    assert "system=match_elo_default score=2-1" in result.output
    assert result.output.count("player_id=") == 10
    assert "total_delta=" in result.output


def test_compute_rejects_unknown_config_name() -> None:
    cli = _load_cli()
    result = CliRunner().invoke(
        cli.app,
        ["compute", str(ROOT_DIR / "data" / "sample_match.toml"), "--config-name", "missing.toml"],
    )

    assert result.exit_code != 0


def test_list_systems_prints_repository_configs() -> None:
    cli = _load_cli()
    result = CliRunner().invoke(cli.app, ["list-systems"])

    assert result.exit_code == 0, result.output
    assert "default.toml system=match_elo_default" in result.output
    assert "raw_formula.toml system=match_elo_raw" in result.output
