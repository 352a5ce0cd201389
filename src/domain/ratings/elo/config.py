"""Load match Elo system definitions from TOML files."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_configs, parse_system_metadata
from domain.ratings.elo.parameters import EloParameters

_DEFAULTS = EloParameters()


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """Configuration for one named match Elo system."""

    parameters: EloParameters

    def as_config_json(self) -> dict[str, Any]:
        return asdict(self.parameters)


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_elo_system_config,
        kind="elo",
    )


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    name, description = parse_system_metadata(raw, file_path)
    parameters = parse_elo_parameters(raw.get("elo", {}), file_path)
    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def parse_elo_parameters(elo_raw: dict[str, Any], file_path: Path) -> EloParameters:
    known = {field.name for field in fields(EloParameters)}
    unknown = sorted(set(elo_raw) - known)
    if unknown:
        raise ValueError(f"{file_path}: unknown [elo] keys: {unknown}")

    values: dict[str, Any] = {}
    for field in fields(EloParameters):
        default = getattr(_DEFAULTS, field.name)
        value = elo_raw.get(field.name, default)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ValueError(f"{file_path}: [elo].{field.name} must be true or false")
            values[field.name] = value
        elif isinstance(default, int):
            values[field.name] = int(value)
        else:
            values[field.name] = float(value)

    parameters = EloParameters(**values)
    _validate_parameters(file_path=file_path, parameters=parameters)
    return parameters


def _validate_parameters(*, file_path: Path, parameters: EloParameters) -> None:
    if parameters.elo_diff_divisor <= 0.0:
        raise ValueError(f"{file_path}: [elo].elo_diff_divisor must be > 0")
    if parameters.draw_score != 0.5:
        # draws are zero-sum only at 0.5
        raise ValueError(f"{file_path}: [elo].draw_score must be 0.5")
    if parameters.draw_dampening < 0.0 or parameters.draw_dampening > 1.0:
        raise ValueError(f"{file_path}: [elo].draw_dampening must be between 0 and 1")
    if parameters.experience_weight < 0.0:
        raise ValueError(f"{file_path}: [elo].experience_weight must be >= 0")
    if parameters.min_q_factor < 0.0 or parameters.min_q_factor > 1.0:
        raise ValueError(f"{file_path}: [elo].min_q_factor must be between 0 and 1")
    for name in ("k_factor_high", "k_factor_mid", "k_factor_low"):
        if getattr(parameters, name) <= 0.0:
            raise ValueError(f"{file_path}: [elo].{name} must be > 0")
    if parameters.k_factor_mid_threshold > parameters.k_factor_high_threshold:
        raise ValueError(
            f"{file_path}: [elo].k_factor_mid_threshold must be <= k_factor_high_threshold"
        )
    if parameters.fatigue_reference_minutes <= 0.0:
        raise ValueError(f"{file_path}: [elo].fatigue_reference_minutes must be > 0")
    if parameters.chemistry_neutral_score < 0.0 or parameters.chemistry_neutral_score > 1.0:
        raise ValueError(f"{file_path}: [elo].chemistry_neutral_score must be between 0 and 1")
    if parameters.chemistry_full_confidence_games <= 0:
        raise ValueError(f"{file_path}: [elo].chemistry_full_confidence_games must be > 0")
    if parameters.chemistry_min_coefficient < 0.0:
        raise ValueError(f"{file_path}: [elo].chemistry_min_coefficient must be >= 0")
    if parameters.chemistry_min_coefficient > parameters.chemistry_max_coefficient:
        raise ValueError(
            f"{file_path}: [elo].chemistry_min_coefficient must be <= chemistry_max_coefficient"
        )
    for name in (
        "clean_sheet_bonus",
        "one_conceded_bonus",
        "two_conceded_bonus",
        "clutch_loss_to_draw_bonus",
        "clutch_draw_to_win_bonus",
        "clutch_loss_to_win_bonus",
        "one_goal_bonus",
        "two_goal_bonus",
    ):
        if getattr(parameters, name) < 0.0:
            raise ValueError(f"{file_path}: [elo].{name} must be >= 0")
    if parameters.goalkeeper_goal_multiplier < 1.0:
        raise ValueError(f"{file_path}: [elo].goalkeeper_goal_multiplier must be >= 1")
    if parameters.loss_goal_multiplier <= 0.0:
        raise ValueError(f"{file_path}: [elo].loss_goal_multiplier must be > 0")
