"""TOML reading and named-system discovery for match rating configs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseSystemConfig:
    """Name and origin of one rating-system config file."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseSystemConfig)


def read_toml(file_path: Path) -> dict[str, Any]:
    with file_path.open("rb") as file:
        return tomllib.load(file)


def parse_system_metadata(raw: dict[str, Any], file_path: Path) -> tuple[str, str | None]:
    """Return ``(name, description)`` from a ``[system]`` table."""
    system_raw = raw.get("system", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)
    return name, description


def load_system_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    kind: str,
) -> list[T]:
    """Parse every ``*.toml`` in ``config_dir``, sorted by file name.

    System names must be unique across the directory so a match can be
    settled by name from the CLI.
    """
    if not config_dir.exists():
        raise FileNotFoundError(f"{kind} config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"{kind} config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"no {kind} .toml configs in {config_dir}")

    systems = [parser(read_toml(file_path), file_path) for file_path in config_files]

    clashes = sorted(name for name, count in Counter(system.name for system in systems).items() if count > 1)
    if clashes:
        raise ValueError(f"{kind} system names used by more than one file in {config_dir}: {clashes}")

    return systems


__all__ = ["BaseSystemConfig", "load_system_configs", "parse_system_metadata", "read_toml"]
