"""
Settings - Starting values consumed when a new game is built.

Sources, later ones win:
1. Defaults on the Settings model
2. A settings file (JSON or TOML), given explicitly or via INNER_DEMONS_SETTINGS
3. INNER_DEMONS_* environment variables

Environment:
- INNER_DEMONS_SETTINGS: path to a settings file
- INNER_DEMONS_STARTING_RESOLVE
- INNER_DEMONS_STARTING_DEMON_POWER
- INNER_DEMONS_STARTING_DEMON_STUN_TIME
- INNER_DEMONS_HAND_SIZE
- INNER_DEMONS_SEED
"""

from __future__ import annotations
import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "INNER_DEMONS_"
SETTINGS_PATH_ENV = f"{ENV_PREFIX}SETTINGS"


class Settings(BaseModel):
    """Starting values for a new game. All counts are unsigned."""
    starting_resolve: int = Field(default=30, ge=0, description="Player resolve at game start")
    starting_demon_power: int = Field(default=1, ge=0, description="Damage each demon deals per turn")
    starting_demon_stun_time: int = Field(default=0, ge=0, description="Turns each demon starts stunned")
    hand_size: int = Field(default=5, ge=0, description="Opening hand and end-of-turn draw-up target")
    seed: Optional[int] = Field(default=None, description="Shuffle seed; random when unset")


def _read_settings_file(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    raise ValueError(f"Unsupported settings file type: {path.name} (use .json or .toml)")


def _env_overrides(env: Mapping[str, str]) -> dict[str, str]:
    """Pick INNER_DEMONS_<FIELD> values for known Settings fields."""
    overrides = {}
    for name in Settings.model_fields:
        val = env.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
        if val:
            overrides[name] = val
    return overrides


def load_settings(
    path: str | os.PathLike | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Load settings from file and environment.

    Raises FileNotFoundError if a settings file is named but missing,
    ValueError for an unknown file type, and pydantic.ValidationError
    for invalid values.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    file_path = path or env.get(SETTINGS_PATH_ENV, "").strip() or None
    if file_path:
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Settings file not found: {file_path}")
        values.update(_read_settings_file(file_path))
        logger.debug("Loaded settings file %s", file_path)

    values.update(_env_overrides(env))
    return Settings.model_validate(values)
