"""
bstack.config — Global config management.

~/.bstack/config.yaml:

    default_capacity: 16

The default capacity is used by `bstack run` when neither
--capacity nor the scenario file sets one.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


BSTACK_HOME = Path.home() / ".bstack"

DEFAULT_CAPACITY = 16


class ConfigError(Exception):
    """Config error."""
    pass


@dataclass
class BstackConfig:
    """Global bstack config."""
    default_capacity: int = DEFAULT_CAPACITY


def config_path() -> Path:
    return BSTACK_HOME / "config.yaml"


def load_config() -> BstackConfig:
    """Read ~/.bstack/config.yaml."""
    cp = config_path()
    if not cp.exists():
        return BstackConfig()

    with open(cp) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"{cp} must be a YAML mapping")

    cfg = BstackConfig()
    capacity = data.get("default_capacity", DEFAULT_CAPACITY)
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConfigError(
            f"default_capacity must be an integer, got {capacity!r}"
        )
    cfg.default_capacity = capacity
    return cfg


def save_config(cfg: BstackConfig) -> None:
    """Write ~/.bstack/config.yaml."""
    BSTACK_HOME.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {"default_capacity": cfg.default_capacity}

    with open(config_path(), "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def resolve_default_capacity() -> int:
    """Resolve the default stack capacity.

    Priority:
      1. BSTACK_CAPACITY env var
      2. ~/.bstack/config.yaml default_capacity
      3. DEFAULT_CAPACITY
    """
    env_var = os.environ.get("BSTACK_CAPACITY", "").strip()
    if env_var:
        try:
            return int(env_var)
        except ValueError:
            raise ConfigError(
                f"BSTACK_CAPACITY must be an integer, got '{env_var}'"
            ) from None

    return load_config().default_capacity
