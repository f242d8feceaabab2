"""
bstack.script.merger — Scenario overlay merger.

Merges multiple -f files:
  bstack run -f scenario.yaml -f tight.yaml

Merge strategy:
  - First file must be the base scenario (apiVersion, kind, metadata, steps)
  - Subsequent files are overlays:
      capacity     → replaces the base capacity
      metadata     → deep merged (both sides must be mappings)
      extra_steps  → appended to the step list
      steps        → replaces the step list

Overlay format:
    capacity: 1
    extra_steps:
      - push: x
      - is_full
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml


def merge_scenario_files(file_paths: list[str | Path]) -> dict[str, Any]:
    """Merge a base scenario with overlay files (in precedence order)."""
    if not file_paths:
        raise ValueError("At least one file is required")

    base = _load_yaml(file_paths[0])

    for fp in file_paths[1:]:
        overlay = _load_yaml(fp)
        base = _merge_overlay(base, overlay)

    return base


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dicts. Override wins.

    >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"b": 99}})
    {'a': {'b': 99, 'c': 2}}
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")
    with open(p) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML mapping in {p}")
    return data


def _merge_overlay(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)

    if "capacity" in overlay:
        result["capacity"] = overlay["capacity"]

    if "metadata" in overlay:
        base_metadata = result.get("metadata", {})
        if not isinstance(base_metadata, dict):
            raise ValueError("metadata must be a mapping")
        if not isinstance(overlay["metadata"], dict):
            raise ValueError("overlay metadata must be a mapping")
        result["metadata"] = deep_merge(base_metadata, overlay["metadata"])

    if "steps" in overlay:
        result["steps"] = copy.deepcopy(overlay["steps"])

    extra = overlay.get("extra_steps")
    if extra:
        if not isinstance(extra, list):
            raise ValueError("extra_steps must be a list")
        steps = result.get("steps") or []
        if not isinstance(steps, list):
            raise ValueError("steps must be a list")
        result["steps"] = steps + copy.deepcopy(extra)

    return result
