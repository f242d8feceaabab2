"""
bstack.script.parser — Scenario YAML parser.

scenario.yaml format:

    apiVersion: bstack.io/v1
    kind: Scenario
    metadata:
      name: gift-queue
    capacity: 3
    steps:
      - push: a
      - push: d
        expect: false
      - peek: 1
      - pop
      - is_full

Parser reads the scenario file, validates it, and
converts it to a ScenarioSpec object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


# op name → argument kind (None = takes no argument)
OPS: dict[str, str | None] = {
    "push": "value",
    "pop": None,
    "peek": "depth",
    "is_empty": None,
    "is_full": None,
    "is_homogeneous": None,
}


@dataclass
class StepSpec:
    """A single scenario step."""
    op: str
    arg: Any = None
    expect: Any = None
    has_expect: bool = False


@dataclass
class ScenarioSpec:
    """Parsed scenario definition."""
    name: str
    capacity: int | None = None
    steps: list[StepSpec] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)


class ScenarioParseError(Exception):
    """Scenario parse error."""
    pass


def parse_scenario_file(path: str | Path) -> ScenarioSpec:
    """Parse a scenario.yaml file.

    Raises:
        ScenarioParseError: Format error
        FileNotFoundError: File not found
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Scenario file not found: {p}")

    with open(p) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ScenarioParseError(
            f"Scenario file must be a YAML mapping, got {type(data).__name__}"
        )

    return parse_scenario_dict(data)


def parse_scenario_dict(data: dict[str, Any]) -> ScenarioSpec:
    """Create a ScenarioSpec from a dict."""
    api_version = data.get("apiVersion", "")
    if api_version and api_version != "bstack.io/v1":
        raise ScenarioParseError(
            f"Unsupported apiVersion: '{api_version}'. Expected 'bstack.io/v1'"
        )

    kind = data.get("kind", "")
    if kind and kind != "Scenario":
        raise ScenarioParseError(
            f"Unsupported kind: '{kind}'. Expected 'Scenario'"
        )

    metadata = data.get("metadata", {})
    if not isinstance(metadata, dict):
        raise ScenarioParseError("metadata must be a mapping")

    name = metadata.get("name", "")
    if not name:
        raise ScenarioParseError("metadata.name is required")

    capacity = data.get("capacity")
    if capacity is not None and not _is_int(capacity):
        raise ScenarioParseError(
            f"capacity must be an integer, got {capacity!r}"
        )

    steps_raw = data.get("steps", [])
    if not isinstance(steps_raw, list):
        raise ScenarioParseError("steps must be a list")

    steps = [_parse_step(i, raw) for i, raw in enumerate(steps_raw)]

    return ScenarioSpec(
        name=str(name),
        capacity=capacity,
        steps=steps,
        raw=data,
    )


def _parse_step(i: int, raw: Any) -> StepSpec:
    """Parse one entry of the steps list.

    Accepts a bare op name ("pop") or a mapping with exactly
    one op key plus an optional "expect" key.
    """
    if isinstance(raw, str):
        return _build_step(i, raw, None, has_arg=False)

    if not isinstance(raw, dict):
        raise ScenarioParseError(
            f"steps[{i}] must be an op name or a mapping"
        )

    body = dict(raw)
    has_expect = "expect" in body
    expect = body.pop("expect", None)

    if len(body) != 1:
        raise ScenarioParseError(
            f"steps[{i}] must contain exactly one op, got {sorted(body)}"
        )

    op, arg = next(iter(body.items()))
    step = _build_step(i, op, arg, has_arg=arg is not None or op in ("push", "peek"))
    step.expect = expect
    step.has_expect = has_expect
    return step


def _build_step(i: int, op: Any, arg: Any, has_arg: bool) -> StepSpec:
    if op not in OPS:
        raise ScenarioParseError(
            f"steps[{i}]: unknown op '{op}'. Supported: {', '.join(OPS)}"
        )

    kind = OPS[op]
    if kind is None:
        if has_arg:
            raise ScenarioParseError(f"steps[{i}]: '{op}' takes no argument")
        return StepSpec(op=op)

    if not has_arg:
        raise ScenarioParseError(f"steps[{i}]: '{op}' requires an argument")

    if kind == "value":
        if arg is None or isinstance(arg, (dict, list)):
            raise ScenarioParseError(
                f"steps[{i}]: push value must be a scalar, got {arg!r}"
            )
        return StepSpec(op=op, arg=stringify_value(arg))

    if not _is_int(arg):
        raise ScenarioParseError(
            f"steps[{i}]: peek depth must be an integer, got {arg!r}"
        )
    return StepSpec(op=op, arg=arg)


def stringify_value(value: Any) -> str:
    """YAML scalars → the text the stack stores."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
