"""bstack.script — YAML scenario replay."""

from bstack.script.parser import (
    parse_scenario_file,
    parse_scenario_dict,
    ScenarioSpec,
    StepSpec,
    ScenarioParseError,
)
from bstack.script.merger import merge_scenario_files
from bstack.script.engine import (
    run_scenario,
    render_scenario,
    ScenarioRun,
    StepResult,
    ScenarioError,
)

__all__ = [
    "parse_scenario_file",
    "parse_scenario_dict",
    "ScenarioSpec",
    "StepSpec",
    "ScenarioParseError",
    "merge_scenario_files",
    "run_scenario",
    "render_scenario",
    "ScenarioRun",
    "StepResult",
    "ScenarioError",
]
