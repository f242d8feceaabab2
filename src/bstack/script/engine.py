"""
bstack.script.engine — Scenario runner.

Merges scenario files, parses them, and replays
every step against a fresh BoundedStack.

    bstack run -f scenario.yaml --capacity 2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from bstack.config import resolve_default_capacity
from bstack.core.stack import BoundedStack
from bstack.script.merger import merge_scenario_files
from bstack.script.parser import (
    parse_scenario_dict,
    ScenarioSpec,
    ScenarioParseError,
    StepSpec,
    stringify_value,
)


class ScenarioError(Exception):
    """Scenario run error."""
    pass


@dataclass
class StepResult:
    """Outcome of one replayed step.

    result is the op's observable value:
      push            → bool
      pop             → popped value, or None when empty
      peek            → value, or None past the bottom
      is_* predicates → bool
    """
    index: int
    op: str
    arg: Any
    result: Any
    expect: Any = None
    has_expect: bool = False

    @property
    def passed(self) -> bool | None:
        """None when the step carries no expectation."""
        if not self.has_expect:
            return None
        return _normalize_expect(self.op, self.expect) == self.result


@dataclass
class ScenarioRun:
    """A replayed scenario."""
    name: str
    capacity: int
    stack: BoundedStack
    results: list[StepResult] = field(default_factory=list)

    @property
    def failures(self) -> list[StepResult]:
        return [r for r in self.results if r.passed is False]

    @property
    def ok(self) -> bool:
        return not self.failures


def run_scenario(
    spec: ScenarioSpec,
    capacity: int | None = None,
    on_step: Callable[[StepResult, BoundedStack], None] | None = None,
) -> ScenarioRun:
    """Replay a parsed scenario.

    Args:
        spec: Parsed scenario
        capacity: Capacity override (wins over the scenario and config)
        on_step: Called after every step with its result and the stack

    Returns:
        ScenarioRun with one StepResult per step
    """
    if capacity is None:
        capacity = spec.capacity
    if capacity is None:
        capacity = resolve_default_capacity()

    stack = BoundedStack(capacity)
    run = ScenarioRun(name=spec.name, capacity=capacity, stack=stack)

    for i, step in enumerate(spec.steps):
        result = StepResult(
            index=i,
            op=step.op,
            arg=step.arg,
            result=_apply(stack, step),
            expect=step.expect,
            has_expect=step.has_expect,
        )
        run.results.append(result)
        if on_step is not None:
            on_step(result, stack)

    return run


def render_scenario(
    file_paths: list[str | Path],
    capacity: int | None = None,
    on_step: Callable[[StepResult, BoundedStack], None] | None = None,
) -> ScenarioRun:
    """Merge, parse and replay scenario files.

    Raises:
        ScenarioError: Invalid scenario or overlay
        FileNotFoundError: A file is missing
    """
    try:
        merged = merge_scenario_files(file_paths)
    except ValueError as e:
        raise ScenarioError(f"Overlay error: {e}") from e

    try:
        spec = parse_scenario_dict(merged)
    except ScenarioParseError as e:
        raise ScenarioError(f"Scenario parse error: {e}") from e

    return run_scenario(spec, capacity=capacity, on_step=on_step)


def _apply(stack: BoundedStack, step: StepSpec) -> Any:
    if step.op == "push":
        return stack.try_push(step.arg)
    if step.op == "pop":
        popped = stack.try_pop()
        return popped.value if popped else None
    if step.op == "peek":
        return stack.peek(step.arg)
    if step.op == "is_empty":
        return stack.is_empty
    if step.op == "is_full":
        return stack.is_full
    if step.op == "is_homogeneous":
        return stack.is_homogeneous()
    raise ScenarioError(f"Unknown op: '{step.op}'")


def _normalize_expect(op: str, expect: Any) -> Any:
    # pop/peek yield stored text; compare YAML scalars the way push stores them
    if expect is None or isinstance(expect, str):
        return expect
    if op in ("pop", "peek"):
        return stringify_value(expect)
    if isinstance(expect, bool):
        return expect
    return str(expect)
