"""
bstack.cli.run_cmd — bstack run command.

  bstack run -f scenario.yaml
  bstack run -f scenario.yaml -f overlay.yaml --capacity 2
  bstack run -f scenario.yaml -o report.txt --verbose
"""

import sys
import click


@click.command("run")
@click.option("-f", "--file", "scenario_files", multiple=True, required=True,
              help="Scenario file, then overlays (multiple allowed)")
@click.option("-c", "--capacity", type=int, default=None,
              help="Stack capacity (overrides scenario and config)")
@click.option("-o", "--output", default=None,
              help="Output file (default: stdout)")
@click.option("-v", "--verbose", is_flag=True,
              help="Trace stack state after each step (stderr)")
def run_cmd(scenario_files, capacity, output, verbose):
    """Replay a scenario against a bounded stack."""
    from bstack.config import ConfigError
    from bstack.script.engine import render_scenario, ScenarioError

    on_step = _trace if verbose else None

    try:
        run = render_scenario(
            list(scenario_files),
            capacity=capacity,
            on_step=on_step,
        )
    except (FileNotFoundError, ScenarioError, ConfigError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    lines = [f"Scenario: {run.name} (capacity {run.capacity})"]
    lines.extend(format_step(r) for r in run.results)

    checked = sum(1 for r in run.results if r.has_expect)
    failed = len(run.failures)
    lines.append(
        f"{len(run.results)} steps, {checked} checked, {failed} failed"
    )

    _output("\n".join(lines), output)

    if not run.ok:
        sys.exit(1)


def format_step(result) -> str:
    """One report line: [idx] op arg -> result (✓/✗)."""
    arg = "" if result.arg is None else f" {result.arg!r}"
    line = f"[{result.index}] {result.op}{arg} -> {_show(result.result)}"
    if result.passed is True:
        line += "  ✓"
    elif result.passed is False:
        line += f"  ✗ expected {_show(result.expect)}"
    return line


def _show(value) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value) if isinstance(value, str) else str(value)


def _trace(result, stack):
    click.echo(
        f"  step {result.index}: {result.op} "
        f"count={stack.count}/{stack.max_capacity} "
        f"top={_show(stack.peek(0))}",
        err=True,
    )


def _output(text, output):
    if output:
        with open(output, "w") as f:
            f.write(text + "\n")
        click.echo(f"Written to {output}", err=True)
    else:
        click.echo(text)
