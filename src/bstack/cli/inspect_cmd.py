"""bstack.cli.inspect_cmd — bstack inspect command."""

import sys
import click


@click.command("inspect")
@click.option("-f", "--file", "scenario_files", multiple=True, required=True,
              help="Scenario file, then overlays (multiple allowed)")
def inspect_cmd(scenario_files):
    """Show a scenario without running it."""
    from bstack.script.merger import merge_scenario_files
    from bstack.script.parser import parse_scenario_dict, ScenarioParseError

    try:
        spec = parse_scenario_dict(merge_scenario_files(list(scenario_files)))
    except (FileNotFoundError, ValueError, ScenarioParseError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    capacity = spec.capacity if spec.capacity is not None else "(config default)"
    click.echo(f"Name:      {spec.name}")
    click.echo(f"Capacity:  {capacity}")
    click.echo(f"Steps:     {len(spec.steps)}")

    for i, step in enumerate(spec.steps):
        arg = "" if step.arg is None else f" {step.arg!r}"
        expect = f"  (expect {step.expect!r})" if step.has_expect else ""
        click.echo(f"  {i:3d}  {step.op}{arg}{expect}")
