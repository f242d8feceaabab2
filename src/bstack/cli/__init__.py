"""
bstack.cli — CLI entry point.

Commands:
  bstack run -f scenario.yaml      — Replay a scenario
  bstack inspect -f scenario.yaml  — Show a parsed scenario
  bstack config show               — Show global config
  bstack config set-capacity N     — Set default capacity
"""

import click

from bstack.cli.run_cmd import run_cmd
from bstack.cli.inspect_cmd import inspect_cmd
from bstack.cli.config_cmd import config_cmd


@click.group()
@click.version_option(package_name="bstack")
def main():
    """bstack — bounded string stack toolkit."""
    pass


main.add_command(run_cmd, "run")
main.add_command(inspect_cmd, "inspect")
main.add_command(config_cmd, "config")
