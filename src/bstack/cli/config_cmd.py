"""
bstack.cli.config_cmd — bstack config command.

  bstack config show
  bstack config set-capacity 32
"""

import sys
import click


@click.group("config")
def config_cmd():
    """Global config management."""
    pass


@config_cmd.command("show")
def config_show():
    """Show the effective configuration."""
    from bstack.config import (
        load_config, config_path, resolve_default_capacity, ConfigError,
    )

    try:
        cfg = load_config()
        effective = resolve_default_capacity()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Config file:       {config_path()}")
    click.echo(f"default_capacity:  {cfg.default_capacity}")
    if effective != cfg.default_capacity:
        click.echo(f"Effective:         {effective} (BSTACK_CAPACITY)")


@config_cmd.command("set-capacity")
@click.argument("capacity", type=int)
def config_set_capacity(capacity):
    """Set the default stack capacity."""
    from bstack.config import load_config, save_config, ConfigError

    try:
        cfg = load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    cfg.default_capacity = capacity
    save_config(cfg)
    click.echo(f"✓ default_capacity set to {capacity}")
