"""Config commands: show and initialize the configuration file."""

import click

from lampmix.cli.session import load_config, report_errors
from lampmix.models import AppConfig
from lampmix.models.config import DEFAULT_CONFIG_PATH


@click.group(name="config")
def config_group():
    """Configuration commands."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Print the active configuration as JSON."""
    with report_errors("load configuration"):
        config = load_config(ctx)
        click.echo(config.model_dump_json(indent=2))


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing file (a .bak copy is kept)")
@click.pass_context
def init_config(ctx, force: bool):
    """Write the default configuration (reference RGBAW lamp) to disk."""
    path = (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    with report_errors("write configuration"):
        AppConfig().save(path)
        click.echo(f"Wrote default configuration to {path}")
