"""
Config commands - view and change application settings.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config set --option VALUE ...   # Update configuration
    - config reset                    # Restore defaults
"""

from pathlib import Path

import click
from pydantic import ValidationError

from landingkit.cli.common import config_path, exit_with_error, load_app_config
from landingkit.exceptions import LandingKitError, wrap_pydantic_error
from landingkit.models import AppConfig
from landingkit.models.config import DEFAULT_CONFIG_PATH


def _resolved_path(ctx: click.Context) -> Path:
    return config_path(ctx) or DEFAULT_CONFIG_PATH


@click.group(name="config", invoke_without_command=True)
@click.option("--field", default=None, help="Show a single field")
@click.pass_context
def config(ctx: click.Context, field: str | None):
    """Configure LandingKit settings (shows the configuration by default)."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(show, field=field)


@config.command(name="show")
@click.option("--field", default=None, help="Show a single field")
@click.pass_context
def show(ctx: click.Context, field: str | None):
    """Display the current configuration."""
    try:
        app_config = load_app_config(ctx)
    except LandingKitError as e:
        exit_with_error(e)

    values = app_config.model_dump(mode="json")
    if field is not None:
        if field not in values:
            raise click.BadParameter(
                f"Unknown field '{field}'. Choose from: {', '.join(values)}", param_hint="--field"
            )
        click.echo(values[field])
        return

    click.echo(f"Config file: {_resolved_path(ctx)}")
    for name, value in values.items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option("--fallback-color", default=None, help="Fallback color for invalid brand colors")
@click.option("--css-selector", default=None, help="Selector wrapping theme declarations")
@click.option("--site-path", default=None, type=click.Path(path_type=Path), help="Default site file")
@click.pass_context
def set_values(
    ctx: click.Context,
    fallback_color: str | None,
    css_selector: str | None,
    site_path: Path | None,
):
    """Update configuration values and save."""
    updates = {
        name: value
        for name, value in (
            ("fallback_color", fallback_color),
            ("css_selector", css_selector),
            ("site_path", site_path),
        )
        if value is not None
    }
    if not updates:
        raise click.UsageError("Nothing to set. Pass at least one option (see --help).")

    path = _resolved_path(ctx)
    try:
        current = load_app_config(ctx)
        updated = AppConfig.model_validate({**current.model_dump(), **updates})
        updated.save(path)
    except ValidationError as e:
        exit_with_error(wrap_pydantic_error(e, str(path)))
    except (LandingKitError, OSError) as e:
        exit_with_error(e)

    for name, value in updates.items():
        click.echo(f"Set {name} = {value}")


@config.command(name="reset")
@click.option("--yes", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Reset all settings to their defaults."""
    path = _resolved_path(ctx)
    if not yes:
        click.confirm(f"Reset configuration at {path}?", abort=True)

    try:
        AppConfig().save(path)
    except OSError as e:
        exit_with_error(e)
    click.echo("Configuration reset to defaults")
