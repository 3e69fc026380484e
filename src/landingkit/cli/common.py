"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from landingkit.exceptions import format_error_for_display
from landingkit.models import AppConfig, SiteConfig

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path | None:
    """Config file chosen with --config (None = default location)."""
    return ctx.find_root().ensure_object(dict).get("config_path")


def load_app_config(ctx: click.Context) -> AppConfig:
    """Load the application config once per invocation."""
    obj = ctx.find_root().ensure_object(dict)
    if "app_config" not in obj:
        obj["app_config"] = AppConfig.load_or_default(config_path(ctx))
    return obj["app_config"]


def load_site(ctx: click.Context, path: Path | None) -> SiteConfig:
    """Load a site file, defaulting to the configured site path."""
    if path is None:
        path = load_app_config(ctx).site_path
    return SiteConfig.load(path)


def exit_with_error(error: Exception) -> NoReturn:
    """Show a clean error message (no traceback) and exit with status 1."""
    logger.debug("Command failed", exc_info=error)

    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)
