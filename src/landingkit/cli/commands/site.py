"""Site commands - validate and inspect site files."""

import logging
import sys
from pathlib import Path

import click

from landingkit.cli.common import exit_with_error, load_app_config, load_site
from landingkit.colors import render_root_block, theme_to_css
from landingkit.exceptions import LandingKitError, collect_errors
from landingkit.models import SiteConfig

logger = logging.getLogger(__name__)

_site_path = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group(name="site")
def site_group():
    """Validate and inspect site files."""
    pass


@site_group.command(name="validate")
@click.argument("files", nargs=-1, required=True, type=_site_path)
def validate(files: tuple[Path, ...]):
    """
    Validate one or more site FILES against the content schema.

    All files are checked; failures are reported together.
    """
    collector = collect_errors("validate site files")

    for path in files:
        with collector.try_operation(str(path)):
            SiteConfig.load(path)
            click.echo(f"[OK]   {path}")

    if collector.has_errors:
        for path, _ in collector.errors:
            click.echo(f"[FAIL] {path}", err=True)
        click.echo("", err=True)
        click.echo(collector.get_summary(), err=True)
        for _, error in collector.errors:
            hint = getattr(error, "recovery_hint", None)
            if hint:
                click.echo(f"\n{hint}", err=True)
        sys.exit(1)

    logger.info(collector.get_summary())


@site_group.command(name="outline")
@click.argument("site_file", required=False, type=_site_path)
@click.pass_context
def outline(ctx: click.Context, site_file: Path | None):
    """Show the AIDA section outline of SITE_FILE."""
    try:
        site = load_site(ctx, site_file)
    except (LandingKitError, FileNotFoundError) as e:
        exit_with_error(e)

    click.echo(f"{site.brand} - {site.tagline}")
    for name, stage, section in site.aida_sections():
        title = getattr(section, "section_title", None) or getattr(section, "headline", "")
        click.echo(f"  {stage.value.upper():<9}  {name:<8}  {title}")

    optional = [name for name in ("pricing", "faq") if getattr(site, name) is not None]
    if optional:
        click.echo(f"  Optional sections: {', '.join(optional)}")


@site_group.command(name="theme")
@click.argument("site_file", required=False, type=_site_path)
@click.option("--bare", is_flag=True, help="Print declarations only, without the selector block")
@click.pass_context
def site_theme(ctx: click.Context, site_file: Path | None, bare: bool):
    """Generate theme CSS from the theme block of SITE_FILE."""
    try:
        site = load_site(ctx, site_file)
        app_config = load_app_config(ctx)
    except (LandingKitError, FileNotFoundError) as e:
        exit_with_error(e)

    if site.theme is None:
        click.echo("ERROR: Site file has no theme configuration", err=True)
        click.echo('\nAdd a "theme" block with at least "primaryColor".', err=True)
        sys.exit(1)

    css = theme_to_css(site.theme, fallback=app_config.fallback_color)
    click.echo(css if bare else render_root_block(css, app_config.css_selector))
