"""Theme command - print CSS custom properties for a brand."""

import click

from landingkit.cli.common import exit_with_error, load_app_config
from landingkit.colors import generate_theme_css, render_root_block
from landingkit.exceptions import LandingKitError


@click.command()
@click.argument("primary")
@click.option("--accent", "-a", default=None, help="Accent color (hex)")
@click.option("--font", "-f", "font_family", default=None, help="Font family name")
@click.option("--selector", default=None, help="CSS selector (default: from config, usually :root)")
@click.option("--bare", is_flag=True, help="Print declarations only, without the selector block")
@click.option("--strict", is_flag=True, help="Fail on an invalid color instead of using the fallback")
@click.pass_context
def theme(
    ctx: click.Context,
    primary: str,
    accent: str | None,
    font_family: str | None,
    selector: str | None,
    bare: bool,
    strict: bool,
):
    """
    Generate theme CSS for PRIMARY color (plus optional accent and font).

    \b
    Examples:
      landingkit theme "#0284c7"
      landingkit theme "#0284c7" --accent "#f97316" --font Inter
      landingkit theme "#0284c7" --bare > theme-vars.css
    """
    try:
        app_config = load_app_config(ctx)
        css = generate_theme_css(
            primary,
            accent_color=accent,
            font_family=font_family,
            fallback=None if strict else app_config.fallback_color,
        )
    except LandingKitError as e:
        exit_with_error(e)

    if bare:
        click.echo(css)
    else:
        click.echo(render_root_block(css, selector or app_config.css_selector))
