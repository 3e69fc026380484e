"""Palette command - print the generated shades for one color."""

import json

import click

from landingkit.cli.common import exit_with_error, load_app_config
from landingkit.colors import DECLARATION_SEPARATOR, generate_palette, hex_to_hsl, palette_to_css
from landingkit.exceptions import LandingKitError


@click.command()
@click.argument("color")
@click.option("--prefix", "-p", default="primary", show_default=True, help="CSS variable prefix")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["css", "json", "table"], case_sensitive=False),
    default="css",
    show_default=True,
    help="Output format",
)
@click.option("--strict", is_flag=True, help="Fail on an invalid color instead of using the fallback")
@click.pass_context
def palette(ctx: click.Context, color: str, prefix: str, output_format: str, strict: bool):
    """
    Generate the 50-950 palette for COLOR (e.g. "#0284c7").

    \b
    Examples:
      landingkit palette "#0284c7"
      landingkit palette 0284c7 --prefix brand
      landingkit palette "#f97316" --format table
    """
    try:
        fallback = None if strict else load_app_config(ctx).fallback_color
        shades = generate_palette(color, fallback=fallback)
    except LandingKitError as e:
        exit_with_error(e)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(json.dumps(shades, indent=2))
    elif output_format == "table":
        click.echo(f"{'Shade':>5}  {'Color':<7}  {'H':>5}  {'S':>5}  {'L':>5}")
        for shade, hex_color in shades.items():
            hsl = hex_to_hsl(hex_color)
            click.echo(f"{shade:>5}  {hex_color:<7}  {hsl.h:5.1f}  {hsl.s:5.1f}  {hsl.l:5.1f}")
    else:
        click.echo(palette_to_css(shades, prefix).replace(DECLARATION_SEPARATOR, "\n"))
