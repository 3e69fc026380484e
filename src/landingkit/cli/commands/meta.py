"""Meta command - print <head> tags for a site file."""

from pathlib import Path

import click

from landingkit.cli.common import exit_with_error, load_site
from landingkit.exceptions import LandingKitError
from landingkit.seo import generate_meta_tags


@click.command()
@click.argument(
    "site_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def meta(ctx: click.Context, site_file: Path | None):
    """
    Generate title, description, OpenGraph and Twitter tags from SITE_FILE.

    SITE_FILE defaults to the site path in the configuration.
    """
    try:
        site = load_site(ctx, site_file)
    except (LandingKitError, FileNotFoundError) as e:
        exit_with_error(e)

    click.echo(generate_meta_tags(site.seo).replace("\n    ", "\n"))
