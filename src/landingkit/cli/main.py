"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from landingkit import __version__

from .commands import config, meta, palette, site_group, theme

logger = logging.getLogger(__name__)

# Handlers installed by setup_logging, replaced on repeated calls
_installed_handlers: list[logging.Handler] = []


def reset_logging() -> None:
    """Remove handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Console output goes to stderr so command output on stdout stays clean.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        console_level = logging.DEBUG
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    reset_logging()
    root_logger = logging.getLogger()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    _installed_handlers.append(console_handler)

    levels = [console_level]

    # Determine log file path
    log_path = None
    if log_file:
        log_path = log_file
    elif debug:
        log_path = Path.cwd() / "landingkit-debug.log"

    if log_path is not None:
        file_level = logging.DEBUG if debug and not log_file else getattr(logging, log_level.upper())
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)
        levels.append(file_level)

    root_logger.setLevel(min(levels))
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    logger.debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, file={log_path}"
    )


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="landingkit")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./landingkit-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.landingkit/config.json)'
)
def cli(
    ctx,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    config_file: Optional[Path],
):
    """
    LandingKit - content schema and theme tools for AIDA landing pages.

    Turns a single brand color into an 11-shade palette (50-950) and emits
    it as CSS custom properties, and validates site files describing the
    Attention, Interest, Desire and Action sections of a page.

    \b
    Examples:
      # Palette for one brand color
      landingkit palette "#0284c7"

      # Full theme block with accent color and font
      landingkit theme "#0284c7" --accent "#f97316" --font Inter

      # Check site files
      landingkit site validate site.json

      # Meta tags for the page head
      landingkit meta site.json
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)["config_path"] = config_file


cli.add_command(palette)
cli.add_command(theme)
cli.add_command(meta)
cli.add_command(site_group)
cli.add_command(config)

if __name__ == "__main__":
    cli()
