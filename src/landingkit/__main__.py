"""Allow ``python -m landingkit``."""

from landingkit.cli.main import cli

if __name__ == "__main__":
    cli()
