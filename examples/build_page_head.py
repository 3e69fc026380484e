"""Example: build the <head> fragment for a landing page from a site file."""

import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from landingkit.colors import render_root_block, theme_to_css
from landingkit.exceptions import LandingKitError
from landingkit.models import SiteConfig
from landingkit.seo import font_link_tag, generate_meta_tags
from landingkit.version import get_version_info


def main():
    """Print meta tags and a <style> block for examples/site.json."""
    site_path = Path(__file__).parent / "site.json"

    try:
        site = SiteConfig.load(site_path)
    except LandingKitError as e:
        print(e.get_full_message())
        return

    print(f"<!-- {get_version_info()} -->")
    print("<head>")
    print('    <meta charset="utf-8" />')
    print(f"    {generate_meta_tags(site.seo)}")

    if site.theme is not None:
        if site.theme.font_url:
            print(f"    {font_link_tag(site.theme.font_url)}")
        print("    <style>")
        css = render_root_block(theme_to_css(site.theme))
        for line in css.splitlines():
            print(f"      {line}")
        print("    </style>")

    print("</head>")

    print("\nSections:")
    for name, stage, _ in site.aida_sections():
        print(f"  {stage.value:<9} {name}")


if __name__ == "__main__":
    main()
