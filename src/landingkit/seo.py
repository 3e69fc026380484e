"""Meta tag generation for the page <head>."""

import re

from landingkit.models.seo import SEOConfig

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_ESCAPE_RE = re.compile(r"[&<>\"']")

TAG_SEPARATOR = "\n    "

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


def escape_html(text: str) -> str:
    """Escape the five HTML-reserved characters."""
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def generate_meta_tags(seo: SEOConfig) -> str:
    """
    Build title, description, OpenGraph and Twitter card tags.

    Args:
        seo: Page SEO configuration

    Returns:
        Tags joined by newline + indentation, ready to place in <head>
    """
    title = escape_html(seo.title)
    description = escape_html(seo.description)

    tags = [
        f"<title>{title}</title>",
        f'<meta name="description" content="{description}" />',
    ]

    if seo.keywords:
        tags.append(f'<meta name="keywords" content="{escape_html(seo.keywords)}" />')

    # OpenGraph
    tags += [
        f'<meta property="og:title" content="{title}" />',
        f'<meta property="og:description" content="{description}" />',
        f'<meta property="og:type" content="{seo.og_type.value}" />',
    ]

    if seo.canonical:
        canonical = escape_html(seo.canonical)
        tags.append(f'<link rel="canonical" href="{canonical}" />')
        tags.append(f'<meta property="og:url" content="{canonical}" />')

    if seo.og_image:
        tags.append(f'<meta property="og:image" content="{escape_html(seo.og_image)}" />')
        tags.append(f'<meta property="og:image:width" content="{OG_IMAGE_WIDTH}" />')
        tags.append(f'<meta property="og:image:height" content="{OG_IMAGE_HEIGHT}" />')

    # Twitter Card
    tags.append('<meta name="twitter:card" content="summary_large_image" />')
    if seo.twitter_handle:
        tags.append(f'<meta name="twitter:site" content="{escape_html(seo.twitter_handle)}" />')
    tags.append(f'<meta name="twitter:title" content="{title}" />')
    tags.append(f'<meta name="twitter:description" content="{description}" />')

    if seo.og_image:
        tags.append(f'<meta name="twitter:image" content="{escape_html(seo.og_image)}" />')

    return TAG_SEPARATOR.join(tags)


def font_link_tag(font_url: str) -> str:
    """Stylesheet <link> for a custom font import URL."""
    return f'<link rel="stylesheet" href="{escape_html(font_url)}" />'
