"""Pytest fixtures for tests."""

import copy
import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from landingkit.cli.main import reset_logging
from landingkit.models import SiteConfig, ThemeConfig

SITE_DATA = {
    "brand": "Acme Analytics",
    "tagline": "Dashboards in minutes",
    "hero": {
        "headline": "Know your numbers",
        "subheadline": "Stop wrestling with spreadsheets",
        "emotionalHook": "Trusted by 10,000+ founders",
        "primaryCta": {"text": "Start free", "subtext": "No credit card", "href": "#pricing"},
        "secondaryCta": None,
        "visualPath": "/images/hero.png",
        "visualAlt": "Dashboard screenshot",
    },
    "problem": {
        "sectionTitle": "Reporting is broken",
        "sectionSubtitle": "Sound familiar?",
        "items": [
            {"title": "Manual exports", "description": "Hours every week", "microcopy": "6h/week", "icon": "lucide:clock"},
            {"title": "Stale data", "description": "Decisions on old numbers", "microcopy": "72% of teams"},
        ],
    },
    "solution": {
        "sectionTitle": "How it works",
        "sectionSubtitle": "Three steps",
        "steps": [
            {"step": 3, "title": "Share", "description": "Send a link", "benefit": "Everyone aligned"},
            {"step": 1, "title": "Connect", "description": "Link your sources", "benefit": "No exports"},
            {"step": 2, "title": "Build", "description": "Drag and drop", "benefit": "No code"},
        ],
    },
    "benefits": {
        "sectionTitle": "Why Acme",
        "sectionSubtitle": "Results that matter",
        "items": [
            {"title": "Fast setup", "description": "Live today", "metric": "< 5 min", "metricLabel": "to first chart"},
        ],
    },
    "trust": {
        "sectionTitle": "Loved by teams",
        "sectionSubtitle": "Don't take our word for it",
        "metrics": [{"value": "4.9/5", "label": "Rating"}],
        "testimonials": [{"name": "Dana", "role": "CFO", "company": "Globex", "quote": "Saved us a day a week."}],
    },
    "cta": {
        "sectionTitle": "Ready?",
        "sectionSubtitle": "Start your free trial",
        "primaryCta": {"text": "Get started"},
        "features": ["14-day trial", "Cancel anytime"],
    },
    "pricing": {
        "sectionTitle": "Pricing",
        "sectionSubtitle": "Simple plans",
        "plans": [
            {"name": "Starter", "price": "$9", "interval": "month", "description": "Solo", "features": ["1 user"], "cta": {"text": "Buy"}},
            {"name": "Team", "price": "$29", "interval": "month", "description": "Teams", "features": ["10 users"], "cta": {"text": "Buy"}, "isPopular": True},
        ],
    },
    "theme": {
        "primaryColor": "#0284c7",
        "accentColor": "#f97316",
        "fontFamily": "Inter",
        "borderRadius": "lg",
    },
    "footer": {
        "description": "Analytics for small teams",
        "copyright": "© 2026 Acme",
        "links": [{"text": "Privacy", "href": "/privacy"}],
        "social": {"twitter": "https://twitter.com/acme", "github": None},
    },
    "seo": {
        "title": "Acme Analytics - Dashboards in minutes",
        "description": "Connect your data & share dashboards with your team.",
        "canonical": "https://acme.example",
        "ogImage": "https://acme.example/og.png",
    },
}


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Drop CLI log handlers bound to CliRunner streams."""
    yield
    reset_logging()


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def site_data():
    """Raw camelCase site data (a fresh copy per test)."""
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def site(site_data):
    """Validated SiteConfig."""
    return SiteConfig.model_validate(site_data)


@pytest.fixture
def site_file(temp_dir, site_data):
    """Site data written to a JSON file."""
    path = temp_dir / "site.json"
    path.write_text(json.dumps(site_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def theme():
    """Theme with accent, font and border radius."""
    return ThemeConfig(
        primary_color="#0284c7",
        accent_color="#f97316",
        font_family="Inter",
        border_radius="lg",
    )
