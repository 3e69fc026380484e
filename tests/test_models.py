"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from landingkit.models import (
    AidaStage,
    AppConfig,
    BorderRadius,
    Color,
    ColorPalette,
    CTAButton,
    HeroSection,
    SiteConfig,
    SocialLinks,
    ThemeConfig,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_to_hex_is_lowercase(self):
        assert Color(r=2, g=132, b=199).to_hex() == "#0284c7"
        assert Color(r=255, g=255, b=255).to_hex() == "#ffffff"

    @pytest.mark.unit
    def test_frozen(self):
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 4


class TestColorPalette:
    """Test ColorPalette model."""

    @pytest.mark.unit
    def test_base_shade_required(self):
        with pytest.raises(ValidationError):
            ColorPalette.model_validate({"50": "#f0f9ff"})

    @pytest.mark.unit
    def test_to_dict_is_ordered_and_sparse(self):
        palette = ColorPalette.model_validate({"950": "#082f49", "500": "#0ea5e9", "50": "#f0f9ff"})
        assert palette.to_dict() == {"50": "#f0f9ff", "500": "#0ea5e9", "950": "#082f49"}
        assert list(palette.to_dict()) == ["50", "500", "950"]

    @pytest.mark.unit
    def test_unknown_shade_rejected(self):
        with pytest.raises(ValidationError):
            ColorPalette.model_validate({"500": "#0ea5e9", "550": "#000000"})


class TestThemeConfig:
    """Test ThemeConfig model."""

    @pytest.mark.unit
    def test_camel_case_keys(self):
        theme = ThemeConfig.model_validate({"primaryColor": "#0284c7", "borderRadius": "xl", "defaultColorMode": "dark"})
        assert theme.primary_color == "#0284c7"
        assert theme.border_radius is BorderRadius.XL
        assert theme.default_color_mode.value == "dark"

    @pytest.mark.unit
    def test_invalid_radius(self):
        with pytest.raises(ValidationError):
            ThemeConfig.model_validate({"primaryColor": "#0284c7", "borderRadius": "huge"})


class TestSections:
    """Test section models."""

    @pytest.mark.unit
    def test_cta_optional_fields(self):
        cta = CTAButton(text="Start")
        assert cta.subtext is None
        assert cta.href is None

    @pytest.mark.unit
    def test_hero_requires_primary_cta(self):
        with pytest.raises(ValidationError):
            HeroSection.model_validate({"headline": "H", "subheadline": "S", "emotionalHook": "E"})

    @pytest.mark.unit
    def test_ordered_steps(self, site):
        assert [step.step for step in site.solution.ordered_steps()] == [1, 2, 3]
        # Original order is kept on the model
        assert [step.step for step in site.solution.steps] == [3, 1, 2]

    @pytest.mark.unit
    def test_popular_plan(self, site):
        assert site.pricing.popular_plan().name == "Team"

    @pytest.mark.unit
    def test_social_links(self):
        social = SocialLinks(twitter="https://twitter.com/acme", github=None, youtube="")
        assert social.links() == {"twitter": "https://twitter.com/acme"}


class TestSiteConfig:
    """Test SiteConfig model."""

    @pytest.mark.unit
    def test_loads_camel_case(self, site):
        assert site.brand == "Acme Analytics"
        assert site.hero.emotional_hook == "Trusted by 10,000+ founders"
        assert site.hero.primary_cta.href == "#pricing"
        assert site.trust.logos == []
        assert site.faq is None
        assert site.seo.lang == "en"
        assert site.seo.og_type.value == "website"

    @pytest.mark.unit
    def test_aida_sections(self, site):
        sections = site.aida_sections()
        assert [(name, stage) for name, stage, _ in sections] == [
            ("hero", AidaStage.ATTENTION),
            ("problem", AidaStage.INTEREST),
            ("solution", AidaStage.INTEREST),
            ("benefits", AidaStage.DESIRE),
            ("trust", AidaStage.DESIRE),
            ("cta", AidaStage.ACTION),
        ]
        assert sections[0][2] is site.hero

    @pytest.mark.unit
    def test_unknown_key_rejected(self, site_data):
        site_data["hero"]["headlien"] = "typo"
        with pytest.raises(ValidationError) as exc_info:
            SiteConfig.model_validate(site_data)
        assert exc_info.value.errors()[0]["loc"] == ("hero", "headlien")

    @pytest.mark.unit
    def test_missing_required_section(self, site_data):
        del site_data["seo"]
        with pytest.raises(ValidationError):
            SiteConfig.model_validate(site_data)

    @pytest.mark.unit
    def test_save_and_load(self, site, temp_dir):
        path = temp_dir / "out" / "site.json"
        site.save(path)

        text = path.read_text(encoding="utf-8")
        assert '"sectionTitle"' in text
        assert '"secondaryCta"' not in text  # None values omitted
        assert SiteConfig.load(path) == site


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.fallback_color == "#0284c7"
        assert config.css_selector == ":root"

    @pytest.mark.unit
    def test_fallback_must_be_hex(self):
        with pytest.raises(ValidationError):
            AppConfig(fallback_color="blue")

    @pytest.mark.unit
    def test_load_or_default_missing_file(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "config.json")
        assert config == AppConfig()

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(fallback_color="#f97316").save(path)
        assert AppConfig.load_or_default(path).fallback_color == "#f97316"
