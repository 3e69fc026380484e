"""Top-level site configuration."""

from pathlib import Path

from pydantic import BaseModel

from landingkit.models.base import ContentModel
from landingkit.models.enums import AidaStage
from landingkit.models.sections import (
    BenefitsSection,
    CTASection,
    FAQSection,
    FooterSection,
    HeroSection,
    PricingSection,
    ProblemSection,
    SolutionSection,
    TrustSection,
)
from landingkit.models.seo import SEOConfig
from landingkit.models.theme import ThemeConfig
from landingkit.persistence import PydanticPersistence

# Core sections in page order with the funnel stage each one serves.
# Solution bridges interest -> desire, trust bridges desire -> action;
# they are filed under the stage they start from.
AIDA_SECTIONS: tuple[tuple[str, AidaStage], ...] = (
    ("hero", AidaStage.ATTENTION),
    ("problem", AidaStage.INTEREST),
    ("solution", AidaStage.INTEREST),
    ("benefits", AidaStage.DESIRE),
    ("trust", AidaStage.DESIRE),
    ("cta", AidaStage.ACTION),
)


class SiteConfig(ContentModel):
    """Everything needed to render one landing page."""

    brand: str
    tagline: str

    # AIDA sections
    hero: HeroSection
    problem: ProblemSection
    solution: SolutionSection
    benefits: BenefitsSection
    trust: TrustSection
    cta: CTASection

    # Optional sections
    pricing: PricingSection | None = None
    faq: FAQSection | None = None

    theme: ThemeConfig | None = None

    footer: FooterSection
    seo: SEOConfig

    def aida_sections(self) -> list[tuple[str, AidaStage, BaseModel]]:
        """Return (name, stage, section) for the core sections in page order."""
        return [(name, stage, getattr(self, name)) for name, stage in AIDA_SECTIONS]

    @classmethod
    def load(cls, path: Path) -> "SiteConfig":
        """
        Load and validate a site file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If the content fails validation
        """
        return PydanticPersistence.load_json(path, cls)

    def save(self, path: Path) -> None:
        """Save as camelCase JSON, omitting unset optional fields."""
        PydanticPersistence.save_json(self, path, by_alias=True, exclude_none=True)
