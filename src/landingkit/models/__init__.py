"""Data models for landing page content, theming and settings."""

from .color import HSL, Color, is_hex_color
from .config import AppConfig
from .enums import SHADE_LIGHTNESS, AidaStage, BorderRadius, ColorMode, OgType, Shade
from .sections import (
    BenefitItem,
    BenefitsSection,
    ClientLogo,
    CTAButton,
    CTASection,
    FAQItem,
    FAQSection,
    FooterLink,
    FooterSection,
    HeroSection,
    NewsletterConfig,
    PricingPlan,
    PricingSection,
    ProblemItem,
    ProblemSection,
    SocialLinks,
    SolutionSection,
    SolutionStep,
    Testimonial,
    TrustMetric,
    TrustSection,
)
from .seo import SEOConfig
from .site import AIDA_SECTIONS, SiteConfig
from .theme import ColorPalette, ThemeConfig

__all__ = [
    # Colors
    "Color",
    "HSL",
    "ColorPalette",
    "is_hex_color",
    # Enums
    "AidaStage",
    "BorderRadius",
    "ColorMode",
    "OgType",
    "SHADE_LIGHTNESS",
    "Shade",
    # Sections
    "BenefitItem",
    "BenefitsSection",
    "CTAButton",
    "CTASection",
    "ClientLogo",
    "FAQItem",
    "FAQSection",
    "FooterLink",
    "FooterSection",
    "HeroSection",
    "NewsletterConfig",
    "PricingPlan",
    "PricingSection",
    "ProblemItem",
    "ProblemSection",
    "SocialLinks",
    "SolutionSection",
    "SolutionStep",
    "Testimonial",
    "TrustMetric",
    "TrustSection",
    # Site and settings
    "AIDA_SECTIONS",
    "AppConfig",
    "SEOConfig",
    "SiteConfig",
    "ThemeConfig",
]
