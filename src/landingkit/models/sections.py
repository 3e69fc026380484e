"""Page section models, ordered along the AIDA funnel.

Attention: hero. Interest: problem, solution. Desire: benefits, trust.
Action: cta. Pricing, FAQ and footer are supporting sections.
"""

from pydantic import Field

from landingkit.models.base import ContentModel

# Lucide icon reference (e.g. "lucide:clock")
IconName = str


class CTAButton(ContentModel):
    """Call-to-action button with optional supporting subtext."""

    text: str = Field(description="Button text")
    subtext: str | None = Field(default=None, description="Supporting text below the button")
    href: str | None = Field(default=None, description="Link destination (defaults to # or a section anchor)")


# ─── ATTENTION ───


class HeroSection(ContentModel):
    """First impression: headline, hook and primary CTA."""

    headline: str
    subheadline: str
    emotional_hook: str = Field(description='Social proof badge, e.g. "Trusted by 10,000+ founders"')
    primary_cta: CTAButton
    secondary_cta: CTAButton | None = None
    visual_path: str | None = None
    visual_alt: str | None = None


# ─── INTEREST ───


class ProblemItem(ContentModel):
    title: str
    description: str
    microcopy: str = Field(description="Stat or fact supporting the problem")
    icon: IconName | None = None


class ProblemSection(ContentModel):
    section_title: str
    section_subtitle: str
    items: list[ProblemItem]


class SolutionStep(ContentModel):
    step: int = Field(description="Step number for ordering")
    title: str
    description: str
    benefit: str
    visual_path: str | None = None
    icon: IconName | None = None


class SolutionSection(ContentModel):
    section_title: str
    section_subtitle: str
    steps: list[SolutionStep]

    def ordered_steps(self) -> list[SolutionStep]:
        """Steps sorted by their step number."""
        return sorted(self.steps, key=lambda s: s.step)


# ─── DESIRE ───


class BenefitItem(ContentModel):
    title: str
    description: str
    metric: str = Field(description='Quantifiable metric, e.g. "< 5 min"')
    metric_label: str
    icon: IconName | None = None
    cta: CTAButton | None = None


class BenefitsSection(ContentModel):
    section_title: str
    section_subtitle: str
    items: list[BenefitItem]


class TrustMetric(ContentModel):
    value: str = Field(description='Displayed value, e.g. "10K+" or "4.9/5"')
    label: str
    description: str | None = None


class Testimonial(ContentModel):
    name: str
    role: str
    company: str | None = None
    photo_path: str | None = None
    quote: str


class ClientLogo(ContentModel):
    name: str
    path: str


class TrustSection(ContentModel):
    section_title: str
    section_subtitle: str
    main_quote: Testimonial | None = None
    metrics: list[TrustMetric]
    testimonials: list[Testimonial]
    logos: list[ClientLogo] = Field(default_factory=list)


# ─── ACTION ───


class CTASection(ContentModel):
    section_title: str
    section_subtitle: str
    primary_cta: CTAButton
    secondary_cta: CTAButton | None = None
    features: list[str] = Field(default_factory=list)


# ─── SUPPORTING ───


class PricingPlan(ContentModel):
    name: str
    price: str
    interval: str
    description: str
    features: list[str]
    cta: CTAButton
    is_popular: bool = False


class PricingSection(ContentModel):
    section_title: str
    section_subtitle: str
    plans: list[PricingPlan]

    def popular_plan(self) -> PricingPlan | None:
        """Return the first plan flagged as popular, if any."""
        return next((plan for plan in self.plans if plan.is_popular), None)


class FAQItem(ContentModel):
    question: str
    answer: str


class FAQSection(ContentModel):
    section_title: str
    section_subtitle: str
    items: list[FAQItem]


class FooterLink(ContentModel):
    text: str
    href: str


class NewsletterConfig(ContentModel):
    title: str
    description: str
    placeholder: str
    button_text: str


class SocialLinks(ContentModel):
    twitter: str | None = None
    linkedin: str | None = None
    github: str | None = None
    instagram: str | None = None
    youtube: str | None = None
    facebook: str | None = None

    def links(self) -> dict[str, str]:
        """Only the networks that have a URL set, in declaration order."""
        return {name: url for name, url in self.model_dump().items() if url}


class FooterSection(ContentModel):
    description: str
    copyright: str
    links: list[FooterLink]
    newsletter: NewsletterConfig | None = None
    social: SocialLinks | None = None
