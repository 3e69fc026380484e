"""SEO configuration model."""

from pydantic import Field

from landingkit.models.base import ContentModel
from landingkit.models.enums import OgType


class SEOConfig(ContentModel):
    """Search and social sharing metadata for the page."""

    lang: str = Field(default="en", description='Language code, e.g. "en" or "id"')
    title: str = Field(description="Page title")
    description: str = Field(description="Meta description (150-160 chars recommended)")
    keywords: str | None = None
    canonical: str | None = Field(default=None, description="Canonical URL")
    og_image: str | None = Field(default=None, description="Social sharing image (1200x630px)")
    twitter_handle: str | None = None
    og_type: OgType = OgType.WEBSITE
