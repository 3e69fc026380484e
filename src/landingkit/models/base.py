"""Shared base model for site content."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for all site content models.

    Site files use camelCase keys (``sectionTitle``); Python code uses
    snake_case attributes. Unknown keys are rejected so typos in a site
    file surface as validation errors instead of silently vanishing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
