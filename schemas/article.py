"""
Content Validation Schemas

Pydantic models for validating the per-article meta.json records and the
site configuration record. Both are read once at startup, so any
validation error here is fatal.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator
from typing import List, Optional


class ArticleMetaSchema(BaseModel):
    """
    Validation schema for an article's meta.json.

    Requires title, date and dateInt. Any other keys are kept and passed
    through to the templates untouched.
    """
    model_config = ConfigDict(extra='allow')

    title: str = Field(
        ...,
        min_length=1,
        description="Article title, also used to match requests to the list"
    )
    date: str = Field(
        ...,
        description="Publish date as displayed"
    )
    date_int: StrictInt = Field(
        ...,
        alias='dateInt',
        description="Integer sort key for the publish date"
    )

    @property
    def extra_fields(self) -> dict:
        """Return the free-form keys not covered by the schema."""
        return dict(self.model_extra or {})


class SiteConfigSchema(BaseModel):
    """
    Validation schema for the site configuration record.

    Exactly one of ``excluded`` or ``released`` must be given.
    """
    model_config = ConfigDict(extra='ignore')

    excluded: Optional[List[str]] = Field(
        default=None,
        description="Routes hidden from the article list"
    )
    released: Optional[List[str]] = Field(
        default=None,
        description="Routes shown in the article list; all others are hidden"
    )

    @field_validator('excluded', 'released')
    @classmethod
    def strip_routes(cls, v):
        """Strip whitespace around route names."""
        if v is None:
            return v
        return [route.strip() for route in v]

    @model_validator(mode='after')
    def check_single_filter(self):
        """Only one filtering list may be honored."""
        if self.excluded is not None and self.released is not None:
            raise ValueError("Config must set either 'excluded' or 'released', not both")
        if self.excluded is None and self.released is None:
            raise ValueError("Config must set one of 'excluded' or 'released'")
        return self
