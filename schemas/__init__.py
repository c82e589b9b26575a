"""
Validation Schemas Package

Contains Pydantic models for validating content metadata and site configuration.
"""

from .article import ArticleMetaSchema, SiteConfigSchema

__all__ = ['ArticleMetaSchema', 'SiteConfigSchema']
