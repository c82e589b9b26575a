"""
Models package for the article site.

Provides data models for article metadata, the site filter configuration,
and the page contexts passed to templates.
"""
from .article import ArticleMeta
from .site_config import FilterMode, SiteConfig
from .page import IndexPage, ArticlePage, NotFoundPage

__all__ = [
    'ArticleMeta',
    'FilterMode',
    'SiteConfig',
    'IndexPage',
    'ArticlePage',
    'NotFoundPage'
]
