"""
Services Package - Business Logic Layer

This package contains service classes that encapsulate business logic,
keeping route handlers thin and focused on HTTP concerns.
"""

from .article_store import ArticleStore, ArticleLoadError, ArticleNotFoundError, load_site_config
from .navigation import resolve, EmptyArticleListError
from .request_router import RequestRouter

__all__ = [
    'ArticleStore',
    'ArticleLoadError',
    'ArticleNotFoundError',
    'load_site_config',
    'resolve',
    'EmptyArticleListError',
    'RequestRouter'
]
