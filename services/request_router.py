"""
Request Router - Turns article requests into page contexts

Keeps the route handlers thin: each handler asks the router for a page
and renders whatever it gets back. Per-request failures are converted to
a NotFoundPage here and never reach the handler.
"""

import logging
from typing import Optional, Union

from models import ArticlePage, IndexPage, NotFoundPage
from .article_store import ArticleLoadError, ArticleNotFoundError, ArticleStore
from .navigation import resolve


class RequestRouter:
    """Maps index and article requests onto the article store."""

    def __init__(self, store: ArticleStore, logger: Optional[logging.Logger] = None):
        """
        Initialize the router.

        Args:
            store: Loaded article snapshot, shared read-only by all requests
            logger: Where not-found causes are reported (module logger if None)
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    @property
    def last_published_date(self) -> Optional[str]:
        latest = self.store.latest()
        return latest.date if latest else None

    def not_found(self, reason: str = "") -> NotFoundPage:
        """Build the not-found page, logging the reason if one is given."""
        if reason:
            self.logger.warning(f"Not found: {reason}")
        return NotFoundPage(last_published_date=self.last_published_date, reason=reason)

    def get_index(self) -> Union[IndexPage, NotFoundPage]:
        """
        Build the article list page.

        Returns:
            IndexPage with every published article, or NotFoundPage when
            no article is published
        """
        articles = self.store.all()
        if not articles:
            return self.not_found("no published articles")

        return IndexPage(last_published_date=articles[0].date, articles=articles)

    def get_article(self, route: str) -> Union[ArticlePage, NotFoundPage]:
        """
        Build the page for a single article with ring navigation.

        The requested folder's metadata is read from disk and matched to the
        published list by title, so unpublished folders resolve to
        not-found.

        Args:
            route: Folder name from the request path

        Returns:
            ArticlePage, or NotFoundPage if the route has no metadata or its
            title is not published
        """
        try:
            meta = self.store.read_meta(route)
        except (ArticleNotFoundError, ArticleLoadError) as e:
            return self.not_found(str(e))

        article = self.store.find_by_title(meta.title)
        if article is None:
            return self.not_found(f"title '{meta.title}' of route '{route}' is not published")

        articles = self.store.all()
        previous, next_article = resolve(articles, self.store.index_of(article))

        return ArticlePage(
            last_published_date=articles[0].date,
            previous=previous,
            next=next_article,
            date=meta.date,
            title=meta.title,
            content_view=meta.content_view
        )
