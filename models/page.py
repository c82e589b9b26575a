"""
Render contexts handed from the request router to the templates.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .article import ArticleMeta


@dataclass(frozen=True)
class IndexPage:
    """Context for the article list."""
    last_published_date: str
    articles: Tuple[ArticleMeta, ...]

    template = "index.html"
    status_code = 200

    def as_template_context(self) -> dict:
        return {
            'last_published_date': self.last_published_date,
            'articles': self.articles,
        }


@dataclass(frozen=True)
class ArticlePage:
    """Context for a single article with ring navigation."""
    last_published_date: str
    previous: ArticleMeta
    next: ArticleMeta
    date: str
    title: str
    content_view: str

    template = "article.html"
    status_code = 200

    def as_template_context(self) -> dict:
        return {
            'last_published_date': self.last_published_date,
            'previous': self.previous,
            'next': self.next,
            'date': self.date,
            'title': self.title,
            'content_view': self.content_view,
        }


@dataclass(frozen=True)
class NotFoundPage:
    """Context for the not-found view."""
    last_published_date: Optional[str]
    reason: str = ""

    template = "404.html"
    status_code = 404

    def as_template_context(self) -> dict:
        return {'last_published_date': self.last_published_date}
