"""
Article Store - Loads, filters and orders article metadata

Builds the immutable article snapshot once at startup from the content
root: one folder per article, each holding a meta.json record. The
snapshot is sorted newest first and filtered by the site configuration.
"""

import json
import re
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from pydantic import ValidationError

from models import ArticleMeta, FilterMode, SiteConfig
from schemas import ArticleMetaSchema, SiteConfigSchema

META_FILENAME = 'meta.json'

# Folder names double as URL segments
_ROUTE_PATTERN = re.compile(r'^[\w\-\.]+$')


class ArticleLoadError(Exception):
    """Content or configuration could not be loaded; fatal at startup."""
    pass


class ArticleNotFoundError(Exception):
    """No metadata exists for a requested route."""
    pass


def _read_json(path: Path) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArticleLoadError(f"Malformed JSON in {path}: {e}") from e


def load_site_config(path: Union[str, Path]) -> SiteConfig:
    """
    Load the site filter configuration.

    Args:
        path: Path to the JSON config record

    Returns:
        SiteConfig in exclude mode for {"excluded": [...]} or include mode
        for {"released": [...]}

    Raises:
        ArticleLoadError: If the file is missing, unparseable or sets
            neither or both filter lists
    """
    path = Path(path)
    try:
        record = _read_json(path)
    except OSError as e:
        raise ArticleLoadError(f"Cannot read site config {path}: {e}") from e

    try:
        schema = SiteConfigSchema.model_validate(record)
    except ValidationError as e:
        raise ArticleLoadError(f"Invalid site config {path}: {e}") from e

    if schema.released is not None:
        return SiteConfig(mode=FilterMode.INCLUDE, routes=frozenset(schema.released))
    return SiteConfig(mode=FilterMode.EXCLUDE, routes=frozenset(schema.excluded))


class ArticleStore:
    """Immutable, date-ordered view of the published articles."""

    def __init__(self, content_root: Path, articles: Tuple[ArticleMeta, ...] = ()):
        """
        Initialize the store from an already ordered snapshot.

        Use ArticleStore.load() to build one from disk.

        Args:
            content_root: Directory holding one folder per article
            articles: Filtered articles, newest first
        """
        self.content_root = Path(content_root)
        self._articles = tuple(articles)

    @classmethod
    def load(cls, content_root: Union[str, Path], site_config: SiteConfig) -> "ArticleStore":
        """
        Read every article folder, filter and sort.

        Folders are enumerated in name order so that articles sharing a
        dateInt keep a stable relative order between runs.

        Args:
            content_root: Directory holding one folder per article
            site_config: Filter to apply to the folder routes

        Returns:
            ArticleStore holding the sorted snapshot

        Raises:
            ArticleLoadError: If the root is missing or any folder lacks a
                valid meta.json
        """
        content_root = Path(content_root)
        if not content_root.is_dir():
            raise ArticleLoadError(f"Content root not found: {content_root}")

        store = cls(content_root)
        loaded = []
        for folder in sorted(p for p in content_root.iterdir() if p.is_dir()):
            try:
                loaded.append(store.read_meta(folder.name))
            except ArticleNotFoundError as e:
                raise ArticleLoadError(str(e)) from e

        published = [a for a in loaded if site_config.is_published(a.route)]
        store._articles = tuple(sorted(published, key=lambda a: a.date_int, reverse=True))
        return store

    def read_meta(self, route: str) -> ArticleMeta:
        """
        Read the metadata record of a single article folder.

        The folder does not need to be part of the published snapshot.

        Args:
            route: Folder name under the content root

        Returns:
            ArticleMeta stamped with the route

        Raises:
            ArticleNotFoundError: If the route is not a valid folder name or
                has no meta.json
            ArticleLoadError: If the meta.json is malformed
        """
        if not route or not _ROUTE_PATTERN.match(route) or route in ('.', '..'):
            raise ArticleNotFoundError(f"Invalid article route: {route!r}")

        meta_path = self.content_root / route / META_FILENAME
        try:
            record = _read_json(meta_path)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise ArticleNotFoundError(f"No metadata for route '{route}'") from e
        except OSError as e:
            raise ArticleLoadError(f"Cannot read {meta_path}: {e}") from e

        try:
            schema = ArticleMetaSchema.model_validate(record)
        except ValidationError as e:
            raise ArticleLoadError(f"Invalid metadata in {meta_path}: {e}") from e

        return ArticleMeta(
            title=schema.title,
            date=schema.date,
            date_int=schema.date_int,
            route=route,
            extra=schema.extra_fields
        )

    def all(self) -> Tuple[ArticleMeta, ...]:
        """Return the filtered articles, newest first."""
        return self._articles

    def latest(self) -> Optional[ArticleMeta]:
        """Return the most recent article, or None if there are none."""
        return self._articles[0] if self._articles else None

    def find_by_title(self, title: str) -> Optional[ArticleMeta]:
        """Find the first article whose title matches exactly."""
        return next((a for a in self._articles if a.title == title), None)

    def index_of(self, article: ArticleMeta) -> int:
        """Return the position of an article in the snapshot."""
        return self._articles.index(article)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[ArticleMeta]:
        return iter(self._articles)
