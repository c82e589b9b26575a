"""
Ring navigation over the date-ordered article list.
"""

from typing import Sequence, Tuple

from models import ArticleMeta


class EmptyArticleListError(ValueError):
    """Navigation was requested over an empty article list."""
    pass


def resolve(articles: Sequence[ArticleMeta], current_index: int) -> Tuple[ArticleMeta, ArticleMeta]:
    """
    Get the previous and next articles for navigation.

    The list is newest first, so "previous" is the older neighbour and
    "next" the newer one. Both wrap around: the newest article's next is
    the oldest, and the oldest article's previous is the newest.

    Args:
        articles: Articles sorted by dateInt descending
        current_index: Position of the current article

    Returns:
        Tuple of (previous_article, next_article)

    Raises:
        EmptyArticleListError: If articles is empty
        IndexError: If current_index is outside the list
    """
    length = len(articles)
    if length == 0:
        raise EmptyArticleListError("Cannot navigate an empty article list")
    if not 0 <= current_index < length:
        raise IndexError(f"Article index {current_index} out of range for {length} articles")

    previous = articles[(current_index + 1) % length]
    next_article = articles[(current_index - 1 + length) % length]
    return previous, next_article
