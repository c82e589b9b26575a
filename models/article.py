"""
Article metadata model.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class ArticleMeta:
    """Metadata for one article folder in the content root."""
    title: str
    date: str  # Display string, shown as-is
    date_int: int  # Sort key only
    route: str  # Folder name
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Free-form fields are passed through read-only
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    @property
    def content_view(self) -> str:
        """Return the template name of the article body, without extension."""
        return f"{self.route}/view"

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a free-form metadata field."""
        return self.extra.get(key, default)
