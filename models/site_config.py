"""
Site configuration model: which article routes are published.
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable


class FilterMode(Enum):
    """How the configured route set is applied to the article list."""
    EXCLUDE = "excluded"  # Drop listed routes
    INCLUDE = "released"  # Keep only listed routes


@dataclass(frozen=True)
class SiteConfig:
    """Article filter loaded once at startup."""
    mode: FilterMode
    routes: FrozenSet[str] = frozenset()

    @classmethod
    def excluding(cls, routes: Iterable[str] = ()) -> "SiteConfig":
        return cls(mode=FilterMode.EXCLUDE, routes=frozenset(routes))

    @classmethod
    def releasing(cls, routes: Iterable[str] = ()) -> "SiteConfig":
        return cls(mode=FilterMode.INCLUDE, routes=frozenset(routes))

    def is_published(self, route: str) -> bool:
        """Return True if the filter lets an article with this route through."""
        if self.mode is FilterMode.INCLUDE:
            return route in self.routes
        return route not in self.routes
