"""Shared search result models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Normalized search result item."""

    title: str
    url: str
    description: str
    engines: frozenset[str] = field(default_factory=frozenset)

    def with_engines(self, *names: str) -> "SearchResult":
        """Return a copy whose provenance also includes ``names``."""
        return replace(self, engines=self.engines | frozenset(names))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "engines": sorted(self.engines),
        }
