"""Lookup of upstream engines by name."""

from __future__ import annotations

from collections.abc import Iterable

from websurf.engines.base import SearchEngine
from websurf.engines.bing import Bing
from websurf.engines.brave import Brave
from websurf.engines.duckduckgo import DuckDuckGo
from websurf.engines.errors import NoSuchEngineFound
from websurf.engines.librex import LibreX
from websurf.engines.startpage import Startpage

ENGINES: dict[str, type[SearchEngine]] = {
    "bing": Bing,
    "brave": Brave,
    "duckduckgo": DuckDuckGo,
    "librex": LibreX,
    "startpage": Startpage,
}


def get_engine(name: str) -> SearchEngine:
    """Instantiate an engine by (case-insensitive) name."""
    engine_cls = ENGINES.get(name.strip().lower())
    if engine_cls is None:
        raise NoSuchEngineFound(name)
    return engine_cls()


def build_engines(names: Iterable[str]) -> list[SearchEngine]:
    return [get_engine(name) for name in names]
