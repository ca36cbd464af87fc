"""Upstream search engine scrapers."""

from websurf.engines.base import SearchEngine
from websurf.engines.bing import Bing
from websurf.engines.brave import Brave
from websurf.engines.client import SearchEngineClient
from websurf.engines.duckduckgo import DuckDuckGo
from websurf.engines.errors import (
    ConfigurationError,
    EmptyResultSet,
    EngineError,
    NoSuchEngineFound,
    RequestError,
    UnexpectedError,
)
from websurf.engines.librex import LibreX
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser
from websurf.engines.registry import ENGINES, build_engines, get_engine
from websurf.engines.startpage import Startpage

__all__ = [
    "ENGINES",
    "Bing",
    "Brave",
    "ConfigurationError",
    "DuckDuckGo",
    "EmptyResultSet",
    "EngineError",
    "LibreX",
    "NoSuchEngineFound",
    "RequestError",
    "SearchEngine",
    "SearchEngineClient",
    "SearchResult",
    "SearchResultParser",
    "Startpage",
    "UnexpectedError",
    "build_engines",
    "get_engine",
]
