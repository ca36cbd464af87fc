"""LibreX result page scraper."""

from __future__ import annotations

from urllib.parse import quote_plus

from bs4 import Tag

from websurf.engines.base import FORM_CONTENT_TYPE, SearchEngine, inner_html
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser

BASE_URL = "https://search.ahwx.org"
RESULTS_PER_PAGE = 10


class LibreX(SearchEngine):
    """LibreX instance scraper; preferences travel in a single cookie."""

    name = "librex"
    base_url = BASE_URL

    def __init__(self):
        super().__init__(
            SearchResultParser(
                ".text-result-container>p",
                ".text-result-container>.text-result-wrapper",
                "a>h2",
                "a",
                "span",
            )
        )

    def build_url(self, query: str, page: int) -> str:
        return f"{BASE_URL}/search.php?q={quote_plus(query)}&p={page * RESULTS_PER_PAGE}&t=10"

    def extra_headers(self, safe_search: int) -> list[tuple[str, str]]:
        return [
            ("Content-Type", FORM_CONTENT_TYPE),
            ("Sec-GPC", "1"),
            ("Cookie", preferences_cookie(safe_search)),
        ]

    def to_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        href = url.get("href")
        if href is None:
            return None
        return SearchResult(
            title=inner_html(title),
            url=href,
            description=self.clean_description(desc),
            engines=frozenset({self.name}),
        )


def preferences_cookie(safe_search: int) -> str:
    settings = [
        ("theme", "amoled"),
        ("disable_special", "on"),
        ("disable_frontends", "on"),
        ("language", "en"),
        ("number_of_results", "20"),
        ("safe_search", "off" if safe_search <= 0 else "on"),
        ("save", "1"),
    ]
    return "preferences=" + ", ".join(f"{key}={value}" for key, value in settings)
