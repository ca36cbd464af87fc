"""Brave Search result page scraper."""

from __future__ import annotations

from urllib.parse import quote_plus

from bs4 import BeautifulSoup, Tag

from websurf.engines.base import FORM_CONTENT_TYPE, SearchEngine
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser

BASE_URL = "https://search.brave.com"
NO_RESULTS_MESSAGE = "Not many great matches came back for your search"


class Brave(SearchEngine):
    name = "brave"
    base_url = BASE_URL

    def __init__(self):
        super().__init__(
            SearchResultParser(
                "#results h4",
                "#results [data-pos]",
                "a > .url",
                "a",
                ".snippet-description",
            )
        )

    def build_url(self, query: str, page: int) -> str:
        return f"{BASE_URL}/search?q={quote_plus(query)}&offset={page}"

    def extra_headers(self, safe_search: int) -> list[tuple[str, str]]:
        return [
            ("Content-Type", FORM_CONTENT_TYPE),
            ("Sec-GPC", "1"),
            ("Cookie", f"safe_search={safe_search_level(safe_search)}"),
        ]

    def is_empty_result_set(self, document: BeautifulSoup) -> bool:
        node = next(self.parser.parse_for_no_results(document), None)
        return node is not None and NO_RESULTS_MESSAGE in node.get_text()

    def to_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        href = url.get("href")
        if href is None:
            return None
        return SearchResult(
            title=title.get_text().strip(),
            url=href.strip(),
            description=self.clean_description(desc),
            engines=frozenset({self.name}),
        )


def safe_search_level(safe_search: int) -> str:
    if safe_search <= 0:
        return "off"
    if safe_search == 1:
        return "moderate"
    return "strict"
