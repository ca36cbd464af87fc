"""DuckDuckGo (html frontend) result page scraper."""

from __future__ import annotations

from urllib.parse import quote_plus

from bs4 import Tag

from websurf.engines.base import FORM_CONTENT_TYPE, SearchEngine, inner_html
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser

BASE_URL = "https://html.duckduckgo.com"
RESULTS_PER_PAGE = 30


class DuckDuckGo(SearchEngine):
    name = "duckduckgo"
    base_url = BASE_URL

    def __init__(self):
        super().__init__(
            SearchResultParser(
                ".no-results",
                ".results>.result",
                ".result__title>.result__a",
                ".result__url",
                ".result__snippet",
            )
        )

    def build_url(self, query: str, page: int) -> str:
        if page == 0:
            s, dc = "", ""
        else:
            s, dc = page * RESULTS_PER_PAGE, page * RESULTS_PER_PAGE + 1
        return f"{BASE_URL}/html/?q={quote_plus(query)}&s={s}&dc={dc}&v=1&o=json&api=/d.js"

    def extra_headers(self, safe_search: int) -> list[tuple[str, str]]:
        return [
            ("Content-Type", FORM_CONTENT_TYPE),
            ("Sec-GPC", "1"),
        ]

    def to_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        # The html frontend shows the target as bare text without a scheme.
        return SearchResult(
            title=inner_html(title),
            url=f"https://{inner_html(url)}",
            description=self.clean_description(desc),
            engines=frozenset({self.name}),
        )
