"""Startpage result page scraper."""

from __future__ import annotations

from urllib.parse import quote_plus

from bs4 import Tag

from websurf.engines.base import FORM_CONTENT_TYPE, SearchEngine, inner_html
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser

BASE_URL = "https://www.startpage.com"
RESULTS_PER_PAGE = 20

# Startpage packs all settings into one cookie value: pairs are joined with
# "N1N" and each key is separated from its value by "EEE".
_PAIR_SEPARATOR = "N1N"
_VALUE_SEPARATOR = "EEE"


class Startpage(SearchEngine):
    name = "startpage"
    base_url = BASE_URL

    def __init__(self):
        super().__init__(
            SearchResultParser(
                ".no-results",
                ".w-gl>.result",
                ".result-title>h2",
                ".result-title",
                ".description",
            )
        )

    def build_url(self, query: str, page: int) -> str:
        start = page * RESULTS_PER_PAGE
        return f"{BASE_URL}/sp/search?q={quote_plus(query)}&num={RESULTS_PER_PAGE}&start={start}"

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
    """Encode display and filter preferences the way Startpage stores them."""
    # The setting is a *disable* flag, so it is inverted.
    disable_family_filter = "1" if safe_search <= 0 else "0"
    settings = [
        ("date_time", "world"),
        ("disable_family_filter", disable_family_filter),
        ("disable_open_in_new_window", "1"),
        ("enable_post_method", "0"),
        ("enable_proxy_safety_suggest", "0"),
        ("enable_stay_control", "0"),
        ("instant_answers", "0"),
        ("lang_homepage", "s%2Fdevice%2Fen"),
        ("language", "english"),
        ("language_ui", "english"),
        ("num_of_results", str(RESULTS_PER_PAGE)),
        ("search_results_region", "all"),
        ("suggestions", "0"),
        ("wt_unit", "celsius"),
    ]
    encoded = _PAIR_SEPARATOR.join(f"{key}{_VALUE_SEPARATOR}{value}" for key, value in settings)
    return f"preferences={encoded}"
