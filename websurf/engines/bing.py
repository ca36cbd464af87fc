"""Bing result page scraper."""

from __future__ import annotations

import base64
import binascii
import re
from urllib.parse import quote_plus

from bs4 import BeautifulSoup, Tag

from websurf.engines.base import SearchEngine, inner_html
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser

BASE_URL = "https://www.bing.com"
CLICK_TRACKING_PREFIX = "https://www.bing.com/ck/a?"
RESULTS_PER_PAGE = 10

# Feature flags Bing expects from a regular browser session.
COOKIES: list[tuple[str, str]] = [
    ("_C_ETH", "1"),
    ("_EDGE_V", "1"),
    ("_Rwho", "u=d"),
    ("bngps=s", "0"),
    ("_UR", "QS=4"),
    ("ANIMIA", "FRE=1"),
    ("BCP", "AD=0&AL=0&SM=0"),
    ("bngps", "s=0"),
    ("SRCHD", "AF=NOFORM"),
]

_ENCODED_URL_RE = re.compile(r"&u=a1([^&]+)")


class Bing(SearchEngine):
    name = "bing"
    base_url = BASE_URL

    def __init__(self):
        super().__init__(
            SearchResultParser(
                "#b_results",
                "li.b_algo",
                "h2 > a",
                "div > a",
                "div > p",
            )
        )

    def build_url(self, query: str, page: int) -> str:
        q = quote_plus(query)
        url = f"{BASE_URL}/search?q={q}&pq={q}"
        if page == 0:
            return url
        # Bing counts the first result shown, starting at 1.
        first = RESULTS_PER_PAGE * page + 1
        form = "PERE" if page == 1 else f"PERE{page - 1}"
        return f"{url}&first={first}&FORM={form}"

    def extra_headers(self, safe_search: int) -> list[tuple[str, str]]:
        cookie = "".join(f"{key}={value}; " for key, value in COOKIES)
        return [("Cookie", cookie)]

    def is_empty_result_set(self, document: BeautifulSoup) -> bool:
        node = next(self.parser.parse_for_no_results(document), None)
        if node is None:
            return False
        return "b_algo" in (node.get("class") or [])

    def to_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        href = url.get("href")
        if href is None:
            return None
        if href.startswith(CLICK_TRACKING_PREFIX):
            href = decode_url(href)
        return SearchResult(
            title=inner_html(title),
            url=href,
            description=self.clean_description(desc),
            engines=frozenset({self.name}),
        )


def decode_url(url: str) -> str:
    """Recover the destination hidden in a Bing click-tracking link.

    Returns ``url`` unchanged when it carries no payload or the payload is
    not valid base64-encoded UTF-8.
    """
    match = _ENCODED_URL_RE.search(url)
    if not match:
        return url
    payload = match.group(1).replace("-", "+").replace("_", "/")
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return url
