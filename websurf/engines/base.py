"""Common request/parse pipeline shared by every upstream engine."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from loguru import logger

from websurf.engines.errors import EmptyResultSet, RequestError, UnexpectedError
from websurf.engines.models import SearchResult
from websurf.engines.parser import SearchResultParser
from websurf.utils.html import strip_leading_spans

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_INVALID_HEADER_VALUE_RE = re.compile(rb"[\r\n\x00]")


class AsyncTransport(Protocol):
    """The subset of ``httpx.AsyncClient`` used to reach upstream engines."""

    async def get(self, url: str, *, headers: httpx.Headers) -> httpx.Response: ...


class SearchEngine(ABC):
    """
    Base class for upstream engines.

    Subclasses supply the URL scheme, extra headers, the selectors for their
    result page and the per-item mapping; the request/parse pipeline in
    ``fetch_results`` is shared.
    """

    name: str
    base_url: str

    def __init__(self, parser: SearchResultParser):
        self.parser = parser

    @abstractmethod
    def build_url(self, query: str, page: int) -> str:
        """Build the upstream URL for a zero-based page."""

    def extra_headers(self, safe_search: int) -> list[tuple[str, str]]:
        """Engine specific headers appended after the common ones."""
        return []

    def is_empty_result_set(self, document: BeautifulSoup) -> bool:
        """Whether the page states that nothing matched the query."""
        return next(self.parser.parse_for_no_results(document), None) is not None

    @abstractmethod
    def to_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        """Map one matched result item, or ``None`` to skip it."""

    def build_headers(
        self,
        user_agent: str,
        accept_language: str,
        safe_search: int,
    ) -> httpx.Headers:
        pairs = [
            ("User-Agent", user_agent),
            ("Accept-Language", accept_language),
            ("Referer", f"{self.base_url}/"),
            ("Origin", self.base_url),
            *self.extra_headers(safe_search),
        ]
        return build_header_map(self.name, pairs)

    async def fetch_results(
        self,
        query: str,
        page: int,
        user_agent: str,
        client: AsyncTransport,
        safe_search: int,
        accept_language: str,
    ) -> list[SearchResult]:
        """
        Fetch one result page from the upstream engine.

        Raises:
            RequestError: The transport failed or upstream answered non-2xx.
            EmptyResultSet: Upstream reported that nothing matched.
            UnexpectedError: Request headers could not be built, or the
                page was rejected by the HTML parser.
        """
        url = self.build_url(query, page)
        headers = self.build_headers(user_agent, accept_language, safe_search)
        html = await self.fetch_html_from_upstream(url, headers, client)

        try:
            document = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            raise UnexpectedError(self.name, f"upstream markup rejected: {e}") from e
        if self.is_empty_result_set(document):
            raise EmptyResultSet(self.name)

        results = self.parser.parse_for_results(document, self.to_result)
        logger.debug("{}: parsed {} results from {}", self.name, len(results), url)
        return results

    async def fetch_html_from_upstream(
        self,
        url: str,
        headers: httpx.Headers,
        client: AsyncTransport,
    ) -> str:
        logger.debug("{}: requesting {}", self.name, url)
        try:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.text
        except httpx.HTTPError as e:
            raise RequestError(self.name, f"request to {url} failed: {e}") from e

    def clean_description(self, desc: Tag) -> str:
        return strip_leading_spans(desc.decode_contents())


def build_header_map(engine: str, pairs: Iterable[tuple[str, str]]) -> httpx.Headers:
    """Build an ordered header map, rejecting values that cannot go on the wire."""
    try:
        headers = httpx.Headers(list(pairs))
    except (TypeError, ValueError) as e:
        raise UnexpectedError(engine, f"invalid request header: {e}") from e
    for key, value in headers.raw:
        if _INVALID_HEADER_VALUE_RE.search(key) or _INVALID_HEADER_VALUE_RE.search(value):
            raise UnexpectedError(engine, f"invalid request header: {key.decode('latin-1')}")
    return headers


def inner_html(tag: Tag) -> str:
    return tag.decode_contents().strip()
