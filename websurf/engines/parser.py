"""Selector-driven extraction of result fragments from an upstream page."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import soupsieve
from bs4 import BeautifulSoup, Tag

from websurf.engines.errors import ConfigurationError
from websurf.engines.models import SearchResult

ResultMapper = Callable[[Tag, Tag, Tag], SearchResult | None]


class SearchResultParser:
    """
    Apply a fixed set of CSS selectors to a parsed page.

    Every result item is located with ``results`` and then split into three
    children (``result_title``, ``result_url``, ``result_desc``) resolved
    relative to that item. Items missing any child are skipped.
    """

    def __init__(
        self,
        no_result: str,
        results: str,
        result_title: str,
        result_url: str,
        result_desc: str,
    ):
        self.no_result = _compile(no_result)
        self.results = _compile(results)
        self.result_title = _compile(result_title)
        self.result_url = _compile(result_url)
        self.result_desc = _compile(result_desc)

    def parse_for_no_results(self, document: BeautifulSoup) -> Iterator[Tag]:
        """Lazily yield nodes matching the no-results indicator."""
        return self.no_result.iselect(document)

    def parse_for_results(
        self,
        document: BeautifulSoup,
        mapper: ResultMapper,
    ) -> list[SearchResult]:
        """Map every well-formed result item through ``mapper`` in page order."""
        results: list[SearchResult] = []
        for item in self.results.iselect(document):
            title = self.result_title.select_one(item)
            url = self.result_url.select_one(item)
            desc = self.result_desc.select_one(item)
            if title is None or url is None or desc is None:
                continue
            result = mapper(title, url, desc)
            if result is not None:
                results.append(result)
        return results


def _compile(selector: str) -> soupsieve.SoupSieve:
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise ConfigurationError(message=f"invalid selector {selector!r}: {e}") from e
