"""Concurrent fan-out over the configured upstream engines."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
from loguru import logger

from websurf.engines.base import AsyncTransport, SearchEngine
from websurf.engines.errors import EngineError, UnexpectedError
from websurf.engines.models import SearchResult
from websurf.engines.registry import build_engines

if TYPE_CHECKING:
    from websurf.config.schema import Config

EngineOutcome = list[SearchResult] | EngineError


class SearchEngineClient:
    """Run every enabled engine for one query and collect each outcome.

    Results are not merged; every engine's list (or the error it raised) is
    reported under its own name.
    """

    def __init__(self, config: "Config | None" = None):
        from websurf.config.schema import Config

        self.config = config or Config()
        self.engines: list[SearchEngine] = build_engines(self.config.engines.enabled())

    def enabled_engines(self) -> list[str]:
        return [engine.name for engine in self.engines]

    async def search(
        self,
        query: str,
        page: int = 0,
        client: AsyncTransport | None = None,
    ) -> dict[str, EngineOutcome]:
        """Query all enabled engines concurrently."""
        if client is not None:
            return await self._gather(query, page, client)

        async with httpx.AsyncClient(
            timeout=self.config.request_timeout,
            follow_redirects=True,
        ) as http_client:
            return await self._gather(query, page, http_client)

    async def _gather(
        self,
        query: str,
        page: int,
        client: AsyncTransport,
    ) -> dict[str, EngineOutcome]:
        outcomes = await asyncio.gather(
            *(self._run(engine, query, page, client) for engine in self.engines)
        )
        return dict(outcomes)

    async def _run(
        self,
        engine: SearchEngine,
        query: str,
        page: int,
        client: AsyncTransport,
    ) -> tuple[str, EngineOutcome]:
        try:
            results = await engine.fetch_results(
                query,
                page,
                self.config.user_agent,
                client,
                self.config.safe_search,
                self.config.accept_language,
            )
        except EngineError as e:
            logger.warning("Engine {} failed for query {!r}: {}", engine.name, query, e)
            return engine.name, e
        except Exception as e:
            logger.exception("Engine {} crashed for query {!r}", engine.name, query)
            error = UnexpectedError(engine.name, str(e) or type(e).__name__)
            error.__cause__ = e
            return engine.name, error
        return engine.name, results
