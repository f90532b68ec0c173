"""Backend dispatch with wall-clock timing."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Mapping

from loguru import logger

from gutensearch.search.errors import DispatchTimeoutError, InvalidBackendError
from gutensearch.search.models import Backend, Hit, SearchResult

Adapter = Callable[[str], Awaitable[list[Hit]]]

BACKENDS: tuple[Backend, ...] = ("es", "pg")


class SearchDispatcher:
    """Route a phrase to the adapter registered for a backend and time it."""

    def __init__(self, adapters: Mapping[str, Adapter], timeout: float | None = None):
        self._adapters = dict(adapters)
        self.timeout = timeout if timeout and timeout > 0 else None

    @property
    def backends(self) -> tuple[str, ...]:
        return tuple(self._adapters)

    async def dispatch(self, db: str, phrase: str) -> SearchResult:
        """Search one backend and return its hits with elapsed milliseconds."""
        adapter = self._adapters.get(db)
        if adapter is None:
            raise InvalidBackendError(db)

        start = time.perf_counter()
        hits = await self._call(db, adapter, phrase)
        stop = time.perf_counter()

        time_taken = int((stop - start) * 1000)
        logger.debug("{} search for {!r}: {} hits in {} ms", db, phrase, len(hits), time_taken)
        return SearchResult(db=db, hits=tuple(hits), time_taken=time_taken)

    async def _call(self, db: str, adapter: Adapter, phrase: str) -> list[Hit]:
        if self.timeout is None:
            return await adapter(phrase)
        try:
            return await asyncio.wait_for(adapter(phrase), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise DispatchTimeoutError(
                f"{db} search timed out after {self.timeout} seconds"
            ) from None
