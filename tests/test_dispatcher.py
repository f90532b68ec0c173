import asyncio
from unittest.mock import AsyncMock

import pytest

from gutensearch.search.dispatcher import BACKENDS, SearchDispatcher
from gutensearch.search.errors import DispatchTimeoutError, InvalidBackendError
from gutensearch.search.models import Hit, SearchResult


def _hits(*ids: int) -> list[Hit]:
    return [Hit.from_details({"id": i, "title": f"Book {i}"}) for i in ids]


@pytest.mark.asyncio
@pytest.mark.parametrize("db", ["pg", "es"])
async def test_dispatch_wraps_adapter_hits_with_timing(db) -> None:
    hits = _hits(3, 1, 2)
    adapters = {"es": AsyncMock(return_value=hits), "pg": AsyncMock(return_value=hits)}
    dispatcher = SearchDispatcher(adapters)

    result = await dispatcher.dispatch(db, "moby dick")

    assert isinstance(result, SearchResult)
    assert result.db == db
    assert list(result.hits) == hits
    assert result.time_taken >= 0
    adapters[db].assert_awaited_once_with("moby dick")


@pytest.mark.asyncio
async def test_dispatch_measures_adapter_duration() -> None:
    async def slow(phrase: str) -> list[Hit]:
        await asyncio.sleep(0.05)
        return []

    result = await SearchDispatcher({"es": slow}).dispatch("es", "x")

    assert result.time_taken >= 40


@pytest.mark.asyncio
@pytest.mark.parametrize("db", ["mysql", "", "PG", "elastic"])
async def test_dispatch_rejects_unknown_backend_without_io(db) -> None:
    adapters = {"es": AsyncMock(return_value=[]), "pg": AsyncMock(return_value=[])}
    dispatcher = SearchDispatcher(adapters)

    with pytest.raises(InvalidBackendError, match=f"Invalid db option {db}, select either pg or es"):
        await dispatcher.dispatch(db, "phrase")

    adapters["es"].assert_not_called()
    adapters["pg"].assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_propagates_adapter_errors() -> None:
    dispatcher = SearchDispatcher({"pg": AsyncMock(side_effect=ConnectionError("refused"))})

    with pytest.raises(ConnectionError, match="refused"):
        await dispatcher.dispatch("pg", "x")


@pytest.mark.asyncio
async def test_dispatch_timeout_raises() -> None:
    async def hung(phrase: str) -> list[Hit]:
        await asyncio.sleep(10)
        return []

    dispatcher = SearchDispatcher({"es": hung}, timeout=0.01)

    with pytest.raises(DispatchTimeoutError, match="es search timed out"):
        await dispatcher.dispatch("es", "x")


def test_dispatcher_zero_timeout_is_disabled() -> None:
    assert SearchDispatcher({}, timeout=0).timeout is None
    assert SearchDispatcher({}, timeout=None).timeout is None


def test_dispatcher_backends_follow_table_order() -> None:
    dispatcher = SearchDispatcher({db: AsyncMock() for db in BACKENDS})
    assert dispatcher.backends == ("es", "pg")


def test_search_result_to_dict_matches_json_shape() -> None:
    result = SearchResult(db="pg", hits=tuple(_hits(7)), time_taken=12)
    assert result.to_dict() == {
        "db": "pg",
        "hits": [{"id": 7, "title": "Book 7"}],
        "timeTaken": 12,
    }
