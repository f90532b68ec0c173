"""Elasticsearch query-string search adapter."""

from typing import Any

import httpx

from gutensearch.search.errors import MalformedResponseError
from gutensearch.search.models import Hit


async def search_elastic(
    *,
    phrase: str,
    base_url: str,
    index: str = "",
    timeout: float = 10.0,
) -> list[Hit]:
    """Search with a query-string request and normalize the hit sources."""
    path = f"{index.strip('/')}/_search" if index else "_search"
    url = f"{base_url.rstrip('/')}/{path}"
    async with httpx.AsyncClient() as client:
        response = await client.get(
            url,
            params={"q": phrase},
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
        response.raise_for_status()

    try:
        body = response.json()
    except ValueError:
        raise MalformedResponseError("elasticsearch response is not JSON") from None
    return [Hit.from_details(source) for source in _extract_sources(body)]


def _extract_sources(body: Any) -> list[dict[str, Any]]:
    if not isinstance(body, dict):
        raise MalformedResponseError("elasticsearch response is not an object")
    envelope = body.get("hits")
    if not isinstance(envelope, dict) or not isinstance(envelope.get("hits"), list):
        raise MalformedResponseError("elasticsearch response has no hits.hits list")

    sources: list[dict[str, Any]] = []
    for position, item in enumerate(envelope["hits"]):
        source = item.get("_source") if isinstance(item, dict) else None
        if not isinstance(source, dict):
            raise MalformedResponseError(f"elasticsearch hit {position} has no _source object")
        sources.append(dict(source))
    return sources
