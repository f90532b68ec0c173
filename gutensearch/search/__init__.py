"""Search adapters, models and the backend dispatcher."""

from gutensearch.search.dispatcher import BACKENDS, SearchDispatcher
from gutensearch.search.errors import (
    DispatchTimeoutError,
    InvalidBackendError,
    MalformedResponseError,
    SearchError,
)
from gutensearch.search.models import Backend, Hit, SearchResult

__all__ = [
    "BACKENDS",
    "Backend",
    "DispatchTimeoutError",
    "Hit",
    "InvalidBackendError",
    "MalformedResponseError",
    "SearchDispatcher",
    "SearchError",
    "SearchResult",
]
