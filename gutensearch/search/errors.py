"""Search errors raised by adapters and the dispatcher."""


class SearchError(Exception):
    """Base class for search failures."""


class InvalidBackendError(SearchError):
    """Raised when a backend identifier is not in the dispatch table."""

    def __init__(self, db: str):
        self.db = db
        super().__init__(f"Invalid db option {db}, select either pg or es")


class MalformedResponseError(SearchError):
    """Raised when a backend response is missing its expected structure."""


class DispatchTimeoutError(SearchError):
    """Raised when a backend does not answer within the dispatch timeout."""
