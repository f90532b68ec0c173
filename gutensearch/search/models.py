"""Shared search models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Backend = Literal["pg", "es"]


@dataclass(slots=True)
class Hit:
    """Normalized search result item."""

    id: Any
    details: dict[str, Any] = field(default_factory=dict)
    score: float | None = None

    @classmethod
    def from_details(cls, details: dict[str, Any], score: float | None = None) -> "Hit":
        return cls(id=details.get("id"), details=details, score=score)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Hits returned by one backend for one phrase, with elapsed milliseconds."""

    db: str
    hits: tuple[Hit, ...]
    time_taken: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "db": self.db,
            "hits": [hit.details for hit in self.hits],
            "timeTaken": self.time_taken,
        }
