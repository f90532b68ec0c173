"""Models for latency comparison data."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Statistics:
    """Latency summary of a sample sequence; NaN fields mean insufficient data."""

    max: float
    min: float
    average: float

    @classmethod
    def from_samples(cls, samples: Sequence[float]) -> "Statistics":
        if not samples:
            return cls(max=math.nan, min=math.nan, average=math.nan)
        return cls(
            max=float(max(samples)),
            min=float(min(samples)),
            average=sum(samples) / len(samples),
        )

    @property
    def insufficient(self) -> bool:
        return math.isnan(self.average)

    def to_dict(self) -> dict[str, float]:
        return {"max": self.max, "min": self.min, "ave": self.average}


@dataclass(slots=True)
class TrialRecord:
    """Elapsed milliseconds for one phrase on one backend, one sample per round."""

    samples: list[int] = field(default_factory=list)

    def append(self, elapsed_ms: int) -> None:
        self.samples.append(elapsed_ms)

    @property
    def warm(self) -> list[int]:
        """Samples after the cold-start warm-up."""
        return self.samples[1:]

    def statistics(self) -> Statistics:
        return Statistics.from_samples(self.warm)

    def __len__(self) -> int:
        return len(self.samples)


@dataclass(frozen=True, slots=True)
class PhraseComparison:
    """Per-backend timings and statistics for one phrase."""

    phrase: str
    timings: dict[str, tuple[int, ...]]
    stats: dict[str, Statistics]

    def to_dict(self) -> dict[str, Any]:
        return {
            "phrase": self.phrase,
            **{
                db: {"timings": list(self.timings[db]), **self.stats[db].to_dict()}
                for db in self.stats
            },
        }


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """Per-phrase comparisons plus the sum of averages for each backend."""

    entries: tuple[PhraseComparison, ...]
    totals: dict[str, float]

    def to_dict(self) -> dict[str, Any]:
        return {
            "perfs": [entry.to_dict() for entry in self.entries],
            "totals": dict(self.totals),
        }
