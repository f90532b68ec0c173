"""Repeated timed trials across both search backends."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from loguru import logger

from gutensearch.perf.models import ComparisonReport, PhraseComparison, TrialRecord
from gutensearch.search.dispatcher import SearchDispatcher


async def compare_performance(
    dispatcher: SearchDispatcher,
    phrases: Sequence[str],
    retakes: int = 0,
) -> ComparisonReport:
    """
    Time every phrase on every backend for ``retakes + 1`` rounds.

    Rounds walk the phrases in order; the backends for one phrase are searched
    concurrently and both finish before the next phrase starts. The first
    sample of each record is a warm-up and is left out of the statistics.

    Raises:
        ValueError: retakes is negative.
    """
    if retakes < 0:
        raise ValueError("retakes must be >= 0")

    backends = dispatcher.backends
    records: list[dict[str, TrialRecord]] = [
        {db: TrialRecord() for db in backends} for _ in phrases
    ]

    rounds = retakes + 1
    for round_no in range(1, rounds + 1):
        logger.info("Comparison round {}/{} over {} phrases", round_no, rounds, len(phrases))
        for phrase, phrase_records in zip(phrases, records):
            results = await asyncio.gather(
                *(dispatcher.dispatch(db, phrase) for db in backends)
            )
            for result in results:
                phrase_records[result.db].append(result.time_taken)

    entries = tuple(
        PhraseComparison(
            phrase=phrase,
            timings={db: tuple(record.samples) for db, record in phrase_records.items()},
            stats={db: record.statistics() for db, record in phrase_records.items()},
        )
        for phrase, phrase_records in zip(phrases, records)
    )
    totals = {db: sum(entry.stats[db].average for entry in entries) for db in backends}
    return ComparisonReport(entries=entries, totals=totals)
