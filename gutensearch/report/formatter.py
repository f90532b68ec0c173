"""Display shaping for search hits and comparison reports."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from gutensearch.perf.models import ComparisonReport, Statistics
from gutensearch.search.models import Hit, SearchResult

TITLE_WIDTH = 50
MAX_AUTHORS = 3
ELLIPSIS = "..."

_SEPARATOR_RUN_RE = re.compile(r"[;\r\n]+")

HIT_HEAD = ["id", "title", "authors"]
HIT_COL_WIDTHS = [7, 55, 15]
COMPARISON_HEAD = ["phrase", "(ESmin, PGmin)", "(ESmax, PGmax)", "esAve", "pgAve"]
COMPARISON_COL_WIDTHS = [20, 20, 20, 15, 15]


def truncate_title(title: str, width: int = TITLE_WIDTH) -> str:
    """Cut to ``width`` characters, collapse separator runs, mark truncation."""
    shortened = _SEPARATOR_RUN_RE.sub(";", title[:width])
    return f"{shortened}{ELLIPSIS if len(title) > width else ''}"


def format_authors(authors: Iterable[str], limit: int = MAX_AUTHORS) -> str:
    """First ``limit`` authors, surname only (text before the first comma)."""
    return ",".join(str(author).split(",")[0] for author in list(authors)[:limit])


def format_hit(hit: Hit) -> dict[str, str]:
    details = hit.details
    hit_id = details.get("id", hit.id)
    return {
        "id": "" if hit_id is None else str(hit_id),
        "title": truncate_title(str(details.get("title") or "")),
        "authors": format_authors(details.get("authors") or []),
    }


def format_hits(hits: Iterable[Hit]) -> list[dict[str, str]]:
    return [format_hit(hit) for hit in hits]


def hit_rows(hits: Iterable[Hit]) -> list[list[str]]:
    return [[row[column] for column in HIT_HEAD] for row in format_hits(hits)]


def format_number(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_average(value: float) -> str:
    return f"{value:.2f}"


def _pair(es: Statistics, pg: Statistics, field: str) -> str:
    return f"({format_number(getattr(es, field))}, {format_number(getattr(pg, field))})"


def format_comparison(report: ComparisonReport) -> list[list[str]]:
    """One row per phrase: (min pair), (max pair), ES average, PG average."""
    rows: list[list[str]] = []
    for entry in report.entries:
        es, pg = entry.stats["es"], entry.stats["pg"]
        rows.append(
            [
                entry.phrase,
                _pair(es, pg, "min"),
                _pair(es, pg, "max"),
                format_average(es.average),
                format_average(pg.average),
            ]
        )
    return rows


def format_totals(report: ComparisonReport) -> list[str]:
    return [
        f"ES ave total: {format_number(report.totals['es'])}",
        f"PG ave total: {format_number(report.totals['pg'])}",
    ]


def search_result_to_dict(result: SearchResult) -> dict[str, Any]:
    return result.to_dict()
