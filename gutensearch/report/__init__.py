"""Formatting and rendering for search results and comparison reports."""

from gutensearch.report.formatter import (
    format_authors,
    format_comparison,
    format_hit,
    format_hits,
    format_totals,
    search_result_to_dict,
    truncate_title,
)
from gutensearch.report.table import render_table

__all__ = [
    "format_authors",
    "format_comparison",
    "format_hit",
    "format_hits",
    "format_totals",
    "render_table",
    "search_result_to_dict",
    "truncate_title",
]
