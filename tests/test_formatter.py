import math

from gutensearch.perf.models import ComparisonReport, PhraseComparison, Statistics
from gutensearch.report.formatter import (
    format_authors,
    format_comparison,
    format_hit,
    format_hits,
    format_number,
    format_totals,
    hit_rows,
    truncate_title,
)
from gutensearch.search.models import Hit


def test_truncate_title_keeps_short_titles() -> None:
    assert truncate_title("Moby Dick") == "Moby Dick"
    assert truncate_title("x" * 50) == "x" * 50


def test_truncate_title_cuts_long_titles_with_ellipsis() -> None:
    title = "The Strange Case of Dr. Jekyll and Mr. Hyde and Other Stories"
    assert len(title) > 50

    formatted = truncate_title(title)

    assert formatted == title[:50] + "..."


def test_truncate_title_collapses_line_breaks_and_semicolons() -> None:
    title = "Alice's Adventures in Wonderland;\r\nThrough the Looking-Glass\nand what Alice found there"

    formatted = truncate_title(title)

    assert "\n" not in formatted and "\r" not in formatted
    assert formatted.startswith("Alice's Adventures in Wonderland;Through the Loo")
    assert formatted.endswith("...")


def test_format_authors_keeps_first_three_surnames() -> None:
    authors = [
        "Twain, Mark",
        "Warner, Charles Dudley",
        "Howells, William Dean",
        "Harte, Bret",
        "Cable, George Washington",
    ]

    assert format_authors(authors) == "Twain,Warner,Howells"


def test_format_authors_without_separator() -> None:
    assert format_authors(["Homer"]) == "Homer"
    assert format_authors([]) == ""


def test_format_hit_and_rows_preserve_order() -> None:
    hits = [
        Hit.from_details({"id": 2701, "title": "Moby Dick; Or, The Whale", "authors": ["Melville, Herman"]}),
        Hit.from_details({"id": 15, "title": "Moby Dick", "authors": []}),
    ]

    formatted = format_hits(hits)

    assert formatted[0] == {"id": "2701", "title": "Moby Dick; Or, The Whale", "authors": "Melville"}
    assert [row[0] for row in hit_rows(hits)] == ["2701", "15"]


def test_format_hit_tolerates_missing_fields() -> None:
    assert format_hit(Hit(id=None, details={})) == {"id": "", "title": "", "authors": ""}


def _report() -> ComparisonReport:
    entries = (
        PhraseComparison(
            phrase="moby dick",
            timings={"es": (90, 10, 14), "pg": (70, 20, 25)},
            stats={
                "es": Statistics.from_samples([10, 14]),
                "pg": Statistics.from_samples([20, 25]),
            },
        ),
        PhraseComparison(
            phrase="the",
            timings={"es": (40, 3, 4, 4), "pg": (44, 7, 8, 8)},
            stats={
                "es": Statistics.from_samples([3, 4, 4]),
                "pg": Statistics.from_samples([7, 8, 8]),
            },
        ),
    )
    totals = {db: sum(entry.stats[db].average for entry in entries) for db in ("es", "pg")}
    return ComparisonReport(entries=entries, totals=totals)


def test_format_comparison_rows() -> None:
    rows = format_comparison(_report())

    assert rows[0] == ["moby dick", "(10, 20)", "(14, 25)", "12.00", "22.50"]
    assert rows[1] == ["the", "(3, 7)", "(4, 8)", "3.67", "7.67"]


def test_format_totals() -> None:
    lines = format_totals(_report())

    assert lines[0] == f"ES ave total: {12 + 11 / 3}"
    assert lines[1].startswith("PG ave total: ")


def test_format_number_handles_nan_and_whole_numbers() -> None:
    assert format_number(math.nan) == "nan"
    assert format_number(12.0) == "12"
    assert format_number(2.5) == "2.5"


def test_format_comparison_with_insufficient_data() -> None:
    empty = Statistics.from_samples([])
    report = ComparisonReport(
        entries=(PhraseComparison(phrase="x", timings={"es": (5,), "pg": (6,)}, stats={"es": empty, "pg": empty}),),
        totals={"es": math.nan, "pg": math.nan},
    )

    assert format_comparison(report) == [["x", "(nan, nan)", "(nan, nan)", "nan", "nan"]]
    assert format_totals(report) == ["ES ave total: nan", "PG ave total: nan"]
