"""PostgreSQL full-text search adapter."""

from typing import Any

from gutensearch.search.models import Hit

# Strict english parse, permissive simple parse and an OR-joined variant,
# combined into one tsquery and ranked together.
SEARCH_QUERY = """
select
    details,
    ts_rank(search, ts.query)::numeric(10,3) as relevance
from
    (select
        websearch_to_tsquery('english', %(phrase)s) ||
        websearch_to_tsquery('simple', %(phrase)s) ||
        websearch_to_tsquery('simple', replace(%(phrase)s, ' ', ' or ')) as query
    ) as ts,
    book
where book.search @@ ts.query
order by relevance desc
limit %(limit)s
"""

DEFAULT_LIMIT = 10


async def search_postgres(
    *,
    phrase: str,
    connection: Any,
    limit: int = DEFAULT_LIMIT,
) -> list[Hit]:
    """Run the ranked text-search query and normalize rows best-first."""
    cursor = await connection.execute(SEARCH_QUERY, {"phrase": phrase, "limit": limit})
    rows = await cursor.fetchall()
    return [
        Hit.from_details(row["details"] or {}, score=_to_score(row.get("relevance")))
        for row in rows
    ]


def _to_score(value: Any) -> float | None:
    # numeric(10,3) arrives as Decimal
    return float(value) if value is not None else None
