"""Service layer for catalog search."""

import logging

from chamo_search.matching.fuzzy import fuzzy_match
from chamo_search.models.pydantic_models import MatchThresholds, SearchItem, SearchResults

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8


def search_catalog(
    query: str,
    items: list[SearchItem],
    limit: int | None = DEFAULT_LIMIT,
    thresholds: MatchThresholds | None = None,
) -> SearchResults:
    """Find catalog items approximately matching a query.

    Each item is matched on ``"{label} {sublabel}"``. Matches are ordered
    categories first, then professions, then professionals, keeping catalog
    order within a type.

    Args:
        query: Raw search text. Blank queries return no items.
        items: Catalog to search.
        limit: Maximum items returned. None or 0 means unlimited.
        thresholds: Distance table for typo tolerance.

    Returns:
        SearchResults with the total match count and the limited items.

    Raises:
        ValueError: If limit is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    query = query.strip()
    if not query:
        return SearchResults(query=query)

    matched = [item for item in items if fuzzy_match(query, item.searchable_text, thresholds)]
    matched.sort(key=lambda item: item.type.rank)

    logger.debug("Query %r matched %d of %d items", query, len(matched), len(items))

    return SearchResults(
        query=query,
        total=len(matched),
        items=matched[:limit] if limit else matched,
    )
