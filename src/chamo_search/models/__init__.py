"""Data models."""

from chamo_search.models.pydantic_models import (
    DistanceBand,
    ItemType,
    MatchThresholds,
    SearchItem,
    SearchResults,
)

__all__ = [
    "DistanceBand",
    "ItemType",
    "MatchThresholds",
    "SearchItem",
    "SearchResults",
]
