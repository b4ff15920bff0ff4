"""Service layer."""

from chamo_search.services.search_service import search_catalog

__all__ = ["search_catalog"]
