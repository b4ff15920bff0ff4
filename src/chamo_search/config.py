"""YAML/JSON loaders for matcher settings and the search catalog."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chamo_search.models.pydantic_models import MatchThresholds, SearchItem

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file has an unexpected shape."""


def _get_default_config_path() -> Path:
    """Get the default config path relative to project root."""
    return Path(__file__).parent.parent.parent / "config" / "matcher.yaml"


def _load_raw_file(path: Path) -> Any:
    """Parse a YAML or JSON file, choosing by extension.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
        json.JSONDecodeError: If JSON parsing fails.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            content = f.read()
            return json.loads(content) if content.strip() else None
        return yaml.safe_load(f)


def load_thresholds(path: Path | None = None) -> MatchThresholds:
    """Load the fuzzy matching threshold table.

    Args:
        path: Path to YAML config file. If None, uses config/matcher.yaml
            when it exists and built-in defaults otherwise.

    Returns:
        Validated MatchThresholds instance.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
        ValidationError: If config doesn't match expected schema.
    """
    if path is None:
        path = _get_default_config_path()
        if not path.exists():
            logger.debug("No matcher config at %s, using defaults", path)
            return MatchThresholds()

    raw_config = _load_raw_file(path) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config root must be a mapping: {path}")

    section = raw_config.get("fuzzy_thresholds") or {}
    thresholds = MatchThresholds.model_validate(section)
    logger.debug("Loaded thresholds from %s: %s", path, thresholds)
    return thresholds


def load_catalog(path: Path) -> list[SearchItem]:
    """Load searchable items from a YAML or JSON catalog.

    The file holds either a list of items or a mapping with an ``items``
    list. Each item needs at least ``id``, ``type`` and ``label``.

    Args:
        path: Catalog file (.yaml, .yml or .json).

    Returns:
        Items in file order.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist.
        CatalogError: If the file or one of its entries is malformed.
    """
    raw = _load_raw_file(path)
    if raw is None:
        return []

    if isinstance(raw, dict):
        raw = raw.get("items") or []
    if not isinstance(raw, list):
        raise CatalogError(f"Catalog must be a list of items: {path}")

    items: list[SearchItem] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry {index} is not a mapping")
        # ids are often numeric in exported data
        if "id" in entry:
            entry = {**entry, "id": str(entry["id"])}
        try:
            items.append(SearchItem.model_validate(entry))
        except ValidationError as e:
            raise CatalogError(f"Catalog entry {index} is invalid: {e}") from e

    logger.debug("Loaded %d catalog items from %s", len(items), path)
    return items
