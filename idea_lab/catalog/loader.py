"""
Catalog loader - builds and validates the catalog once per process.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config import get_config
from ..models.catalog import Catalog
from . import data


logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog configuration cannot be turned into a valid Catalog."""


def builtin_catalog_data() -> dict[str, Any]:
    """Return the built-in catalog as a plain dict (same shape as a JSON catalog)."""
    return {
        "blueprints": data.BLUEPRINTS,
        "time_commitment_labels": data.TIME_COMMITMENT_LABELS,
        "growth_style_labels": data.GROWTH_STYLE_LABELS,
        "goal_playbooks": data.GOAL_PLAYBOOKS,
        "goal_presets": data.GOAL_PRESETS,
        "strategic_angles": data.STRATEGIC_ANGLES,
        "diagnostic_questions": data.DIAGNOSTIC_QUESTIONS,
    }


def build_catalog(raw: dict[str, Any], source: str = "<memory>") -> Catalog:
    """
    Validate raw catalog data.

    Args:
        raw: Catalog data in the built-in/JSON shape
        source: Where the data came from, for error messages

    Returns:
        Validated, immutable Catalog

    Raises:
        CatalogError: If any entry is malformed
    """
    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Invalid catalog from {source}: {e.error_count()} error(s)")
        raise CatalogError(f"Invalid catalog from {source}: {e}") from e

    logger.info(f"Loaded {len(catalog)} blueprints from {source}")
    return catalog


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """
    Load the catalog from a JSON file, or the built-in data when no path is given.

    Falls back to the configured ``IDEA_LAB_CATALOG_PATH`` before the built-in data.
    """
    if path is None:
        path = get_config().catalog.path

    if path is None:
        return build_catalog(builtin_catalog_data(), source="built-in catalog")

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read catalog file {path}: {e}")
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error(f"Catalog file {path} is not UTF-8: {e}")
        raise CatalogError(f"Catalog file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Catalog file {path} is not valid JSON: {e}")
        raise CatalogError(f"Catalog file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        logger.error(f"Catalog file {path} has a {type(raw).__name__} at the top level")
        raise CatalogError(f"Catalog file {path} must contain a JSON object")

    return build_catalog(raw, source=str(path))


# Process-wide catalog instance
_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get or load the shared catalog."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog
