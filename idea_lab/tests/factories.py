"""
Builders for test blueprints and catalogs.
"""
from typing import Any

from idea_lab.catalog import build_catalog
from idea_lab.catalog.loader import builtin_catalog_data
from idea_lab.models.blueprint import Blueprint
from idea_lab.models.catalog import Catalog


def make_blueprint(blueprint_id: str, **overrides: Any) -> Blueprint:
    """Build a minimal blueprint; overrides replace any field."""
    fields: dict[str, Any] = {
        "id": blueprint_id,
        "title": blueprint_id.title(),
        "headline": f"{blueprint_id} headline",
        "description": f"{blueprint_id} description",
        "time_commitment": "full-time",
        "growth_styles": ["partnerships"],
        "differentiation": f"{blueprint_id} edge",
    }
    fields.update(overrides)
    return Blueprint(**fields)


def make_catalog(blueprints: list[Blueprint]) -> Catalog:
    """Wrap blueprints in a catalog that reuses the built-in label tables."""
    raw = builtin_catalog_data()
    raw["blueprints"] = [b.model_dump() for b in blueprints]
    return build_catalog(raw, source="test")
