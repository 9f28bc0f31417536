"""Blueprint catalog: built-in data and validated loading."""

from .loader import CatalogError, build_catalog, get_catalog, load_catalog

__all__ = ["CatalogError", "build_catalog", "get_catalog", "load_catalog"]
