"""
Shared fixtures.
"""
import pytest

from idea_lab.catalog import load_catalog
from idea_lab.config import reset_config
from idea_lab.models.catalog import Catalog

from .factories import make_catalog


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep each test independent of the developer's environment."""
    monkeypatch.delenv("IDEA_LAB_CATALOG_PATH", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def builtin_catalog() -> Catalog:
    """The shipped catalog."""
    return load_catalog()


@pytest.fixture
def empty_catalog() -> Catalog:
    return make_catalog([])
