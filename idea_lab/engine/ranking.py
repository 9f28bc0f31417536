"""
Ranking - score-sorted catalog with a rotating display window.
"""
import logging
from collections.abc import Sequence
from typing import Optional, TypeVar

from ..config import RubricWeights
from ..models.catalog import Catalog
from ..models.preferences import UserPreferences
from ..models.scoring import MatchResult
from .scoring import ScoringEngine


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TOP_N = 3


def rotate(items: Sequence[T], offset: int) -> list[T]:
    """
    Rotate left by ``offset`` (taken modulo the length).
    The element at ``offset`` comes first; earlier elements move to the tail.
    """
    rotation = offset % max(len(items), 1)
    if rotation == 0:
        return list(items)
    return [*items[rotation:], *items[:rotation]]


def rank_all(
    catalog: Catalog,
    preferences: UserPreferences,
    weights: Optional[RubricWeights] = None,
) -> list[MatchResult]:
    """
    Score every blueprint and sort by descending score.
    Equal scores keep catalog order (sorted() is stable).
    """
    results = ScoringEngine(catalog, weights).score_all(preferences)
    return sorted(results, key=lambda r: r.score, reverse=True)


def rank(
    catalog: Catalog,
    preferences: UserPreferences,
    rotation_offset: int = 0,
    top_n: int = DEFAULT_TOP_N,
    weights: Optional[RubricWeights] = None,
) -> list[MatchResult]:
    """
    Rank the catalog and return the current display window.

    Args:
        catalog: Blueprints and label tables
        preferences: Complete user preferences
        rotation_offset: Number of "refresh" clicks so far (>= 0)
        top_n: Window size
        weights: Rubric override; config defaults when None

    Returns:
        Up to top_n MatchResults; empty for an empty catalog
    """
    if rotation_offset < 0:
        raise ValueError(f"rotation_offset must be >= 0, got {rotation_offset}")

    ranked = rank_all(catalog, preferences, weights)
    window = rotate(ranked, rotation_offset)[:top_n]

    logger.debug(
        f"Ranked {len(ranked)} blueprints, offset {rotation_offset}: "
        f"{[(m.blueprint.id, m.score) for m in window]}"
    )
    return window
