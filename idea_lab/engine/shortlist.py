"""
Shortlist builder - runs a ranking and packages it for display and export.
"""
import logging
import uuid
from typing import Optional

from ..config import get_config
from ..models.catalog import Catalog
from ..models.export import Shortlist, ShortlistMetadata
from ..models.preferences import UserPreferences
from .ranking import rank


logger = logging.getLogger(__name__)


def build_shortlist(
    catalog: Catalog,
    preferences: UserPreferences,
    rotation_offset: int = 0,
    top_n: Optional[int] = None,
) -> Shortlist:
    """
    Rank the catalog for the given preferences and wrap the result.

    Args:
        catalog: Blueprint catalog
        preferences: User preferences
        rotation_offset: Refresh counter owned by the caller
        top_n: Number of blueprints to show (config default when None)

    Returns:
        Shortlist with metadata, the preferences used, and the matches
    """
    config = get_config()
    if top_n is None:
        top_n = config.engine.top_n

    run_id = str(uuid.uuid4())[:8]
    logger.info(
        f"Shortlist run {run_id}: {len(catalog)} blueprints, goal={preferences.goal.value}, "
        f"offset={rotation_offset}"
    )

    matches = rank(
        catalog,
        preferences,
        rotation_offset=rotation_offset,
        top_n=top_n,
        weights=config.engine.weights,
    )

    if preferences.is_blank:
        logger.info("No preference signals yet; only goal bonuses affect the order")

    metadata = ShortlistMetadata(
        run_id=run_id,
        rotation_offset=rotation_offset,
        catalog_size=len(catalog),
    )

    match_ids = [m.blueprint.id for m in matches]
    logger.info(
        f"Shortlist run {run_id} completed: {match_ids}",
        extra={"extra": {"run_id": run_id, "rotation_offset": rotation_offset, "matches": match_ids}},
    )
    return Shortlist(metadata=metadata, preferences=preferences, matches=matches)
