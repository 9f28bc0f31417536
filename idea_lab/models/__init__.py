"""
Pydantic models for Idea Lab.
All data contracts are defined here for strict validation.
"""

from .enums import ANY, Goal, GrowthStyle, TimeCommitment
from .blueprint import Blueprint
from .preferences import UserPreferences
from .scoring import HighlightGroup, MatchResult
from .catalog import Catalog, GoalPlaybook, GoalPreset
from .export import Shortlist, ShortlistMetadata

__all__ = [
    # Enums
    "ANY",
    "Goal",
    "GrowthStyle",
    "TimeCommitment",
    # Blueprint
    "Blueprint",
    # Preferences
    "UserPreferences",
    # Scoring
    "HighlightGroup",
    "MatchResult",
    # Catalog
    "Catalog",
    "GoalPlaybook",
    "GoalPreset",
    # Export
    "Shortlist",
    "ShortlistMetadata",
]
