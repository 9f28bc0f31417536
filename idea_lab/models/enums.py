"""
Closed sets used by blueprints and preferences.
"""
from enum import Enum
from typing import Literal


class TimeCommitment(str, Enum):
    """Weekly hours a plan asks for."""
    MICRO = "micro"
    PART_TIME = "part-time"
    FULL_TIME = "full-time"


class GrowthStyle(str, Enum):
    """How a plan compounds once launched."""
    COMMUNITY = "community"
    CONTENT = "content"
    PARTNERSHIPS = "partnerships"
    PRODUCTIZED = "productized"
    AUTOMATION = "automation"


class Goal(str, Enum):
    """The user's primary goal. Always concrete, never "any"."""
    INCOME = "income"
    AUDIENCE = "audience"
    CREDIBILITY = "credibility"
    AUTOMATION = "automation"


# "No constraint" variant for the optional categorical preferences
ANY = "any"
AnyChoice = Literal["any"]
