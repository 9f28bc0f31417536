"""
Preferences model - what the user told us about themselves.
"""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ANY, AnyChoice, Goal, GrowthStyle, TimeCommitment


class UserPreferences(BaseModel):
    """
    Complete preference snapshot for one query.
    Never patched in place: the UI builds a new instance on every edit.
    """
    model_config = ConfigDict(frozen=True)

    # Free text, any delimiter mix
    skills: str = Field(default="", description="Strengths or skills the user leans on")
    interests: str = Field(default="", description="Topics that energize the user")
    audience: str = Field(default="", description="Communities the user can reach easily")

    time_commitment: Union[AnyChoice, TimeCommitment] = ANY
    growth_style: Union[AnyChoice, GrowthStyle] = ANY
    goal: Goal = Goal.INCOME

    @property
    def is_blank(self) -> bool:
        """True when no signal could match any blueprint."""
        return (
            not (self.skills.strip() or self.interests.strip() or self.audience.strip())
            and self.time_commitment == ANY
            and self.growth_style == ANY
        )
