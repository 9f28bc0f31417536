"""
Blueprint model - one pre-authored zero-capital business plan.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import GrowthStyle, TimeCommitment


class Blueprint(BaseModel):
    """
    A static catalog entry.
    Skill, interest and audience labels are matched case-insensitively
    against preference tokens; everything else is display copy.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable identifier")
    title: str
    headline: str
    description: str

    # Matching signals
    required_skills: tuple[str, ...] = Field(default=(), description="Direct fit skills")
    supportive_skills: tuple[str, ...] = Field(default=(), description="Transferable skills")
    suitable_interests: tuple[str, ...] = ()
    target_audiences: tuple[str, ...] = ()
    time_commitment: TimeCommitment
    growth_styles: tuple[GrowthStyle, ...] = Field(
        description="First entry is the primary style shown on cards"
    )

    # Playbook content
    revenue_streams: tuple[str, ...] = ()
    no_cash_tactics: tuple[str, ...] = ()
    launch_steps: tuple[str, ...] = ()
    scale_angles: tuple[str, ...] = ()
    value_props: tuple[str, ...] = ()
    validation_signals: tuple[str, ...] = Field(
        default=(),
        description="Proof points that earn the credibility bonus",
    )
    differentiation: str = Field(min_length=1, description="Fallback highlight")

    @field_validator("id", "differentiation")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("growth_styles")
    @classmethod
    def requires_growth_style(cls, v: tuple[GrowthStyle, ...]) -> tuple[GrowthStyle, ...]:
        if not v:
            raise ValueError("a blueprint needs at least one growth style")
        return v

    @property
    def primary_growth_style(self) -> GrowthStyle:
        return self.growth_styles[0]
