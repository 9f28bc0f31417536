"""
Catalog models - the immutable blueprint set and its lookup tables.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .blueprint import Blueprint
from .enums import Goal, GrowthStyle, TimeCommitment


class GoalPlaybook(BaseModel):
    """Focus points shown for the selected goal."""
    model_config = ConfigDict(frozen=True)

    headline: str
    focus_points: tuple[str, ...] = Field(min_length=1)


class GoalPreset(BaseModel):
    """Copy for the goal picker tiles."""
    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    example: str


class Catalog(BaseModel):
    """
    Everything the engine and UI read but never change.
    Built once at startup; a malformed entry fails construction.
    """
    model_config = ConfigDict(frozen=True)

    blueprints: tuple[Blueprint, ...] = ()

    # Lookup tables
    time_commitment_labels: dict[TimeCommitment, str]
    growth_style_labels: dict[GrowthStyle, str]
    goal_playbooks: dict[Goal, GoalPlaybook]
    goal_presets: dict[Goal, GoalPreset]

    # Static guidance copy
    strategic_angles: tuple[str, ...] = ()
    diagnostic_questions: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_consistency(self) -> "Catalog":
        seen: set[str] = set()
        for blueprint in self.blueprints:
            if blueprint.id in seen:
                raise ValueError(f"duplicate blueprint id: {blueprint.id}")
            seen.add(blueprint.id)

        for table, enum_cls in (
            (self.time_commitment_labels, TimeCommitment),
            (self.growth_style_labels, GrowthStyle),
            (self.goal_playbooks, Goal),
            (self.goal_presets, Goal),
        ):
            missing = [member.value for member in enum_cls if member not in table]
            if missing:
                raise ValueError(f"missing {enum_cls.__name__} entries: {', '.join(missing)}")
        return self

    def __len__(self) -> int:
        return len(self.blueprints)

    def time_label(self, value: TimeCommitment) -> str:
        return self.time_commitment_labels[value]

    def growth_label(self, value: GrowthStyle) -> str:
        return self.growth_style_labels[value]
