"""
Scoring models - highlight groups and per-blueprint match results.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .blueprint import Blueprint


class HighlightGroup(BaseModel):
    """A labeled set of matched items explaining part of a score."""
    model_config = ConfigDict(frozen=True)

    label: str
    items: tuple[str, ...]


class MatchResult(BaseModel):
    """A blueprint with the score it earned and why."""
    model_config = ConfigDict(frozen=True)

    blueprint: Blueprint
    score: int = Field(ge=0)
    highlights: tuple[HighlightGroup, ...] = Field(min_length=1)

    @property
    def highlight_items(self) -> list[str]:
        """All highlight items flattened in display order."""
        return [item for group in self.highlights for item in group.items]

    def highlight(self, label: str) -> Optional[HighlightGroup]:
        """Get a highlight group by label."""
        for group in self.highlights:
            if group.label == label:
                return group
        return None
