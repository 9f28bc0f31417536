"""
Export models - shortlist metadata and JSON export structure.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .preferences import UserPreferences
from .scoring import MatchResult


class ShortlistMetadata(BaseModel):
    """Metadata for one ranking run."""
    run_id: str = Field(description="Unique run identifier")
    generated_at: datetime = Field(default_factory=datetime.now)
    rotation_offset: int = Field(default=0, ge=0)
    catalog_size: int = 0

    # Schema version
    schema_version: str = "2.0.0"


class Shortlist(BaseModel):
    """
    A ranked shortlist together with the inputs that produced it.
    """
    metadata: ShortlistMetadata
    preferences: UserPreferences
    matches: list[MatchResult] = Field(default_factory=list)

    def to_minimal_export(self) -> dict[str, Any]:
        """Export minimal version without full blueprint copy."""
        return {
            "metadata": {
                "run_id": self.metadata.run_id,
                "rotation_offset": self.metadata.rotation_offset,
                "exported_at": datetime.now().isoformat(),
            },
            "preferences": self.preferences.model_dump(mode="json"),
            "results": [
                {
                    "rank": rank,
                    "id": m.blueprint.id,
                    "title": m.blueprint.title,
                    "score": m.score,
                    "highlights": {g.label: list(g.items) for g in m.highlights},
                    "launch_steps": list(m.blueprint.launch_steps[:3]),
                }
                for rank, m in enumerate(self.matches, 1)
            ],
        }
