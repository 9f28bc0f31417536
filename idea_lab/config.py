"""
Configuration and environment handling for Idea Lab.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name, "").strip()
    return Path(value) if value else None


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class RubricWeights(BaseModel):
    """Points awarded by each rule of the matching rubric."""
    direct_skill: int = Field(default=4, ge=0, description="Per matched required skill")
    transferable_skill: int = Field(default=2, ge=0, description="Per matched supportive skill")
    interest: int = Field(default=3, ge=0, description="Per matched interest")
    audience: int = Field(default=2, ge=0, description="Per matched audience")
    time_fit: int = Field(default=4, ge=0)
    growth_fit: int = Field(default=5, ge=0)

    # Goal-conditioned bonuses
    income_bonus: int = Field(default=3, ge=0)
    automation_bonus: int = Field(default=3, ge=0)
    credibility_bonus: int = Field(default=2, ge=0)
    breadth_threshold: int = Field(
        default=3,
        ge=1,
        description="Minimum revenue streams / no-cash tactics for the income and automation bonuses",
    )


class EngineConfig(BaseModel):
    """Matching engine configuration."""
    top_n: int = Field(default=3, ge=1, description="Blueprints shown per shortlist")
    weights: RubricWeights = Field(default_factory=RubricWeights)


class CatalogConfig(BaseModel):
    """Where the blueprint catalog comes from."""
    path: Optional[Path] = Field(
        default_factory=lambda: _env_path("IDEA_LAB_CATALOG_PATH"),
        description="JSON catalog file; the built-in catalog is used when unset",
    )


class UIConfig(BaseModel):
    """UI configuration."""
    page_title: str = Field(default="Zero Capital Idea Lab")
    page_icon: str = Field(default="🌱")
    theme_primary_color: str = Field(default="#059669")  # emerald
    theme_accent_color: str = Field(default="#A7F3D0")


class Config(BaseModel):
    """Main configuration."""
    engine: EngineConfig = Field(default_factory=EngineConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("IDEA_LAB_LOG_LEVEL", "INFO").upper())
    log_json: bool = Field(default_factory=lambda: _env_flag("IDEA_LAB_LOG_JSON"))

    # Feature flags
    enable_debug_panel: bool = Field(default_factory=lambda: _env_flag("IDEA_LAB_DEBUG_PANEL", True))


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
