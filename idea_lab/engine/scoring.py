"""
Scoring engine - deterministic rubric with transparent highlights.
"""
import logging
from collections.abc import Iterable
from typing import Optional

from ..config import RubricWeights, get_config
from ..models.blueprint import Blueprint
from ..models.catalog import Catalog
from ..models.enums import ANY, Goal
from ..models.preferences import UserPreferences
from ..models.scoring import HighlightGroup, MatchResult
from .tokenizer import token_set


logger = logging.getLogger(__name__)

# Highlight labels, in the order rules are applied
DIRECT_FIT = "Direct fit strengths"
TRANSFERABLE = "Transferable skills"
ENERGIZING = "Energizing topics"
WARM_AUDIENCE = "Warm audience access"
TIME_FIT = "Time fit"
GROWTH_PREFERENCE = "Growth preference"
LEVERAGE_POINTS = "Leverage points"


def _matching(labels: Iterable[str], tokens: set[str]) -> list[str]:
    """Labels whose lower-cased form is a token, in their original order and casing."""
    return [label for label in labels if label.lower() in tokens]


class ScoringEngine:
    """
    Scores blueprints against user preferences.
    Integer points, higher is better, zero means nothing matched.
    """

    def __init__(self, catalog: Catalog, weights: Optional[RubricWeights] = None):
        self.catalog = catalog
        self.weights = weights or get_config().engine.weights

    def score(self, blueprint: Blueprint, preferences: UserPreferences) -> MatchResult:
        """
        Score one blueprint. Uses no state shared between blueprints.

        Args:
            blueprint: The catalog entry to score
            preferences: Complete user preferences

        Returns:
            MatchResult with score and highlight groups in rule order
        """
        w = self.weights
        skill_tokens = token_set(preferences.skills)
        interest_tokens = token_set(preferences.interests)
        audience_tokens = token_set(preferences.audience)

        score = 0
        highlights: list[HighlightGroup] = []

        for labels, tokens, points, label in (
            (blueprint.required_skills, skill_tokens, w.direct_skill, DIRECT_FIT),
            (blueprint.supportive_skills, skill_tokens, w.transferable_skill, TRANSFERABLE),
            (blueprint.suitable_interests, interest_tokens, w.interest, ENERGIZING),
            (blueprint.target_audiences, audience_tokens, w.audience, WARM_AUDIENCE),
        ):
            matched = _matching(labels, tokens)
            if matched:
                score += len(matched) * points
                highlights.append(HighlightGroup(label=label, items=tuple(matched)))

        if preferences.time_commitment != ANY and preferences.time_commitment == blueprint.time_commitment:
            score += w.time_fit
            highlights.append(HighlightGroup(
                label=TIME_FIT,
                items=(self.catalog.time_label(blueprint.time_commitment),),
            ))

        if preferences.growth_style != ANY and preferences.growth_style in blueprint.growth_styles:
            score += w.growth_fit
            highlights.append(HighlightGroup(
                label=GROWTH_PREFERENCE,
                items=(self.catalog.growth_label(preferences.growth_style),),
            ))

        score += self._goal_bonus(blueprint, preferences.goal)

        if not highlights:
            highlights.append(HighlightGroup(label=LEVERAGE_POINTS, items=(blueprint.differentiation,)))

        return MatchResult(blueprint=blueprint, score=score, highlights=tuple(highlights))

    def _goal_bonus(self, blueprint: Blueprint, goal: Goal) -> int:
        """Bonus for the user's goal. Adds points but no highlight."""
        w = self.weights
        if goal == Goal.INCOME:
            return w.income_bonus if len(blueprint.revenue_streams) >= w.breadth_threshold else 0
        if goal == Goal.AUTOMATION:
            return w.automation_bonus if len(blueprint.no_cash_tactics) >= w.breadth_threshold else 0
        if goal == Goal.CREDIBILITY:
            return w.credibility_bonus if blueprint.validation_signals else 0
        # Goal.AUDIENCE has no bonus
        return 0

    def score_all(self, preferences: UserPreferences) -> list[MatchResult]:
        """Score every catalog blueprint, in catalog order."""
        return [self.score(blueprint, preferences) for blueprint in self.catalog.blueprints]


def score(
    blueprint: Blueprint,
    preferences: UserPreferences,
    catalog: Catalog,
    weights: Optional[RubricWeights] = None,
) -> MatchResult:
    """Score a single blueprint; see ScoringEngine.score."""
    return ScoringEngine(catalog, weights).score(blueprint, preferences)
