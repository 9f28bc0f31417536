"""UI components package."""

from .preference_form import render_preferences_form
from .playbook_panel import render_action_panel, render_diagnostic_prompts, render_goal_playbook
from .result_card import render_results_section
from .debug_panel import render_debug_panel

__all__ = [
    "render_preferences_form",
    "render_goal_playbook",
    "render_action_panel",
    "render_diagnostic_prompts",
    "render_results_section",
    "render_debug_panel",
]
