"""
Preference form component - free-text strengths plus categorical choices.
"""
import streamlit as st

from ...models.catalog import Catalog
from ...models.enums import ANY, Goal, GrowthStyle, TimeCommitment
from ...models.preferences import UserPreferences


ANY_TIME_LABEL = "I can flex my schedule"
ANY_GROWTH_LABEL = "Surprise me with leverage"


def render_preferences_form(catalog: Catalog) -> UserPreferences:
    """
    Render the preference inputs.

    Args:
        catalog: Supplies the option labels and goal presets

    Returns:
        A new UserPreferences built from the current widget values
    """
    col1, col2 = st.columns(2)

    with col1:
        skills = st.text_area(
            "Strengths or skills you lean on",
            placeholder="research, operations, storytelling...",
            key="pref_skills",
            height=90,
        )
        audience = st.text_area(
            "Communities or audiences you can reach easily",
            placeholder="indie hackers, local food makers...",
            key="pref_audience",
            height=90,
        )
        growth_style = st.selectbox(
            "Preferred momentum style",
            options=[ANY, *GrowthStyle],
            format_func=lambda v: ANY_GROWTH_LABEL if v == ANY else catalog.growth_label(v),
            key="pref_growth_style",
        )

    with col2:
        interests = st.text_area(
            "Topics that energize you",
            placeholder="creator economy, community building...",
            key="pref_interests",
            height=90,
        )
        time_commitment = st.selectbox(
            "Time you can commit weekly",
            options=[ANY, *TimeCommitment],
            format_func=lambda v: ANY_TIME_LABEL if v == ANY else catalog.time_label(v),
            key="pref_time_commitment",
        )

    goal = render_goal_picker(catalog)

    return UserPreferences(
        skills=skills,
        interests=interests,
        audience=audience,
        time_commitment=time_commitment,
        growth_style=growth_style,
        goal=goal,
    )


def render_goal_picker(catalog: Catalog) -> Goal:
    """Render the priority picker; one tile per goal preset."""
    st.markdown("#### 🎯 Pick your priority")
    goal = st.radio(
        "Priority",
        options=list(Goal),
        format_func=lambda g: catalog.goal_presets[g].label,
        horizontal=True,
        key="pref_goal",
        label_visibility="collapsed",
    )
    preset = catalog.goal_presets[goal]
    st.caption(f"{preset.description}  \n{preset.example}")
    return goal
