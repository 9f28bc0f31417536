"""
Debug panel component - transparency view for developers.
"""
import json
from typing import Optional

import streamlit as st

from ...models.export import Shortlist
from ...models.preferences import UserPreferences


def render_debug_panel(
    preferences: Optional[UserPreferences] = None,
    shortlist: Optional[Shortlist] = None,
):
    """
    Render the debug/transparency panel.
    Shows the engine inputs and the last run for debugging.
    """
    st.markdown("---")
    st.markdown("### 🔧 Debug Panel")

    tabs = st.tabs(["Preferences", "Run Metadata", "Raw Export"])

    with tabs[0]:
        render_preferences_debug(preferences)

    with tabs[1]:
        render_metadata_debug(shortlist)

    with tabs[2]:
        render_raw_export(shortlist)


def render_preferences_debug(preferences: Optional[UserPreferences]):
    """Render preferences debugging info."""
    if preferences is None:
        st.info("No preferences set")
        return

    st.markdown(f"**Skills:** {preferences.skills or '-'}")
    st.markdown(f"**Interests:** {preferences.interests or '-'}")
    st.markdown(f"**Audience:** {preferences.audience or '-'}")
    st.markdown(f"**Time commitment:** `{getattr(preferences.time_commitment, 'value', preferences.time_commitment)}`")
    st.markdown(f"**Growth style:** `{getattr(preferences.growth_style, 'value', preferences.growth_style)}`")
    st.markdown(f"**Goal:** `{preferences.goal.value}`")


def render_metadata_debug(shortlist: Optional[Shortlist]):
    """Render run metadata debugging info."""
    if shortlist is None:
        st.info("No results available")
        return

    meta = shortlist.metadata

    col1, col2 = st.columns(2)

    with col1:
        st.markdown(f"**Run ID:** `{meta.run_id}`")
        st.markdown(f"**Generated:** {meta.generated_at}")

    with col2:
        st.markdown(f"**Catalog size:** {meta.catalog_size}")
        st.markdown(f"**Rotation offset:** {meta.rotation_offset}")

    for match in shortlist.matches:
        st.markdown(f"- `{match.blueprint.id}`: {match.score} pts")


def render_raw_export(shortlist: Optional[Shortlist]):
    """Render raw JSON export."""
    if shortlist is None:
        st.info("No results to export")
        return

    export_data = shortlist.to_minimal_export()
    st.code(json.dumps(export_data, indent=2, ensure_ascii=False, default=str), language="json")

    st.download_button(
        "📥 Download Full JSON",
        data=shortlist.model_dump_json(indent=2),
        file_name="debug_export.json",
        mime="application/json",
    )
