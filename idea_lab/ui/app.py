"""
Idea Lab - zero-capital business idea matcher.

Streamlit UI: the page owns the preferences and the refresh counter and
asks the engine for a fresh shortlist on every rerun.
"""
import json
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path for imports when running via streamlit
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from idea_lab.catalog import CatalogError, get_catalog
from idea_lab.config import get_config
from idea_lab.engine import build_shortlist
from idea_lab.log import configure_logging
from idea_lab.models.catalog import Catalog
from idea_lab.models.preferences import UserPreferences

from idea_lab.ui.styles import inject_custom_css
from idea_lab.ui.components.preference_form import render_preferences_form
from idea_lab.ui.components.playbook_panel import (
    render_action_panel,
    render_diagnostic_prompts,
    render_goal_playbook,
)
from idea_lab.ui.components.result_card import render_results_section
from idea_lab.ui.components.debug_panel import render_debug_panel


def init_session_state():
    """Initialize session state variables."""
    defaults = {
        "preferences": UserPreferences(),
        "rotation_offset": 0,
        "shortlist": None,
        "show_debug": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def main():
    """Main application entry point."""
    config = get_config()
    configure_logging(config.log_level, config.log_json)

    # Page config
    st.set_page_config(
        page_title=config.ui.page_title,
        page_icon=config.ui.page_icon,
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    inject_custom_css()
    init_session_state()

    render_header()

    try:
        catalog = get_catalog()
    except CatalogError as e:
        st.error(f"The idea catalog could not be loaded: {e}")
        return

    render_engine(catalog)

    # Debug panel (if enabled)
    if config.enable_debug_panel and st.session_state.show_debug:
        render_debug_panel(
            preferences=st.session_state.preferences,
            shortlist=st.session_state.shortlist,
        )


def render_header():
    """Render the app header."""
    col1, col2, col3 = st.columns([1, 3, 1])

    with col2:
        st.markdown("""
        <div class="app-header">
            <div class="kicker">Zero capital business lab</div>
            <h1>Design your zero-capital business advantage</h1>
            <p class="subtitle">Feed in your unfair advantages and get curated,
            zero-investment plays with launch steps and scaling angles.</p>
        </div>
        """, unsafe_allow_html=True)

    with col3:
        if get_config().enable_debug_panel:
            st.session_state.show_debug = st.checkbox(
                "🔧 Debug",
                value=st.session_state.show_debug,
                key="debug_toggle",
            )


def render_engine(catalog: Catalog):
    """Render the form, the action panel, and the shortlist."""
    form_col, action_col = st.columns([2, 1.2])

    with form_col:
        st.markdown("### 🌱 Opportunity intelligence")
        preferences = render_preferences_form(catalog)
        st.session_state.preferences = preferences
        render_goal_playbook(catalog, preferences.goal)

    with action_col:
        if render_action_panel(catalog):
            st.session_state.rotation_offset += 1
        render_diagnostic_prompts(catalog)

    shortlist = build_shortlist(
        catalog,
        st.session_state.preferences,
        rotation_offset=st.session_state.rotation_offset,
    )
    st.session_state.shortlist = shortlist

    st.markdown("---")
    st.markdown(f"### 🏆 Your top {len(shortlist.matches)} no-capital plays")
    render_results_section(shortlist.matches, catalog)

    if shortlist.matches:
        export_data = shortlist.to_minimal_export()
        st.download_button(
            "📥 Export shortlist JSON",
            data=json.dumps(export_data, indent=2, ensure_ascii=False),
            file_name=f"idea_shortlist_{datetime.now().strftime('%Y%m%d_%H%M')}.json",
            mime="application/json",
        )


if __name__ == "__main__":
    main()
