"""
Playbook panel - goal playbook, launch angles, refresh control, prompts.
"""
import streamlit as st

from ...models.catalog import Catalog
from ...models.enums import Goal


def render_goal_playbook(catalog: Catalog, goal: Goal):
    """Render the focus points for the selected goal."""
    playbook = catalog.goal_playbooks[goal]
    points = "".join(f"<li>{point}</li>" for point in playbook.focus_points)
    st.markdown(f"""
    <div class="playbook-box">
        <div class="headline">{playbook.headline}</div>
        <ul>{points}</ul>
    </div>
    """, unsafe_allow_html=True)


def render_action_panel(catalog: Catalog) -> bool:
    """
    Render the strategic angles and the refresh button.

    Returns:
        True when the user asked for a different angle on this run
    """
    st.markdown("### ⚡ Prime your launch in the next 7 days")
    st.markdown(
        "Focus on the highest leverage momentum moves to earn your first "
        "wins while confidence compounds."
    )
    for index, angle in enumerate(catalog.strategic_angles, 1):
        st.markdown(f"**{index}.** {angle}")

    return st.button("🔄 Refresh with different angle", key="refresh_angle")


def render_diagnostic_prompts(catalog: Catalog):
    """Render the self-discovery journaling prompts."""
    if not catalog.diagnostic_questions:
        return

    st.markdown("### 🧭 Diagnostic prompts")
    st.markdown(
        "Journal on one prompt daily to expose underused leverage. Use your "
        "answers inside outreach, landing pages, and content."
    )
    for question in catalog.diagnostic_questions:
        st.markdown(f"- {question}")
