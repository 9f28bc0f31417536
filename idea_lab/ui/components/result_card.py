"""
Result card component - displays the shortlisted blueprints.
"""
from html import escape

import streamlit as st

from ...models.catalog import Catalog
from ...models.scoring import MatchResult


def render_results_section(matches: list[MatchResult], catalog: Catalog):
    """
    Render the shortlist as side-by-side cards.

    Args:
        matches: Ranked window returned by the engine
        catalog: For badge labels
    """
    if not matches:
        st.info("The catalog is empty, so there is nothing to recommend yet.")
        return

    columns = st.columns(len(matches))
    for column, match in zip(columns, matches):
        with column:
            render_result_card(match, catalog)


def _chips(items, css_class: str = "chip") -> str:
    return "".join(f'<span class="{css_class}">{escape(item)}</span>' for item in items)


def render_result_card(match: MatchResult, catalog: Catalog):
    """Render a single idea card."""
    blueprint = match.blueprint

    badges = _chips(
        [
            catalog.growth_label(blueprint.primary_growth_style),
            f"Time: {catalog.time_label(blueprint.time_commitment)}",
            "Zero capital launch",
        ],
        css_class="momentum-badge",
    )

    card_html = f"""
    <div class="idea-card">
        <span class="score-badge">{match.score} pts</span>
        <div>{badges}</div>
        <div class="title">{escape(blueprint.title)}</div>
        <div class="headline">{escape(blueprint.headline)}</div>
        <div class="description">{escape(blueprint.description)}</div>
        <div class="section-label">Leverage points</div>
        <div>{_chips(match.highlight_items)}</div>
    </div>
    """
    st.markdown(card_html, unsafe_allow_html=True)

    with st.expander("📋 Why this wins & first moves", expanded=False):
        render_card_details(match)


def render_card_details(match: MatchResult):
    """Render the expanded playbook for a card."""
    blueprint = match.blueprint

    st.markdown("**Why this wins**")
    for prop in blueprint.value_props:
        st.markdown(f"- {prop}")

    st.markdown("**Why it matched**")
    for group in match.highlights:
        st.markdown(f"- *{group.label}:* {', '.join(group.items)}")

    st.markdown("**First revenue moves**")
    for step in blueprint.launch_steps[:3]:
        st.markdown(f"- {step}")

    st.markdown("**No-cash tactics**")
    st.markdown(_chips(blueprint.no_cash_tactics), unsafe_allow_html=True)

    st.markdown("**Revenue experiments**")
    for stream in blueprint.revenue_streams:
        st.markdown(f"- {stream}")

    st.markdown("**Scale pathways**")
    for angle in blueprint.scale_angles:
        st.markdown(f"- {angle}")
