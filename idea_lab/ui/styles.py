"""
Custom CSS styles for Idea Lab.
Light emerald theme.
"""
import streamlit as st


# Color palette
COLORS = {
    "primary": "#059669",      # emerald
    "primary_hover": "#047857",
    "accent": "#A7F3D0",
    "accent_soft": "#ECFDF5",
    "background": "#FFFFFF",
    "surface": "#FFFFFF",
    "surface_hover": "#F0FDF4",
    "text": "#18181B",
    "text_muted": "#52525B",
    "border": "#E4E4E7",
}


def inject_custom_css():
    """Inject custom CSS into the Streamlit app."""
    st.markdown(f"""
    <style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap');

    :root {{
        --primary: {COLORS['primary']};
        --primary-hover: {COLORS['primary_hover']};
        --accent: {COLORS['accent']};
        --accent-soft: {COLORS['accent_soft']};
        --bg: {COLORS['background']};
        --surface: {COLORS['surface']};
        --surface-hover: {COLORS['surface_hover']};
        --text: {COLORS['text']};
        --text-muted: {COLORS['text_muted']};
        --border: {COLORS['border']};
    }}

    .stApp {{
        font-family: 'Inter', -apple-system, sans-serif;
        background: radial-gradient(circle at top, #e6fff5 0, #f2f2ff 40%, var(--bg) 85%);
    }}

    /* Header */
    .app-header {{
        text-align: center;
        padding: 2rem 0 1rem;
    }}

    .app-header .kicker {{
        font-size: 0.75rem;
        letter-spacing: 0.35em;
        text-transform: uppercase;
        color: var(--primary);
        font-weight: 600;
    }}

    .app-header h1 {{
        font-size: 2.5rem;
        font-weight: 700;
        color: var(--text);
        margin: 0.5rem 0;
    }}

    .app-header .subtitle {{
        color: var(--text-muted);
        font-size: 1.1rem;
    }}

    /* Idea cards */
    .idea-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 24px;
        padding: 1.5rem;
        margin-bottom: 1rem;
        transition: all 0.2s ease;
    }}

    .idea-card:hover {{
        border-color: var(--accent);
        box-shadow: 0 30px 70px -40px rgba(16, 58, 46, 0.6);
    }}

    .idea-card .title {{
        font-size: 1.4rem;
        font-weight: 600;
        color: var(--text);
        margin-top: 0.75rem;
    }}

    .idea-card .headline {{
        font-size: 0.9rem;
        font-weight: 500;
        color: var(--primary);
        margin-top: 0.25rem;
    }}

    .idea-card .description {{
        color: var(--text-muted);
        font-size: 0.85rem;
        margin-top: 0.75rem;
        line-height: 1.4;
    }}

    .score-badge {{
        float: right;
        padding: 0.25rem 0.75rem;
        border-radius: 20px;
        font-weight: 600;
        font-size: 0.8rem;
        background: var(--primary);
        color: white;
    }}

    /* Badges and chips */
    .momentum-badge {{
        display: inline-block;
        border: 1px solid rgba(52, 211, 153, 0.5);
        background: rgba(209, 250, 229, 0.7);
        color: var(--primary-hover);
        border-radius: 999px;
        padding: 0.2rem 0.75rem;
        font-size: 0.75rem;
        font-weight: 500;
        margin-right: 0.4rem;
    }}

    .chip {{
        display: inline-block;
        background: var(--accent-soft);
        color: var(--primary-hover);
        border-radius: 999px;
        padding: 0.2rem 0.75rem;
        font-size: 0.75rem;
        margin: 0 0.3rem 0.3rem 0;
    }}

    .section-label {{
        font-size: 0.7rem;
        font-weight: 600;
        letter-spacing: 0.3em;
        text-transform: uppercase;
        color: var(--text-muted);
        margin-top: 1rem;
    }}

    /* Playbook panel */
    .playbook-box {{
        background: var(--accent-soft);
        border: 1px solid var(--accent);
        border-radius: 16px;
        padding: 1rem 1.25rem;
    }}

    .playbook-box .headline {{
        font-size: 0.75rem;
        font-weight: 600;
        letter-spacing: 0.3em;
        text-transform: uppercase;
        color: var(--primary);
    }}
    </style>
    """, unsafe_allow_html=True)
