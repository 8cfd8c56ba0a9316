"""
Web interface for the Policy Platform using Streamlit.

This module renders the policy document with a live search box, match
highlighting, a table of contents, shareable section links and export
downloads.
"""

import html

import streamlit as st
import pandas as pd
import plotly.express as px

# Logging
from loguru import logger

from policy_engine.export.exporter import ExportFormat, VISION_STATEMENT
from policy_engine.ingestion.document_loader import DocumentLoader
from policy_engine.query.query_engine import PolicyQueryEngine, SearchResult
from policy_engine.ui.render import render_item, section_link
from policy_engine.utils.config import get_config
from policy_engine.utils.exceptions import PolicyEngineError
from policy_engine.utils.logging import setup_logging


VISION_LINE = (
    "Vision: restore faith in government, empower people through democracy, "
    "defend individual freedoms, and build a just economy and sustainable future."
)

# Page configuration
st.set_page_config(
    page_title=get_config().ui.title,
    page_icon="📜",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2rem;
        font-weight: bold;
        letter-spacing: -0.02em;
    }

    mark.match {
        background-color: #fef08a;
        border-radius: 3px;
        padding: 0 2px;
    }

    .section-subtitle { color: #52525b; margin-top: -0.75rem; }
    .vision-line { color: #52525b; }
</style>
""", unsafe_allow_html=True)

DARK_CSS = """
<style>
    .stApp { background-color: #09090b; color: #f4f4f5; }
    mark.match { background-color: #ca8a04; color: #f4f4f5; }
    .section-subtitle, .vision-line { color: #a1a1aa; }
</style>
"""


class PolicyPlatformInterface:
    """Main interface class for the Policy Platform."""

    def __init__(self):
        """Initialize the interface components."""
        self.config = get_config()

        # Initialize session state
        if 'dark_mode' not in st.session_state:
            st.session_state.dark_mode = self.config.ui.dark_mode
        if 'query' not in st.session_state:
            st.session_state.query = ""
        if 'query_engine' not in st.session_state:
            st.session_state.query_engine = None
        if 'load_error' not in st.session_state:
            st.session_state.load_error = None

    def load_document(self):
        """Load the configured document once per session."""
        if st.session_state.query_engine is not None or st.session_state.load_error:
            return

        try:
            with st.spinner("Loading policy document..."):
                document = DocumentLoader(self.config.source).load()
            st.session_state.query_engine = PolicyQueryEngine(document, self.config.export)
        except PolicyEngineError as e:
            logger.error(f"Error loading document: {e}")
            st.session_state.load_error = str(e)

    def render_header(self):
        """Render the header with search box and theme toggle."""
        if st.session_state.dark_mode:
            st.markdown(DARK_CSS, unsafe_allow_html=True)

        col1, col2, col3 = st.columns([3, 3, 1])

        with col1:
            st.markdown(f'<div class="main-header">{html.escape(self.config.ui.title)}</div>',
                        unsafe_allow_html=True)

        with col2:
            st.text_input(
                "Search policies",
                key="query",
                placeholder="Search policies…",
                label_visibility="collapsed"
            )

        with col3:
            label = "Light" if st.session_state.dark_mode else "Dark"
            if st.button(label, help="Toggle dark mode"):
                st.session_state.dark_mode = not st.session_state.dark_mode
                st.rerun()

    def render_sidebar(self, engine: PolicyQueryEngine):
        """Render the table of contents."""
        with st.sidebar:
            st.caption("SECTIONS")
            for section in engine.document.sections:
                st.markdown(f"[{section.index}. {section.title}]({section.anchor})")

    def render_document(self, engine: PolicyQueryEngine):
        """Render the filtered document."""
        query = st.session_state.query
        result = engine.search(query)

        st.markdown(f'<p class="vision-line">{VISION_LINE}</p>', unsafe_allow_html=True)

        if result.is_empty:
            st.caption(f"No matches for “{query}”.")

        self.render_sections(result, query)

        st.divider()
        st.markdown('<h2 id="vision">Vision Statement</h2>', unsafe_allow_html=True)
        st.write(VISION_STATEMENT)

        self.render_export_buttons(engine)

    def render_sections(self, result: SearchResult, query: str):
        """Render each visible section with its highlighted items."""
        for section in result.sections:
            st.markdown(
                f'<h2 id="{html.escape(section.id)}">{section.index}. {html.escape(section.title)}</h2>',
                unsafe_allow_html=True
            )

            with st.expander("Link"):
                st.code(section_link(self.config.ui.base_url, section.id), language=None)

            if section.subtitle:
                st.markdown(f'<p class="section-subtitle">{html.escape(section.subtitle)}</p>',
                            unsafe_allow_html=True)

            if section.items:
                rows = "".join(f"<li>{render_item(item, query)}</li>" for item in section.items)
                st.markdown(f"<ul>{rows}</ul>", unsafe_allow_html=True)

    def render_export_buttons(self, engine: PolicyQueryEngine):
        """Render download buttons for the full document."""
        col1, col2 = st.columns(2)

        with col1:
            artifact = engine.export(ExportFormat.MARKDOWN)
            st.download_button("Export Markdown", data=artifact.content,
                               file_name=artifact.filename, mime=artifact.mime_type)

        with col2:
            artifact = engine.export(ExportFormat.HTML)
            st.download_button("Export HTML", data=artifact.content,
                               file_name=artifact.filename, mime=artifact.mime_type)

    def render_overview(self, engine: PolicyQueryEngine):
        """Render per-section match counts for the current query."""
        query = st.session_state.query
        if not query.strip():
            st.info("Enter a search to see where it matches.")
            return

        df = pd.DataFrame(engine.match_overview(query))

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Matching Sections", int(df["match"].notna().sum()))
        with col2:
            st.metric("Matching Items", int(df["matched_items"].sum()))

        fig = px.bar(df, x="section", y="matched_items",
                     title="Matched Items per Section",
                     labels={"section": "Section", "matched_items": "Matched items"})
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(df, use_container_width=True)


def main():
    """Main application function."""
    setup_logging()

    interface = PolicyPlatformInterface()
    interface.load_document()

    interface.render_header()

    if st.session_state.load_error:
        st.error(f"Failed to load: {st.session_state.load_error}")
        return

    engine = st.session_state.query_engine
    interface.render_sidebar(engine)

    tab1, tab2 = st.tabs(["Platform", "Match Overview"])

    with tab1:
        interface.render_document(engine)

    with tab2:
        interface.render_overview(engine)


if __name__ == "__main__":
    main()
