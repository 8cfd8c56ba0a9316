"""Rendering helpers and the Streamlit web interface."""

from .render import render_segments, render_item, emphasize, section_link

__all__ = ["render_segments", "render_item", "emphasize", "section_link"]
