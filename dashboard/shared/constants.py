"""Shared constants for the weather dashboard."""

from __future__ import annotations

ACCENT_COLOR = "#F4A261"

ICON_URL_TEMPLATE = "https://openweathermap.org/img/w/{icon}.png"

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
