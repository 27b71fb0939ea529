"""Weather Dashboard: Streamlit + Plotly + OpenWeather API."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from skycast.exceptions import HistoryStoreError, SkycastError

from shared import (
    ACCENT_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    format_humidity,
    format_temperature,
    format_wind,
    icon_url,
    temperature_series,
)
from shared.resources import get_history_store, get_weather_service

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Dashboard",
    page_icon="⛅",
    layout="wide",
)

service = get_weather_service()
history = get_history_store()


def _search(city: str) -> None:
    """Look up ``city`` and record it in history only if the lookup succeeds."""
    try:
        records = service.get_weather_for_city(city)
        history.add_city(city.strip())
    except SkycastError as exc:
        st.session_state.pop("records", None)
        st.error(f"Failed to fetch weather data: {exc}")
        return
    st.session_state["records"] = records


# ── Sidebar: search + history ─────────────────────────────────────────────────

st.sidebar.title("Search for a City")

with st.sidebar.form("search"):
    city_input = st.text_input("City", placeholder="Boston")
    submitted = st.form_submit_button("Search")

if submitted:
    if not city_input.strip():
        st.sidebar.warning("City name is required.")
    else:
        with st.spinner("Loading weather..."):
            _search(city_input)

st.sidebar.subheader("Search History")
try:
    entries = history.list_cities()
except HistoryStoreError as exc:
    st.sidebar.error(f"Failed to fetch search history: {exc}")
    entries = []

for entry in reversed(entries):
    name_col, delete_col = st.sidebar.columns([4, 1])
    if name_col.button(entry.name, key=f"city-{entry.id}", use_container_width=True):
        with st.spinner("Loading weather..."):
            _search(entry.name)
    if delete_col.button("\U0001f5d1", key=f"delete-{entry.id}"):
        history.remove_city(entry.id)
        st.rerun()


# ── Current conditions ───────────────────────────────────────────────────────

records = st.session_state.get("records")
if not records:
    st.info("Search for a city to see its forecast.")
    st.stop()

current = records[0]
header_cols = st.columns([1, 6])
header_cols[0].image(icon_url(current.icon), width=80)
header_cols[1].header(f"{current.city} ({current.date})")
header_cols[1].caption(current.icon_description)

metric_cols = st.columns(3)
metric_cols[0].metric("Temperature", format_temperature(current.temp_f))
metric_cols[1].metric("Wind", format_wind(current.wind_speed))
metric_cols[2].metric("Humidity", format_humidity(current.humidity))


# ── Forecast ─────────────────────────────────────────────────────────────────

forecast = records[1:]
st.subheader("Forecast")
if not forecast:
    st.warning("No midday forecast slots in the provider's series.")
    st.stop()

card_cols = st.columns(len(forecast))
for col, day in zip(card_cols, forecast):
    with col:
        st.markdown(f"**{day.date}**")
        st.image(icon_url(day.icon), width=50)
        st.caption(day.icon_description)
        st.write(f"Temp: {format_temperature(day.temp_f)}")
        st.write(f"Wind: {format_wind(day.wind_speed)}")
        st.write(f"Humidity: {format_humidity(day.humidity)}")

dates, temps = temperature_series(records)
fig = go.Figure(
    go.Scatter(
        x=dates,
        y=temps,
        mode="lines+markers",
        line=dict(color=ACCENT_COLOR),
        name="Temp (°F)",
    )
)
fig.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    title="Midday temperature",
    yaxis_title="°F",
    height=320,
)
st.plotly_chart(fig, use_container_width=True)
