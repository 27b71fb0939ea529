"""Process-wide Skycast collaborators for the Streamlit app."""

from __future__ import annotations

import streamlit as st

from skycast import HistoryStore, Settings, WeatherService
from skycast.api_logging import configure_logging, set_log_dir


@st.cache_resource
def get_settings() -> Settings:
    settings = Settings.from_env()
    configure_logging()
    set_log_dir(settings.log_dir)
    return settings


@st.cache_resource
def get_weather_service() -> WeatherService:
    return WeatherService.from_settings(get_settings())


@st.cache_resource
def get_history_store() -> HistoryStore:
    return HistoryStore(get_settings().history_path)
