"""Environment-backed settings for the Skycast service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_HISTORY_PATH = "data/searchHistory.json"
DEFAULT_LOG_DIR = "logs"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    ``base_url`` and ``api_key`` default to empty strings; credentials are not
    checked before requests are issued.
    """

    base_url: str = ""
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT
    history_path: str = DEFAULT_HISTORY_PATH
    log_dir: str = DEFAULT_LOG_DIR
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``env``, or from ``os.environ`` after loading ``.env``.

        Args:
            env: Optional mapping used instead of the process environment.
        """
        if env is None:
            load_dotenv()
            env = os.environ
        return cls(
            base_url=env.get("API_BASE_URL", ""),
            api_key=env.get("API_KEY", ""),
            timeout=float(env.get("API_TIMEOUT", DEFAULT_TIMEOUT)),
            history_path=env.get("HISTORY_PATH", DEFAULT_HISTORY_PATH),
            log_dir=env.get("SKYCAST_LOG_DIR", DEFAULT_LOG_DIR),
            host=env.get("HOST", DEFAULT_HOST),
            port=int(env.get("PORT", DEFAULT_PORT)),
        )
