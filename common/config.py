# common/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

import streamlit as st

from common.constants import API_KEY, BASE_URL

_TRUE = {"1", "true", "yes", "on", "si", "sí"}


@dataclass(frozen=True)
class Settings:
    base_url: str = BASE_URL
    api_key: str = API_KEY
    timeout: Tuple[float, float] = (10.0, 20.0)
    use_live_table_data: bool = False
    match_list_limit: int = 10
    log_level: str = "INFO"

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_key}"


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in _TRUE


def _as_timeout(val: Any) -> Tuple[float, float]:
    if isinstance(val, (list, tuple)) and len(val) == 2:
        return float(val[0]), float(val[1])
    parts = [p for p in str(val).split(",") if p.strip()]
    if len(parts) == 1:
        t = float(parts[0])
        return t, t
    return float(parts[0]), float(parts[1])


def _secrets() -> Dict[str, Any]:
    try:
        if "sportsdb" in st.secrets:
            return dict(st.secrets["sportsdb"])
    except Exception:
        # no secrets.toml outside a deployed app
        pass
    return {}


def load_settings(env: Optional[Mapping[str, str]] = None,
                  secrets: Optional[Mapping[str, Any]] = None) -> Settings:
    """
    Build the settings from the environment, overridden by the `[sportsdb]`
    table in Streamlit secrets when one exists. Keys in secrets use the
    lower-case form of the environment names (e.g. `use_live_table_data`).
    """
    env = os.environ if env is None else env
    sec = _secrets() if secrets is None else dict(secrets)

    def pick(name: str, default: Any) -> Any:
        if name.lower() in sec:
            return sec[name.lower()]
        return env.get(name, default)

    defaults = Settings()
    return Settings(
        base_url=str(pick("SPORTSDB_BASE_URL", defaults.base_url)),
        api_key=str(pick("SPORTSDB_API_KEY", defaults.api_key)),
        timeout=_as_timeout(pick("SPORTSDB_TIMEOUT", defaults.timeout)),
        use_live_table_data=_as_bool(pick("USE_LIVE_TABLE_DATA", defaults.use_live_table_data)),
        match_list_limit=int(pick("MATCH_LIST_LIMIT", defaults.match_list_limit)),
        log_level=str(pick("LOG_LEVEL", defaults.log_level)).upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process; `.env` must already be loaded."""
    return load_settings()
