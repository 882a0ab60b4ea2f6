"""
Common utility functions for data fetching and lightweight helpers used by
multiple sections.

This module contains the network helper (a small requests.Session wrapper
around TheSportsDB endpoints), a normalizer that turns the JSON arrays
returned by the API into `pandas.DataFrame` objects with a fixed column set,
and display helpers such as `format_date` that always return something
printable ("N/A" or the raw value) instead of failing.

The rest of the app uses pandas for the collections (teams, players,
matches, lineups...), so the fetch helpers return DataFrames where the
response is a list.
"""

# Import libraries
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional
import pandas as pd
import requests
from common.config import Settings, get_settings
from common.constants import NA, PLACEHOLDER_IMG, USER_AGENT
from common.errors import MissingFieldError, NotFoundError, SportsDataError

logger = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})

def sportsdb_get(endpoint: str, params: Optional[Dict[str, Any]] = None,
                 error_message: str = "Error desconocido",
                 settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    GET `{base}/{key}/{endpoint}` and return the decoded JSON body.

    Any transport error, non-2xx status or undecodable body is raised as a
    `SportsDataError` whose message is `error_message`.
    """
    cfg = settings or get_settings()
    url = f"{cfg.api_root}/{endpoint.lstrip('/')}"
    try:
        resp = SESSION.get(url, params=params or {}, timeout=cfg.timeout)
        resp.raise_for_status()
        body = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("GET %s %s failed: %s", endpoint, params, exc)
        raise SportsDataError(error_message) from exc
    if not isinstance(body, dict):
        logger.error("GET %s %s returned a non-object body", endpoint, params)
        raise SportsDataError(error_message)
    return body

def get_list(endpoint: str, field: str, params: Optional[Dict[str, Any]] = None,
             error_message: str = "Error desconocido") -> List[Dict[str, Any]]:
    """
    Fetch `endpoint` and return the array under `field`.

    A missing field raises `MissingFieldError`; a field set to null (how the
    API says "nothing found") becomes an empty list.
    """
    body = sportsdb_get(endpoint, params=params, error_message=error_message)
    if field not in body:
        logger.error("GET %s: field %r missing from response", endpoint, field)
        raise MissingFieldError(error_message)
    items = body.get(field) or []
    if not isinstance(items, list):
        items = [items]
    return [it for it in items if isinstance(it, dict)]

def get_one(endpoint: str, field: str, params: Optional[Dict[str, Any]] = None,
            error_message: str = "Error desconocido",
            not_found_message: str = "No se encontraron datos") -> Dict[str, Any]:
    """Fetch a single-record lookup (a one-element array) or raise `NotFoundError`."""
    items = get_list(endpoint, field, params=params, error_message=error_message)
    if not items:
        raise NotFoundError(not_found_message)
    return items[0]

def records_frame(records: Iterable[Mapping[str, Any]], columns: List[str]) -> pd.DataFrame:
    # Keep only the columns the UI needs; absent/null values become "".
    rows = [{c: _clean(r.get(c)) for c in columns} for r in records]
    return pd.DataFrame(rows, columns=columns)

def _clean(val: Any) -> str:
    if val is None:
        return ""
    try:
        if pd.isna(val):
            return ""
    except (TypeError, ValueError):
        pass
    return str(val).strip()

def or_na(val: Any, fallback: str = NA) -> str:
    s = _clean(val)
    return s if s else fallback

def first_of(*vals: Any, default: str = "") -> str:
    """Return the first non-empty value, e.g. badge → alternate badge → placeholder."""
    for v in vals:
        s = _clean(v)
        if s:
            return s
    return default

def placeholder(w: int, h: int) -> str:
    return PLACEHOLDER_IMG.format(w=w, h=h)

def format_date(date_string: Any) -> str:
    # "2024-05-12" -> "12/05/2024"; unparseable strings come back unchanged.
    s = _clean(date_string)
    if not s:
        return NA
    ts = pd.to_datetime(s, errors="coerce")
    if pd.isnull(ts):
        return s
    return ts.strftime("%d/%m/%Y")

def format_time(time_string: Any) -> str:
    s = _clean(time_string)
    return s[:5] if s else NA

def format_social_link(url: Any) -> str:
    s = _clean(url)
    if not s:
        return ""
    return s if s.startswith("http") else f"https://{s}"

def youtube_embed(video_url: Any) -> str:
    """Normalize a highlights link so `st.video` can play it."""
    s = _clean(video_url)
    if "v=" in s:
        vid = s.split("v=", 1)[1].split("&", 1)[0]
        return f"https://www.youtube.com/watch?v={vid}"
    return s

def filter_by_name(df: pd.DataFrame, term: str, column: str) -> pd.DataFrame:
    """Case-insensitive substring filter; an empty term keeps every row."""
    term = (term or "").strip()
    if not term or df.empty:
        return df
    mask = df[column].astype(str).str.contains(term, case=False, regex=False)
    return df[mask]

def filter_by_value(df: pd.DataFrame, value: Optional[str], column: str) -> pd.DataFrame:
    """Exact-match filter; `None` means no filter."""
    if value is None or df.empty:
        return df
    return df[df[column] == value]

def unique_values(df: pd.DataFrame, column: str) -> List[str]:
    # First-seen order, empties skipped.
    if df.empty:
        return []
    return [v for v in pd.unique(df[column].astype(str)) if v]
