"""
League standings.

By default the table section serves the fixed example standings shipped in
`assets/example_tables.json` and never calls the API. With
`USE_LIVE_TABLE_DATA` enabled it asks the season-table endpoint for the
most recent season that has data and falls back to the example standings
when none does. Either way the section always has a table to show.

Rank is the row position (index + 1); the order delivered by the source is
kept as-is.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import streamlit as st

from common.constants import TABLE_SEASONS, League
from common.errors import SportsDataError
from common.metrics import to_int
from common.utils import get_list

logger = logging.getLogger(__name__)

# <project_root>/assets/example_tables.json
EXAMPLE_PATH = Path(__file__).resolve().parents[1] / "assets" / "example_tables.json"

TABLE_COLUMNS = ["Pos", "Equipo", "PJ", "G", "E", "P", "GF", "GC", "DG", "Pts", "teamid"]

# Example rows use short keys; the live endpoint uses int*/str* keys.
_KEYS = {
    "Equipo": ("name", "strTeam"),
    "teamid": ("teamid", "idTeam"),
    "PJ": ("played", "intPlayed"),
    "G": ("win", "intWin"),
    "E": ("draw", "intDraw"),
    "P": ("loss", "intLoss"),
    "GF": ("goalsfor", "intGoalsFor"),
    "GC": ("goalsagainst", "intGoalsAgainst"),
    "DG": ("goalsdifference", "intGoalDifference"),
    "Pts": ("total", "intPoints"),
}


@st.cache_data(show_spinner=False)
def load_example_tables(path: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
    p = Path(path) if path else EXAMPLE_PATH
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def _pick(row: Mapping[str, Any], keys: tuple) -> Any:
    for k in keys:
        if row.get(k) not in (None, ""):
            return row[k]
    return None


def table_frame(records: List[Mapping[str, Any]]) -> pd.DataFrame:
    rows = []
    for idx, r in enumerate(records):
        row: Dict[str, Any] = {"Pos": idx + 1}
        for col, keys in _KEYS.items():
            val = _pick(r, keys)
            if col in ("Equipo", "teamid"):
                row[col] = "" if val is None else str(val)
            else:
                row[col] = to_int(val)
        rows.append(row)
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def example_table(league: League) -> pd.DataFrame:
    return table_frame(load_example_tables().get(league.key, []))


def live_table(league: League, seasons: List[str] = TABLE_SEASONS) -> Optional[pd.DataFrame]:
    """First season with a non-empty table, or None."""
    for season in seasons:
        try:
            records = get_list("lookuptable.php", "table",
                               params={"l": league.id, "s": season},
                               error_message=f"Error al cargar la clasificación de {league.label}")
        except SportsDataError as exc:
            logger.warning("Table %s season %s unavailable: %s", league.key, season, exc)
            continue
        if records:
            logger.info("Using live table %s season %s", league.key, season)
            return table_frame(records)
    return None


def load_table(league: League, use_live: bool = False) -> pd.DataFrame:
    if use_live:
        df = live_table(league)
        if df is not None:
            return df
        logger.info("Using example data for %s", league.key)
    return example_table(league)
