"""
Parsing helpers for the delimited match fields and the small amount of
arithmetic the match views need.

This module provides:
    - `parse_goals` / `parse_cards`, which turn the `;`-delimited strings
        the API stores on finished events (e.g. "12:Messi;45:Ronaldo") into
        lists the UI can iterate over,
    - `to_int`, a lenient integer parser for counters delivered as strings,
    - `stat_share` and `paired_stats`, used by the statistics tab to draw
        percentage bars and the comparison chart,
    - `split_lineup`, which groups lineup rows by side and role.

Function notes:
    - All parsers accept `None`/NaN/empty input and return an empty result.
      The API is inconsistent about which fields it fills in.
"""

#Import libraries
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple
import re
import pandas as pd

from common.constants import DEFAULT_TIMELINE_ICON, TIMELINE_ICONS

# Counters shown in the statistics tab: (label, home field, away field)
STAT_ROWS = [
    ("Tiros a puerta",     "intHomeShotsOnGoal", "intAwayShotsOnGoal"),
    ("Tiros totales",      "intHomeShots",       "intAwayShots"),
    ("Córners",            "intHomeCorners",     "intAwayCorners"),
    ("Faltas",             "intHomeFouls",       "intAwayFouls"),
    ("Tarjetas amarillas", "intHomeYellowCards", "intAwayYellowCards"),
    ("Tarjetas rojas",     "intHomeRedCards",    "intAwayRedCards"),
]

# Only these get a percentage bar
BAR_STATS = {"Tiros a puerta", "Tiros totales", "Córners", "Faltas"}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Goal:
    time: str
    scorer: str


def _text(val: Any) -> str:
    if val is None:
        return ""
    try:
        if pd.isna(val):
            return ""
    except (TypeError, ValueError):
        pass
    return str(val)


def parse_goals(goal_details: Any) -> List[Goal]:
    """'12:Messi;45:Ronaldo' -> [Goal('12', 'Messi'), Goal('45', 'Ronaldo')]."""
    out: List[Goal] = []
    for chunk in _text(goal_details).split(";"):
        if not chunk.strip():
            continue
        parts = chunk.split(":")
        time = parts[0].strip()
        scorer = parts[1].strip() if len(parts) > 1 else ""
        out.append(Goal(time=time, scorer=scorer))
    return out


def parse_cards(card_details: Any) -> List[str]:
    return [c.strip() for c in _text(card_details).split(";") if c.strip()]


def to_int(val: Any, default: int = 0) -> int:
    """Leading-integer parse: '12' -> 12, '7 (2)' -> 7, '' -> default."""
    m = _LEADING_INT.match(_text(val))
    return int(m.group(1)) if m else default


def stat_share(home: Any, away: Any) -> float:
    """Home share of a paired counter in percent (0-100); negative counters count as zero."""
    h, a = max(to_int(home), 0), max(to_int(away), 0)
    total = h + a
    if total <= 0:
        return 0.0
    return h / total * 100.0


def paired_stats(stats: Mapping[str, Any]) -> pd.DataFrame:
    """
    Flatten an event-stats record into one row per counter with the raw
    display values ("0" when missing), the parsed integers and the home share.
    """
    rows = []
    for label, hkey, akey in STAT_ROWS:
        h_raw = _text(stats.get(hkey)).strip() or "0"
        a_raw = _text(stats.get(akey)).strip() or "0"
        rows.append({
            "Stat": label,
            "Home": h_raw,
            "Away": a_raw,
            "HomeValue": to_int(h_raw),
            "AwayValue": to_int(a_raw),
            "HomeShare": stat_share(h_raw, a_raw),
            "HasBar": label in BAR_STATS,
        })
    return pd.DataFrame(rows)


def split_lineup(lineup: pd.DataFrame) -> Dict[Tuple[str, str], pd.DataFrame]:
    """Group lineup rows as {('home'|'away', 'starters'|'subs'): rows}."""
    groups: Dict[Tuple[str, str], pd.DataFrame] = {}
    for side, flag in (("home", "1"), ("away", "0")):
        for role, sub in (("starters", "0"), ("subs", "1")):
            if lineup.empty:
                groups[(side, role)] = lineup
                continue
            mask = (lineup["strHome"] == flag) & (lineup["strSubstitute"] == sub)
            groups[(side, role)] = lineup[mask]
    return groups


def timeline_icon(kind: Any) -> str:
    return TIMELINE_ICONS.get(_text(kind).strip().lower(), DEFAULT_TIMELINE_ICON)
