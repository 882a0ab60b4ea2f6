from __future__ import annotations
from typing import Dict, Optional, Tuple

import pandas as pd

from common.constants import NA
from common.metrics import paired_stats
from models.match_model import Event, EventStats

LINE_FIELDS = [
    ("Portero", "LineupGoalkeeper"),
    ("Defensa", "LineupDefense"),
    ("Mediocampo", "LineupMidfield"),
    ("Delantera", "LineupForward"),
    ("Suplentes", "LineupSubstitutes"),
]


def compute_event_stats(stats: Optional[EventStats], event: Event) -> Tuple[pd.DataFrame, Dict[str, Dict[str, str]]]:
    """
    Return (comparison, formations) for the statistics tab.

    comparison: one row per paired counter, with the home/away team names in
    `HomeName`/`AwayName` so charts can label the bars.
    formations: {team name: {"Formación": ..., "Portero": ..., ...}} with "N/A"
    for every missing field.
    """
    if stats is None:
        return pd.DataFrame(), {}

    comparison = paired_stats(stats.raw)
    comparison["HomeName"] = event.home_team
    comparison["AwayName"] = event.away_team

    formations: Dict[str, Dict[str, str]] = {}
    for side, team in (("Home", event.home_team), ("Away", event.away_team)):
        lines = {"Formación": stats.get(f"str{side}Formation", NA)}
        for label, suffix in LINE_FIELDS:
            lines[label] = stats.get(f"str{side}{suffix}", NA)
        formations[team or side] = lines
    return comparison, formations
