"""
Loaders for the detail sections (team, player, event).

Each loader does one primary lookup and, when it succeeds, fans out the
enrichment lookups concurrently:

    - player: honours, former teams, contracts
    - event:  lineup, timeline, statistics, TV listings

A primary failure propagates as `SportsDataError` (the section shows a
blocking alert). Enrichment failures are logged by `common.fetch.fan_out`
and the matching collection is simply empty.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from common.fetch import fan_out
from common.utils import get_list, get_one, records_frame
from models.match_model import Event, EventStats
from models.team_model import Player, Team

LINEUP_COLUMNS = ["idPlayer", "idTeam", "strPlayer", "strTeam", "strPosition",
                  "strHome", "strSubstitute", "strCutout"]
TIMELINE_COLUMNS = ["idPlayer", "strTimeline", "strTimelineDetail", "strPlayer",
                    "strTeam", "strTime", "strTimelineType"]
TV_COLUMNS = ["idChannel", "strChannel", "strLogo", "strCountry", "strLang"]
HONOUR_COLUMNS = ["idTeam", "strHonour", "strTeam", "strSeason"]
FORMER_TEAM_COLUMNS = ["idFormerTeam", "strFormerTeam", "strSport", "strJoined", "strDeparted"]
CONTRACT_COLUMNS = ["idTeam", "strTeam", "strSport", "strYearStart", "strYearEnd", "strWage"]

# Row-per-stat responses ({"strStat": ..., "intHome": ..., "intAway": ...})
# are folded into the flat intHome*/intAway* record the view reads.
_STAT_NAMES = {
    "shots on goal": "ShotsOnGoal",
    "total shots": "Shots",
    "corner kicks": "Corners",
    "fouls": "Fouls",
    "yellow cards": "YellowCards",
    "red cards": "RedCards",
}


@dataclass(frozen=True)
class PlayerBundle:
    player: Player
    honours: pd.DataFrame
    former_teams: pd.DataFrame
    contracts: pd.DataFrame


@dataclass(frozen=True)
class EventBundle:
    event: Event
    lineup: pd.DataFrame
    timeline: pd.DataFrame
    stats: Optional[EventStats]
    tv: pd.DataFrame


def _collection(endpoint: str, field: str, ident: str, columns: List[str]) -> pd.DataFrame:
    return records_frame(get_list(endpoint, field, params={"id": ident}), columns)


def _empty(columns: List[str]) -> pd.DataFrame:
    return pd.DataFrame(columns=columns)


def fold_stats(rows: List[Dict[str, Any]]) -> Optional[EventStats]:
    if not rows:
        return None
    first = rows[0]
    if "strStat" not in first:
        return EventStats.from_api(first)
    flat: Dict[str, Any] = {}
    for row in rows:
        name = _STAT_NAMES.get(str(row.get("strStat") or "").strip().lower())
        if name:
            flat[f"intHome{name}"] = row.get("intHome")
            flat[f"intAway{name}"] = row.get("intAway")
    return EventStats.from_api(flat)


def load_team(team_id: str) -> Team:
    raw = get_one("lookupteam.php", "teams", params={"id": team_id},
                  error_message="Error al cargar detalles del equipo",
                  not_found_message="No se encontraron detalles para este equipo")
    return Team.from_api(raw)


def load_player(player_id: str) -> PlayerBundle:
    raw = get_one("lookupplayer.php", "players", params={"id": player_id},
                  error_message="Error al cargar detalles del jugador",
                  not_found_message="No se encontraron detalles para este jugador")
    extra = fan_out({
        "honours": (lambda: _collection("lookuphonours.php", "honours", player_id, HONOUR_COLUMNS),
                    _empty(HONOUR_COLUMNS)),
        "former_teams": (lambda: _collection("lookupformerteams.php", "formerteams", player_id,
                                             FORMER_TEAM_COLUMNS),
                         _empty(FORMER_TEAM_COLUMNS)),
        "contracts": (lambda: _collection("lookupcontracts.php", "contracts", player_id,
                                          CONTRACT_COLUMNS),
                      _empty(CONTRACT_COLUMNS)),
    })
    return PlayerBundle(player=Player.from_api(raw), **extra)


def load_event(event_id: str) -> EventBundle:
    raw = get_one("lookupevent.php", "events", params={"id": event_id},
                  error_message="Error al cargar detalles del evento",
                  not_found_message="No se encontraron detalles para este evento")
    extra = fan_out({
        "lineup": (lambda: _collection("lookuplineup.php", "lineup", event_id, LINEUP_COLUMNS),
                   _empty(LINEUP_COLUMNS)),
        "timeline": (lambda: _collection("lookuptimeline.php", "timeline", event_id,
                                         TIMELINE_COLUMNS),
                     _empty(TIMELINE_COLUMNS)),
        "stats": (lambda: fold_stats(get_list("lookupeventstats.php", "eventstats",
                                              params={"id": event_id})),
                  None),
        "tv": (lambda: _collection("lookuptv.php", "tv", event_id, TV_COLUMNS),
               _empty(TV_COLUMNS)),
    })
    return EventBundle(event=Event.from_api(raw), **extra)
