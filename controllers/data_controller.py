"""
Data controller helpers that glue the common data-fetching utilities to
the list sections.

This module exposes one loader per collection the sections show:
    - `load_teams(league)` returns a DataFrame with the league's teams.
    - `load_past_matches(league)` / `load_upcoming_matches(league)` return
        the first N events of the league, with a display `Label` column.
    - `load_players(team_id, team_name)` returns the squad of one team.
    - `search_teams(term)` / `search_players(term)` back the search section.

All HTTP work and JSON -> DataFrame normalization lives in `common.utils`.
Loaders raise `SportsDataError` on failure; the sections wrap them with
`common.fetch.run_primary` / `fetch_by_league` to get a FetchState.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List

import pandas as pd

from common.constants import League
from common.utils import first_of, get_list, placeholder, records_frame
from models.match_model import event_label

logger = logging.getLogger(__name__)

TEAM_COLUMNS = [
    "idTeam", "strTeam", "strTeamBadge", "strBadge", "strLeague", "strCountry",
    "strStadium", "strStadiumLocation", "intFormedYear",
]
MATCH_COLUMNS = [
    "idEvent", "strEvent", "dateEvent", "strTime", "strHomeTeam", "strAwayTeam",
    "intHomeScore", "intAwayScore", "strLeague", "strVenue", "strStatus",
    "strHomeGoalDetails", "strAwayGoalDetails", "strHomeRedCards", "strAwayRedCards",
    "strHomeYellowCards", "strAwayYellowCards",
]
PLAYER_COLUMNS = [
    "idPlayer", "idTeam", "strPlayer", "strTeam", "strPosition", "strNationality",
    "dateBorn", "strHeight", "strWeight", "strCutout", "strThumb", "strDescriptionEN",
]

DEFAULT_MATCH_LIMIT = 10


def _teams_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    df = records_frame(records, TEAM_COLUMNS)
    df["Badge"] = [first_of(a, b, default=placeholder(128, 128))
                   for a, b in zip(df["strTeamBadge"], df["strBadge"])]
    return df


def _players_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    df = records_frame(records, PLAYER_COLUMNS)
    df["Image"] = [first_of(a, b, default=placeholder(64, 64))
                   for a, b in zip(df["strCutout"], df["strThumb"])]
    return df


def _matches_frame(records: List[Dict[str, Any]], limit: int) -> pd.DataFrame:
    # Label must come from the raw record so an empty strEvent falls back to "home vs away".
    records = records[:limit] if limit else records
    df = records_frame(records, MATCH_COLUMNS)
    df["Label"] = [event_label(r) for r in records]
    return df


def load_teams(league: League) -> pd.DataFrame:
    logger.info("Fetching teams for %s", league.name)
    records = get_list(
        "search_all_teams.php", "teams", params={"l": league.name},
        error_message=f"Error al cargar equipos de {league.name}",
    )
    logger.info("Loaded %d teams for %s", len(records), league.name)
    return _teams_frame(records)


def load_past_matches(league: League, limit: int = DEFAULT_MATCH_LIMIT) -> pd.DataFrame:
    records = get_list(
        "eventspastleague.php", "events", params={"id": league.id},
        error_message=f"Error al cargar partidos de la liga {league.label}",
    )
    return _matches_frame(records, limit)


def load_upcoming_matches(league: League, limit: int = DEFAULT_MATCH_LIMIT) -> pd.DataFrame:
    records = get_list(
        "eventsnextleague.php", "events", params={"id": league.id},
        error_message=f"Error al cargar próximos partidos de la liga {league.label}",
    )
    return _matches_frame(records, limit)


def load_players(team_id: str, team_name: str) -> pd.DataFrame:
    logger.info("Fetching players for team %s (%s)", team_id, team_name)
    records = get_list(
        "lookup_all_players.php", "player", params={"id": team_id},
        error_message=f"Error al cargar jugadores del equipo {team_name}",
    )
    logger.info("Loaded %d players for %s", len(records), team_name)
    return _players_frame(records)


def search_teams(term: str) -> pd.DataFrame:
    records = get_list("searchteams.php", "teams", params={"t": term.strip()},
                       error_message="Error al buscar equipos")
    return _teams_frame(records)


def search_players(term: str) -> pd.DataFrame:
    records = get_list("searchplayers.php", "player", params={"p": term.strip()},
                       error_message="Error al buscar jugadores")
    return _players_frame(records)
