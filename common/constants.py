from __future__ import annotations
from dataclasses import dataclass

BASE_URL      = "https://www.thesportsdb.com/api/v1/json"
API_KEY       = "123"
USER_AGENT    = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36"
)

APP_TITLE = "FútbolPro Explorer"


@dataclass(frozen=True)
class League:
    key: str        # stable key used for per-league state
    label: str      # tab label
    id: str         # numeric league id
    name: str       # name accepted by search_all_teams.php


LEAGUES = (
    League("laLiga", "La Liga", "4335", "Spanish La Liga"),
    League("premierLeague", "Premier League", "4328", "English Premier League"),
    League("serieA", "Serie A", "4332", "Italian Serie A"),
)
LEAGUES_BY_KEY = {lg.key: lg for lg in LEAGUES}

# Seasons tried, newest first, when live standings are enabled
TABLE_SEASONS = ["2023-2024", "2022-2023", "2021-2022", "2020-2021"]

NA = "N/A"
PLACEHOLDER_IMG = "https://placehold.co/{w}x{h}?text=%E2%9A%BD"

TIMELINE_ICONS = {
    "goal": "⚽",
    "yellowcard": "🟨",
    "redcard": "🟥",
    "substitution": "🔄",
    "penalty": "🎯",
}
DEFAULT_TIMELINE_ICON = "⏱️"
