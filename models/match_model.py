"""
Small data models for a match (event) record and its statistics.

These frozen dataclasses document the fields the event-detail view uses.
`from_api` maps the raw API keys (e.g. `strHomeTeam`, `intHomeScore`) onto
them and replaces missing values with "" so the view can apply its own
fallbacks ("0" for scores, "N/A" for dates, ...).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping


def _s(raw: Mapping[str, Any], key: str) -> str:
    val = raw.get(key)
    return "" if val is None else str(val).strip()


def event_label(raw: Mapping[str, Any]) -> str:
    """`strEvent` when present, otherwise "<home> vs <away>"."""
    name = _s(raw, "strEvent")
    if name:
        return name
    return f'{_s(raw, "strHomeTeam")} vs {_s(raw, "strAwayTeam")}'


@dataclass(frozen=True)
class Event:
    id: str
    name: str
    league: str
    season: str
    home_team: str
    away_team: str
    home_score: str
    away_score: str
    status: str
    date: str
    time: str
    venue: str
    thumb: str
    banner: str
    video: str

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Event":
        return cls(
            id=_s(raw, "idEvent"),
            name=event_label(raw),
            league=_s(raw, "strLeague"),
            season=_s(raw, "strSeason"),
            home_team=_s(raw, "strHomeTeam"),
            away_team=_s(raw, "strAwayTeam"),
            home_score=_s(raw, "intHomeScore"),
            away_score=_s(raw, "intAwayScore"),
            status=_s(raw, "strStatus"),
            date=_s(raw, "dateEvent"),
            time=_s(raw, "strTime"),
            venue=_s(raw, "strVenue"),
            thumb=_s(raw, "strThumb"),
            banner=_s(raw, "strBanner"),
            video=_s(raw, "strVideo"),
        )


@dataclass(frozen=True)
class EventStats:
    """The flat paired home/away record; `raw` keeps every counter and formation field."""
    raw: Dict[str, str]

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "EventStats":
        return cls(raw={k: ("" if v is None else str(v).strip()) for k, v in raw.items()})

    def get(self, key: str, default: str = "") -> str:
        return self.raw.get(key) or default
