"""
Navigation state for the single-page shell and the typed events that
sections emit to change it.

Sections never mutate `NavState` directly: they emit one of the events
below and the shell reduces it (see `controllers.navigation.reduce`).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Tab(str, Enum):
    TEAMS = "teams"
    PLAYERS = "players"
    TEAM_DETAILS = "teamDetails"
    MATCHES = "matches"
    UPCOMING = "upcoming"
    TABLE = "table"
    SEARCH = "search"
    EVENT_DETAILS = "eventDetails"


@dataclass(frozen=True)
class Selection:
    id: str
    name: str


@dataclass(frozen=True)
class NavState:
    active_tab: Tab = Tab.TEAMS
    selected_team: Optional[Selection] = None
    selected_event: Optional[Selection] = None
    visit: int = 0          # bumped on every transition; part of each section's mount key


@dataclass(frozen=True)
class TeamSelected:
    team_id: str
    team_name: str


@dataclass(frozen=True)
class PlayerTeamSelected:
    team_id: str
    team_name: str


@dataclass(frozen=True)
class EventSelected:
    event_id: str
    event_name: str


@dataclass(frozen=True)
class TabRequested:
    tab: Tab


@dataclass(frozen=True)
class BackRequested:
    from_tab: Tab


NavEvent = Union[TeamSelected, PlayerTeamSelected, EventSelected, TabRequested, BackRequested]
