"""
Navigation controller: a pure reducer over `NavState` plus the small
`Navigator` object that binds it to a session store.

Transitions:
    - TeamSelected / PlayerTeamSelected: remember the team, open Players.
    - EventSelected: remember the event, open Event details.
    - TabRequested: open the tab if it is reachable, otherwise no-op.
    - BackRequested: jump to the fixed back target of the detail tab.
      Selections are kept; there is no history stack.
"""

from __future__ import annotations
import logging
from typing import Any, Hashable, MutableMapping, Optional

from models.navigation import (
    BackRequested, EventSelected, NavEvent, NavState, PlayerTeamSelected,
    Selection, Tab, TabRequested, TeamSelected,
)

logger = logging.getLogger(__name__)

NAV_KEY = "nav_state"

BACK_TARGETS = {
    Tab.EVENT_DETAILS: Tab.MATCHES,
    Tab.TEAM_DETAILS: Tab.PLAYERS,
}

TAB_LABELS = {
    Tab.TEAMS: "🛡️ Equipos",
    Tab.PLAYERS: "👥 Jugadores",
    Tab.TEAM_DETAILS: "🏟️ Equipo",
    Tab.MATCHES: "📅 Partidos",
    Tab.UPCOMING: "🗓️ Próximos",
    Tab.TABLE: "📊 Clasificación",
    Tab.SEARCH: "🔎 Buscar",
    Tab.EVENT_DETAILS: "⚽ Partido",
}


def is_enabled(state: NavState, tab: Tab) -> bool:
    if tab in (Tab.PLAYERS, Tab.TEAM_DETAILS):
        return state.selected_team is not None
    if tab is Tab.EVENT_DETAILS:
        return state.selected_event is not None
    return True


def _goto(state: NavState, tab: Tab, **changes: Any) -> NavState:
    return NavState(
        active_tab=tab,
        selected_team=changes.get("selected_team", state.selected_team),
        selected_event=changes.get("selected_event", state.selected_event),
        visit=state.visit + 1,
    )


def reduce(state: NavState, event: NavEvent) -> NavState:
    if isinstance(event, (TeamSelected, PlayerTeamSelected)):
        team = Selection(id=str(event.team_id), name=str(event.team_name))
        return _goto(state, Tab.PLAYERS, selected_team=team)
    if isinstance(event, EventSelected):
        ev = Selection(id=str(event.event_id), name=str(event.event_name))
        return _goto(state, Tab.EVENT_DETAILS, selected_event=ev)
    if isinstance(event, TabRequested):
        if event.tab is state.active_tab or not is_enabled(state, event.tab):
            return state
        return _goto(state, event.tab)
    if isinstance(event, BackRequested):
        target = BACK_TARGETS.get(event.from_tab)
        if target is None:
            return state
        return _goto(state, target)
    raise TypeError(f"Unknown navigation event: {event!r}")


def mount_key(state: NavState, tab: Tab) -> Hashable:
    """Key under which a section keeps its fetched data for the current visit."""
    ident: Optional[str] = None
    if tab in (Tab.PLAYERS, Tab.TEAM_DETAILS) and state.selected_team:
        ident = state.selected_team.id
    elif tab is Tab.EVENT_DETAILS and state.selected_event:
        ident = state.selected_event.id
    return (tab.value, state.visit, ident)


class Navigator:
    """Navigation context handed to every section; reads and writes `store[NAV_KEY]`."""

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self._store = store
        if not isinstance(store.get(NAV_KEY), NavState):
            store[NAV_KEY] = NavState()

    @property
    def state(self) -> NavState:
        return self._store[NAV_KEY]

    def dispatch(self, event: NavEvent) -> NavState:
        before = self.state
        after = reduce(before, event)
        if after is not before:
            logger.info("Navigation %s: %s -> %s", type(event).__name__,
                        before.active_tab.value, after.active_tab.value)
        self._store[NAV_KEY] = after
        return after

    def mount_key(self, tab: Tab) -> Hashable:
        return mount_key(self.state, tab)

    def is_enabled(self, tab: Tab) -> bool:
        return is_enabled(self.state, tab)
