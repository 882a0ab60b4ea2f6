"""
Free-text search over teams or players.

A blank term does nothing. The "no results" message only appears once a
search has actually run. Choosing a team, or the team of a player, opens
that team's players.
"""

from __future__ import annotations
import pandas as pd
import streamlit as st

from common.fetch import MountedState, run_primary
from common.ui import image, render_state
from common.utils import or_na
from controllers.data_controller import search_players, search_teams
from controllers.navigation import Navigator
from models.navigation import PlayerTeamSelected, Tab, TeamSelected

SEARCH_TYPES = {"teams": "Equipos", "players": "Jugadores"}
EMPTY_MESSAGES = {
    "teams": "No se encontraron equipos que coincidan con la búsqueda",
    "players": "No se encontraron jugadores que coincidan con la búsqueda",
}


def _team_results(nav: Navigator, teams: pd.DataFrame):
    cols = st.columns(3)
    for i, (_, team) in enumerate(teams.iterrows()):
        with cols[i % 3], st.container(border=True):
            image(team["Badge"], 64, 64)
            st.markdown(f"**{or_na(team['strTeam'], 'Equipo')}**")
            st.caption(f"{or_na(team['strLeague'])} · {or_na(team['strCountry'])}")
            st.button("Ver jugadores", key=f"search_team_{team['idTeam']}",
                      on_click=nav.dispatch,
                      args=(TeamSelected(team["idTeam"], team["strTeam"]),))


def _player_results(nav: Navigator, players: pd.DataFrame):
    cols = st.columns(3)
    for i, (_, player) in enumerate(players.iterrows()):
        with cols[i % 3], st.container(border=True):
            image(player["Image"], 64, 64)
            st.markdown(f"**{or_na(player['strPlayer'], 'Jugador')}**")
            st.caption(f"{or_na(player['strPosition'])} · {or_na(player['strNationality'])}")
            st.caption(or_na(player["strTeam"]))
            # players without a team cannot be navigated to
            st.button("Ver equipo", key=f"search_player_{player['idPlayer']}",
                      disabled=not player["idTeam"],
                      on_click=nav.dispatch,
                      args=(PlayerTeamSelected(player["idTeam"], player["strTeam"]),))


def render(nav: Navigator):
    st.header("Búsqueda")
    mounted = MountedState(st.session_state, "search", nav.mount_key(Tab.SEARCH))

    with st.form("search_form", clear_on_submit=False):
        term_col, type_col, go_col = st.columns([4, 2, 1])
        with term_col:
            term = st.text_input("Buscar", placeholder="Buscar equipos o jugadores...",
                                 label_visibility="collapsed")
        with type_col:
            kind = st.radio("Tipo", list(SEARCH_TYPES), format_func=SEARCH_TYPES.get,
                            horizontal=True, label_visibility="collapsed")
        with go_col:
            submitted = st.form_submit_button("🔎 Buscar")

    if submitted and term.strip():
        loader = search_teams if kind == "teams" else search_players
        with st.spinner("Buscando..."):
            mounted.commit("result", (kind, run_primary(loader, term)))

    if "result" not in mounted:
        return
    kind, state = mounted.get("result")
    if kind == "teams":
        render_state(state, lambda df: _team_results(nav, df), EMPTY_MESSAGES[kind])
    else:
        render_state(state, lambda df: _player_results(nav, df), EMPTY_MESSAGES[kind])
