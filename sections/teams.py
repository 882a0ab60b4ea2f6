"""
Teams section: the teams of each supported league, with a local,
case-insensitive name filter. Clicking a team opens its players.
"""

from __future__ import annotations
import pandas as pd
import streamlit as st

from common.constants import League
from common.fetch import MountedState
from common.ui import image, league_tabs
from common.utils import filter_by_name, or_na
from controllers.data_controller import load_teams
from controllers.navigation import Navigator
from models.navigation import Tab, TeamSelected

EMPTY_MESSAGE = "No se encontraron equipos que coincidan con la búsqueda"
CARDS_PER_ROW = 4


def _team_cards(nav: Navigator, league: League, teams: pd.DataFrame):
    if teams.empty:
        st.info(EMPTY_MESSAGE)
        return
    rows = [teams.iloc[i:i + CARDS_PER_ROW] for i in range(0, len(teams), CARDS_PER_ROW)]
    for chunk in rows:
        cols = st.columns(CARDS_PER_ROW)
        for col, (_, team) in zip(cols, chunk.iterrows()):
            with col, st.container(border=True):
                st.caption(or_na(team["strLeague"], league.label))
                image(team["Badge"], 128, 128, width=96)
                st.markdown(f"**{or_na(team['strTeam'], 'Equipo')}**")
                st.caption(f"📍 {or_na(team['strStadiumLocation'])} - {or_na(team['strStadium'])}")
                st.caption(f"📅 Fundado en {or_na(team['intFormedYear'])}")
                st.button(
                    "Ver jugadores",
                    key=f"team_{league.key}_{team['idTeam']}",
                    on_click=nav.dispatch,
                    args=(TeamSelected(team["idTeam"], team["strTeam"]),),
                )


def render(nav: Navigator):
    head, search = st.columns([3, 1])
    with head:
        st.header("Equipos")
    with search:
        term = st.text_input("Buscar equipos", key="teams_filter",
                             placeholder="Buscar equipos...", label_visibility="collapsed")

    mounted = MountedState(st.session_state, "teams", nav.mount_key(Tab.TEAMS))
    league_tabs(
        mounted,
        load_teams,
        lambda league, teams: _team_cards(nav, league, filter_by_name(teams, term, "strTeam")),
        EMPTY_MESSAGE,
    )
