"""
Past and upcoming matches per league.

Both lists show the first N events the API returns (N = MATCH_LIST_LIMIT).
Past matches carry a summary expander with the parsed goals and cards;
any match can be opened in the event-detail section.
"""

from __future__ import annotations
from functools import partial

import pandas as pd
import streamlit as st

from common.config import get_settings
from common.constants import League
from common.fetch import MountedState
from common.metrics import parse_cards, parse_goals
from common.ui import league_tabs
from common.utils import format_date, format_time, or_na
from controllers.data_controller import load_past_matches, load_upcoming_matches
from controllers.navigation import Navigator
from models.navigation import EventSelected, Tab

NO_VENUE = "Estadio no disponible"
PAST_EMPTY = "No se encontraron partidos recientes"
UPCOMING_EMPTY = "No se encontraron próximos partidos"


def _goal_list(team: str, details: str):
    st.markdown(f"**Goles {team}**")
    goals = parse_goals(details)
    if not goals:
        st.caption("Sin goles")
    for g in goals:
        st.write(f"{or_na(g.time, '?')}' - {or_na(g.scorer, 'Desconocido')}")


def _card_list(label: str, details: str):
    st.markdown(f"*{label}:*")
    cards = parse_cards(details)
    if not cards:
        st.caption("Ninguna")
    for c in cards:
        st.write(f"- {c}")


def _summary(match: pd.Series):
    home_team = or_na(match["strHomeTeam"], "Local")
    away_team = or_na(match["strAwayTeam"], "Visitante")
    left, right = st.columns(2)
    with left:
        _goal_list(home_team, match["strHomeGoalDetails"])
        st.markdown(f"**Tarjetas {home_team}**")
        _card_list("Amarillas", match["strHomeYellowCards"])
        _card_list("Rojas", match["strHomeRedCards"])
    with right:
        _goal_list(away_team, match["strAwayGoalDetails"])
        st.markdown(f"**Tarjetas {away_team}**")
        _card_list("Amarillas", match["strAwayYellowCards"])
        _card_list("Rojas", match["strAwayRedCards"])


def _match_cards(nav: Navigator, league: League, matches: pd.DataFrame, upcoming: bool):
    prefix = "upcoming" if upcoming else "past"
    cols = st.columns(2)
    for i, (_, match) in enumerate(matches.iterrows()):
        with cols[i % 2], st.container(border=True):
            when, badge = st.columns([3, 1])
            with when:
                st.caption(f"📅 {format_date(match['dateEvent'])}  🕒 {format_time(match['strTime'])}")
            with badge:
                st.caption("Próximo" if upcoming else or_na(match["strStatus"], "Finalizado"))

            home, mid, away = st.columns([3, 2, 3])
            with home:
                st.markdown(f"**{or_na(match['strHomeTeam'], 'Local')}**")
            with mid:
                if upcoming:
                    st.markdown("### vs")
                else:
                    st.markdown(f"### {or_na(match['intHomeScore'], '0')} - {or_na(match['intAwayScore'], '0')}")
            with away:
                st.markdown(f"**{or_na(match['strAwayTeam'], 'Visitante')}**")
            st.caption(f"📍 {or_na(match['strVenue'], NO_VENUE)}")

            if not upcoming:
                with st.expander("Resumen"):
                    _summary(match)
            st.button(
                "Ver detalles completos",
                key=f"{prefix}_{league.key}_{match['idEvent']}",
                on_click=nav.dispatch,
                args=(EventSelected(match["idEvent"], match["Label"]),),
            )


def render_past(nav: Navigator):
    st.header("Partidos Recientes")
    limit = get_settings().match_list_limit
    mounted = MountedState(st.session_state, "matches", nav.mount_key(Tab.MATCHES))
    league_tabs(
        mounted,
        partial(load_past_matches, limit=limit),
        lambda league, matches: _match_cards(nav, league, matches, upcoming=False),
        PAST_EMPTY,
    )


def render_upcoming(nav: Navigator):
    st.header("Próximos Partidos")
    limit = get_settings().match_list_limit
    mounted = MountedState(st.session_state, "upcoming", nav.mount_key(Tab.UPCOMING))
    league_tabs(
        mounted,
        partial(load_upcoming_matches, limit=limit),
        lambda league, matches: _match_cards(nav, league, matches, upcoming=True),
        UPCOMING_EMPTY,
    )
