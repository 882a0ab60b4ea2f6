from __future__ import annotations
from typing import Callable, Hashable

import pandas as pd
import streamlit as st

from common.fetch import MountedState, run_primary
from common.ui import image, labeled, social_links
from common.utils import format_date, or_na
from controllers.detail_controller import PlayerBundle, load_player

HONOURS_EMPTY = "No hay información de palmarés disponible"
FORMER_TEAMS_EMPTY = "No hay información de equipos anteriores disponible"
CONTRACTS_EMPTY = "No hay información de contratos disponible"


def _info(bundle: PlayerBundle):
    p = bundle.player
    if p.banner:
        st.image(p.banner, use_container_width=True)
    left, right = st.columns([1, 2])
    with left:
        image(p.image, 200, 200)
    with right:
        st.subheader(p.name or "Jugador")
        labeled("Equipo", or_na(p.team))
        labeled("Posición", or_na(p.position))
        labeled("Dorsal", or_na(p.number))
        labeled("Nacionalidad", or_na(p.nationality))
        labeled("Fecha de nacimiento", format_date(p.born))
        labeled("Lugar de nacimiento", or_na(p.birth_location))
        labeled("Altura", or_na(p.height))
        labeled("Peso", or_na(p.weight))
    st.markdown("#### Biografía")
    st.write(p.description or "No hay biografía disponible")
    if p.has_socials:
        st.markdown("#### Redes sociales")
        social_links(p.socials)


def _rows(df: pd.DataFrame, empty_message: str, fmt: Callable[[pd.Series], str]):
    if df.empty:
        st.info(empty_message)
        return
    for _, row in df.iterrows():
        st.markdown(fmt(row))


def render(player_id: str, on_back: Callable[[], None], parent_key: Hashable = None):
    """Full profile of one player, shown inside the players section."""
    st.button("← Volver a la lista", key=f"player_back_{player_id}", on_click=on_back)

    mounted = MountedState(st.session_state, "player_detail", (parent_key, player_id))
    if "player" not in mounted:
        with st.spinner("Cargando jugador..."):
            mounted.commit("player", run_primary(load_player, player_id))
    state = mounted.get("player")
    if state.is_error:
        st.error(state.message)
        return

    bundle: PlayerBundle = state.data
    info, honours, former, contracts = st.tabs(
        ["Información", "Palmarés", "Equipos anteriores", "Contratos"])
    with info:
        _info(bundle)
    with honours:
        _rows(bundle.honours, HONOURS_EMPTY,
              lambda r: f"🏆 **{or_na(r['strHonour'])}** · {or_na(r['strSeason'])} ({or_na(r['strTeam'])})")
    with former:
        _rows(bundle.former_teams, FORMER_TEAMS_EMPTY,
              lambda r: f"**{or_na(r['strFormerTeam'])}** · {or_na(r['strJoined'])} - {or_na(r['strDeparted'])}")
    with contracts:
        _rows(bundle.contracts, CONTRACTS_EMPTY,
              lambda r: (f"**{or_na(r['strTeam'])}** · {or_na(r['strYearStart'])} - "
                         f"{or_na(r['strYearEnd'])} · {or_na(r['strWage'])}"))
