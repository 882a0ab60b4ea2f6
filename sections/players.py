"""
Squad of the selected team.

The list is fetched once per mount; the name and position filters only
narrow the fetched frame. A player can be previewed as a summary card and
opened as a full profile without leaving the section.
"""

from __future__ import annotations
import pandas as pd
import streamlit as st

from common.fetch import FetchState, MountedState, run_primary
from common.ui import image, render_state, selectbox_with_placeholder
from common.utils import filter_by_name, filter_by_value, format_date, or_na, unique_values
from controllers.data_controller import load_players
from controllers.navigation import Navigator
from models.navigation import Tab, TabRequested
from sections import player_details

ALL_POSITIONS = "Todas las posiciones"
EMPTY_MESSAGE = "No se encontraron jugadores que coincidan con los filtros"


def filter_players(players: pd.DataFrame, term: str, position) -> pd.DataFrame:
    """Name substring filter intersected with the exact position filter."""
    df = filter_by_name(players, term, "strPlayer")
    return filter_by_value(df, None if position in (None, ALL_POSITIONS) else position, "strPosition")


def _table(players: pd.DataFrame):
    view = players[["Image", "strPlayer", "strPosition", "strNationality", "dateBorn"]].copy()
    view["dateBorn"] = view["dateBorn"].map(format_date)
    st.dataframe(
        view,
        hide_index=True,
        use_container_width=True,
        column_config={
            "Image": st.column_config.ImageColumn("Foto", width="small"),
            "strPlayer": "Nombre",
            "strPosition": "Posición",
            "strNationality": "Nacionalidad",
            "dateBorn": "Nacimiento",
        },
    )


def _cards(mounted: MountedState, players: pd.DataFrame):
    cols = st.columns(4)
    for i, (_, player) in enumerate(players.iterrows()):
        with cols[i % 4], st.container(border=True):
            image(player["Image"], 96, 96)
            st.markdown(f"**{or_na(player['strPlayer'], 'Jugador')}**")
            st.caption(f"{or_na(player['strPosition'])} · {or_na(player['strNationality'])}")
            st.button("Ver resumen", key=f"preview_{player['idPlayer']}",
                      on_click=mounted.set, args=("preview", player["idPlayer"]))


def _summary(mounted: MountedState, player: pd.Series):
    with st.container(border=True):
        left, right = st.columns([1, 3])
        with left:
            image(player["Image"], 150, 150)
        with right:
            st.subheader(or_na(player["strPlayer"], "Jugador"))
            st.write(f"**Posición:** {or_na(player['strPosition'])}")
            st.write(f"**Nacionalidad:** {or_na(player['strNationality'])}")
            st.write(f"**Fecha de nacimiento:** {format_date(player['dateBorn'])}")
            st.write(f"**Altura:** {or_na(player['strHeight'])}  **Peso:** {or_na(player['strWeight'])}")
        bio = player["strDescriptionEN"]
        if bio:
            st.caption(bio[:400] + ("..." if len(bio) > 400 else ""))
        a, b = st.columns(2)
        with a:
            st.button("Ver perfil completo", key="open_profile", type="primary",
                      on_click=mounted.set, args=("detail", player["idPlayer"]))
        with b:
            st.button("Volver a la lista", key="close_preview",
                      on_click=mounted.set, args=("preview", None))


def render(nav: Navigator):
    team = nav.state.selected_team
    if team is None:
        st.info("Selecciona un equipo para ver sus jugadores")
        return

    st.header(f"Jugadores de {team.name}")
    mounted = MountedState(st.session_state, "players", nav.mount_key(Tab.PLAYERS))

    detail_id = mounted.get("detail")
    if detail_id:
        player_details.render(detail_id, on_back=lambda: mounted.set("detail", None),
                              parent_key=mounted.mount_key)
        return

    st.button("Ver detalles del equipo", key="to_team_details",
              on_click=nav.dispatch, args=(TabRequested(Tab.TEAM_DETAILS),))

    if "players" not in mounted:
        with st.spinner("Cargando jugadores..."):
            mounted.commit("players", run_primary(load_players, team.id, team.name))
    state = mounted.get("players")
    if state.is_error:
        st.error(state.message)
        return

    players: pd.DataFrame = state.data
    name_col, pos_col = st.columns([2, 1])
    with name_col:
        term = st.text_input("Buscar jugador", placeholder="Buscar jugador...",
                             key=f"players_filter_{team.id}", label_visibility="collapsed")
    with pos_col:
        position = selectbox_with_placeholder(
            "Posición", [ALL_POSITIONS] + unique_values(players, "strPosition"),
            key=f"players_position_{team.id}", default_index=0)

    filtered = filter_players(players, term, position)

    preview_id = mounted.get("preview")
    if preview_id:
        match = players[players["idPlayer"] == preview_id]
        if not match.empty:
            _summary(mounted, match.iloc[0])

    as_table, as_cards = st.tabs(["Tabla", "Tarjetas"])
    with as_table:
        render_state(FetchState.ready(filtered), _table, EMPTY_MESSAGE)
    with as_cards:
        render_state(FetchState.ready(filtered), lambda df: _cards(mounted, df), EMPTY_MESSAGE)
