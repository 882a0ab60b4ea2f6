from __future__ import annotations
import streamlit as st

from common.fetch import MountedState, run_primary
from common.ui import back_button, image, labeled, social_links
from common.utils import or_na
from controllers.detail_controller import load_team
from controllers.navigation import Navigator
from models.navigation import Tab, TeamSelected
from models.team_model import Team


def _info(team: Team):
    left, right = st.columns([1, 2])
    with left:
        image(team.badge, 180, 180)
    with right:
        labeled("País", or_na(team.country))
        labeled("Fundación", or_na(team.formed_year))
        labeled("Liga", or_na(team.league))
        labeled("Nombre corto", or_na(team.short_name))
    st.markdown("#### Historia")
    st.write(team.description or "No hay descripción disponible")


def _stadium(team: Team):
    if team.stadium_thumb:
        st.image(team.stadium_thumb, use_container_width=True)
    labeled("Nombre", team.stadium or "Estadio no disponible")
    labeled("Ubicación", or_na(team.stadium_location))
    labeled("Capacidad", or_na(team.stadium_capacity))
    if team.stadium_description:
        st.write(team.stadium_description)


def _image_or_message(url: str, message: str):
    if url:
        st.image(url, use_container_width=True)
    else:
        st.info(message)


def render(nav: Navigator):
    team_sel = nav.state.selected_team
    if team_sel is None:
        st.info("Selecciona un equipo para ver sus detalles")
        return

    back_button(nav, Tab.TEAM_DETAILS, "← Volver a jugadores")
    mounted = MountedState(st.session_state, "team_details", nav.mount_key(Tab.TEAM_DETAILS))
    if "team" not in mounted:
        with st.spinner("Cargando equipo..."):
            mounted.commit("team", run_primary(load_team, team_sel.id))
    state = mounted.get("team")
    if state.is_error:
        st.error(state.message)
        return

    team: Team = state.data
    if team.banner:
        st.image(team.banner, use_container_width=True)
    st.header(team.name or team_sel.name)
    st.button("Ver jugadores", key="team_details_players", type="primary",
              on_click=nav.dispatch, args=(TeamSelected(team.id or team_sel.id, team.name or team_sel.name),))

    info, stadium, social, kit, fanart = st.tabs(
        ["Información", "Estadio", "Redes sociales", "Equipación", "Fan Art"])
    with info:
        _info(team)
    with stadium:
        _stadium(team)
    with social:
        social_links(team.socials)
    with kit:
        _image_or_message(team.kit, "No hay imagen de la equipación disponible")
    with fanart:
        _image_or_message(team.fanart, "No hay fan art disponible")
