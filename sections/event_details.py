"""
Full view of one match: header, highlights, and tabs for statistics,
timeline, lineups and TV listings.

Only the event lookup is load-bearing. Lineup, timeline, stats and TV come
from best-effort fetches, so each tab falls back to its own empty message.
"""

from __future__ import annotations
import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from common.fetch import MountedState, run_primary
from common.metrics import split_lineup, timeline_icon
from common.plots import plot_stat_comparison
from common.ui import back_button, image
from common.utils import format_date, format_time, or_na, youtube_embed
from controllers.detail_controller import EventBundle, load_event
from controllers.navigation import Navigator
from controllers.stats_controller import compute_event_stats
from models.match_model import Event
from models.navigation import Tab

STATS_EMPTY = "No hay estadísticas disponibles para este partido"
TIMELINE_EMPTY = "No hay eventos de timeline disponibles para este partido"
LINEUP_EMPTY = "No hay alineaciones disponibles para este partido"
TV_EMPTY = "No hay información de transmisión disponible"


def _header(event: Event):
    if event.banner or event.thumb:
        st.image(event.banner or event.thumb, use_container_width=True)
    st.header(event.name)
    st.caption(f"{or_na(event.league)} · {or_na(event.season)}")
    home, score, away = st.columns([3, 2, 3])
    with home:
        st.subheader(event.home_team or "Local")
    with score:
        st.markdown(f"## {event.home_score or '0'} - {event.away_score or '0'}")
        if event.status:
            st.caption(event.status)
    with away:
        st.subheader(event.away_team or "Visitante")
    st.caption(f"📅 {format_date(event.date)}  🕒 {format_time(event.time)}  "
               f"📍 {event.venue or 'Estadio no disponible'}")


def _stats(bundle: EventBundle):
    comparison, formations = compute_event_stats(bundle.stats, bundle.event)
    if comparison.empty:
        st.info(STATS_EMPTY)
        return

    for _, row in comparison.iterrows():
        left, mid, right = st.columns([1, 3, 1])
        left.markdown(f"**{row['Home']}**")
        mid.markdown(f"<div style='text-align:center'>{row['Stat']}</div>", unsafe_allow_html=True)
        right.markdown(f"<div style='text-align:right'><b>{row['Away']}</b></div>",
                       unsafe_allow_html=True)
        if row["HasBar"]:
            mid.progress(int(round(row["HomeShare"])))

    ax = plot_stat_comparison(comparison)
    st.pyplot(ax.figure, use_container_width=True)
    plt.close(ax.figure)

    st.markdown("#### Formaciones")
    for col, (team, lines) in zip(st.columns(len(formations) or 1), formations.items()):
        with col:
            st.markdown(f"**{team}**")
            for label, value in lines.items():
                st.write(f"{label}: {value}")


def _timeline(timeline: pd.DataFrame):
    if timeline.empty:
        st.info(TIMELINE_EMPTY)
        return
    for _, item in timeline.iterrows():
        detail = f" ({item['strTimelineDetail']})" if item["strTimelineDetail"] else ""
        st.markdown(
            f"{timeline_icon(item['strTimeline'])} **{or_na(item['strTime'])}'** "
            f"{or_na(item['strPlayer'])} · {or_na(item['strTeam'])}{detail}"
        )


def _players(rows: pd.DataFrame, title: str):
    st.markdown(f"**{title}**")
    if rows.empty:
        st.caption("Sin datos")
    for _, p in rows.iterrows():
        st.write(f"- {or_na(p['strPlayer'], 'Jugador')} ({or_na(p['strPosition'])})")


def _lineups(lineup: pd.DataFrame, event: Event):
    if lineup.empty:
        st.info(LINEUP_EMPTY)
        return
    groups = split_lineup(lineup)
    sides = (("home", event.home_team or "Local"), ("away", event.away_team or "Visitante"))
    for col, (side, team) in zip(st.columns(2), sides):
        with col:
            st.subheader(team)
            _players(groups[(side, "starters")], "Titulares")
            _players(groups[(side, "subs")], "Suplentes")


def _tv(tv: pd.DataFrame):
    if tv.empty:
        st.info(TV_EMPTY)
        return
    cols = st.columns(3)
    for i, (_, ch) in enumerate(tv.iterrows()):
        with cols[i % 3], st.container(border=True):
            image(ch["strLogo"], 80, 40)
            st.markdown(f"**{or_na(ch['strChannel'])}**")
            st.caption(f"{or_na(ch['strCountry'])} · {or_na(ch['strLang'])}")


def render(nav: Navigator):
    selected = nav.state.selected_event
    if selected is None:
        st.info("Selecciona un partido para ver sus detalles")
        return

    back_button(nav, Tab.EVENT_DETAILS, "← Volver a partidos")
    mounted = MountedState(st.session_state, "event_details", nav.mount_key(Tab.EVENT_DETAILS))
    if "event" not in mounted:
        with st.spinner(f"Cargando {selected.name}..."):
            mounted.commit("event", run_primary(load_event, selected.id))
    state = mounted.get("event")
    if state.is_error:
        st.error(state.message)
        return

    bundle: EventBundle = state.data
    _header(bundle.event)
    if bundle.event.video:
        with st.expander("🎬 Resumen en vídeo"):
            st.video(youtube_embed(bundle.event.video))

    stats, timeline, lineups, tv = st.tabs(["Estadísticas", "Timeline", "Alineaciones", "TV"])
    with stats:
        _stats(bundle)
    with timeline:
        _timeline(bundle.timeline)
    with lineups:
        _lineups(bundle.lineup, bundle.event)
    with tv:
        _tv(bundle.tv)
