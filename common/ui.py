# common/ui.py
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from common.constants import APP_TITLE, LEAGUES, League
from common.fetch import FetchState, MountedState, fetch_by_league
from common.utils import format_social_link, placeholder
from controllers.navigation import TAB_LABELS, Navigator
from models.navigation import BackRequested, Tab, TabRequested

LOADING_TEXT = "⏳ Cargando..."

# Tabs shown in the bar, in order. Search is reached from the header button.
BAR_TABS = [Tab.TEAMS, Tab.PLAYERS, Tab.TEAM_DETAILS, Tab.MATCHES, Tab.UPCOMING, Tab.TABLE]


def header(nav: Navigator):
    left, right = st.columns([4, 1])
    with left:
        st.title(f"🛡️ {APP_TITLE}")
    with right:
        st.button(TAB_LABELS[Tab.SEARCH], key="header_search", use_container_width=True,
                  on_click=nav.dispatch, args=(TabRequested(Tab.SEARCH),))


def tab_bar(nav: Navigator):
    """One button per tab; unreachable tabs are rendered disabled."""
    cols = st.columns(len(BAR_TABS))
    active = nav.state.active_tab
    for col, tab in zip(cols, BAR_TABS):
        with col:
            st.button(
                TAB_LABELS[tab],
                key=f"tab_{tab.value}",
                type="primary" if tab is active else "secondary",
                disabled=not nav.is_enabled(tab),
                use_container_width=True,
                on_click=nav.dispatch,
                args=(TabRequested(tab),),
            )


def back_button(nav: Navigator, from_tab: Tab, label: str = "← Volver"):
    st.button(label, key=f"back_{from_tab.value}", on_click=nav.dispatch,
              args=(BackRequested(from_tab),))


def render_state(state: FetchState,
                 render: Callable[[Any], None],
                 empty_message: str,
                 container: Optional[Any] = None):
    """
    The same four-way branch for every fetchable collection:
    loading → progress text, error → alert, empty → message, data → `render`.
    """
    target = container if container is not None else st.container()
    with target.container():
        if state.is_loading:
            st.info(LOADING_TEXT)
        elif state.is_error:
            st.error(state.message)
        elif state.is_empty:
            st.info(empty_message)
        else:
            render(state.data)


def image(url: str, w: int, h: int, width: Optional[int] = None, caption: Optional[str] = None):
    st.image(url or placeholder(w, h), width=width or w, caption=caption)


def social_links(socials: Dict[str, str], empty_message: str = "No hay redes sociales disponibles"):
    links = [(name, format_social_link(url)) for name, url in socials.items() if url]
    if not links:
        st.caption(empty_message)
        return
    st.markdown("  |  ".join(f"[{name}]({href})" for name, href in links))


def labeled(label: str, value: str):
    st.markdown(f"**{label}:** {value}")


def league_tabs(mounted: MountedState,
                loader: Callable[[League], Any],
                render: Callable[[League, Any], None],
                empty_message: str,
                leagues=LEAGUES):
    """
    One tab per league, each with its own fetch state. Leagues not fetched
    yet in this mount are loaded in parallel and each tab is filled as soon
    as its own request settles.
    """
    tabs = st.tabs([lg.label for lg in leagues])
    slots = {}
    for tab, lg in zip(tabs, leagues):
        with tab:
            slots[lg.key] = st.empty()

    def _show(lg: League):
        state = mounted.get(lg.key, FetchState.loading())
        render_state(state, lambda data: render(lg, data), empty_message, container=slots[lg.key])

    for lg in leagues:
        _show(lg)

    pending = [lg for lg in leagues if lg.key not in mounted]
    if pending:
        by_key = {lg.key: lg for lg in pending}
        for key, state in fetch_by_league(loader, pending):
            if mounted.commit(key, state):
                _show(by_key[key])


def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
    default_index: Optional[int] = None,
    format_func: Callable[[Any], str] = str,
):
    """
    A selectbox that can start empty (placeholder) or preselect an item (default_index).
    Uses a hidden label to avoid duplicate text under the title.
    """
    return st.selectbox(
        label,
        options=options,
        index=default_index,            # None -> placeholder shown; int -> preselect
        placeholder=label,
        label_visibility="collapsed",
        key=key,
        format_func=format_func,
    )
