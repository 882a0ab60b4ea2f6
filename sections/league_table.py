"""
League table section.

Serves the fixed example standings unless `USE_LIVE_TABLE_DATA` is on, in
which case the live season table is tried first (see
`controllers.table_controller`).
"""

from __future__ import annotations
from functools import partial
from typing import Optional

import pandas as pd
import streamlit as st

from common.config import get_settings
from common.constants import LEAGUES, League
from common.fetch import FetchState, MountedState
from common.ui import league_tabs
from controllers.navigation import Navigator
from controllers.table_controller import example_table, load_table
from models.navigation import Tab

EMPTY_MESSAGE = "No se encontraron datos de clasificación"


def _table(league: League, table: pd.DataFrame):
    st.dataframe(
        table.drop(columns=["teamid"]),
        hide_index=True,
        use_container_width=True,
        column_config={
            "Pos": st.column_config.NumberColumn("#", width="small"),
            "Pts": st.column_config.NumberColumn("Pts", width="small"),
        },
    )


def render(nav: Optional[Navigator] = None, use_live: Optional[bool] = None):
    st.header("Clasificación")
    live = get_settings().use_live_table_data if use_live is None else use_live
    key = nav.mount_key(Tab.TABLE) if nav is not None else "standalone"
    mounted = MountedState(st.session_state, "table", key)

    if not live:
        st.caption("Datos de ejemplo")
        for lg in LEAGUES:
            if lg.key not in mounted:
                mounted.commit(lg.key, FetchState.ready(example_table(lg)))

    league_tabs(mounted, partial(load_table, use_live=live), _table, EMPTY_MESSAGE)
