"""
Main application entry for the FútbolPro Explorer Streamlit app.

This module defines the single page users see when they open the app. It
handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - the navigation shell: header with the search button, the tab bar,
        and dispatching the active tab to its section under `sections/`.

Navigation state lives in `st.session_state` behind
`controllers.navigation.Navigator`; sections never switch tabs themselves,
they dispatch selection events and the shell renders whatever tab the
reducer lands on.

Run with:
    streamlit run main.py
"""

# Import libraries
import logging

import streamlit as st
from dotenv import load_dotenv

from common.config import get_settings
from common.constants import APP_TITLE
from common.ui import header, tab_bar
from controllers.navigation import Navigator
from models.navigation import Tab
from sections import (event_details, league_table, matches, players, search,
                      team_details, teams)

# Configure Streamlit page and load environment variables from `.env`.
st.set_page_config(page_title=APP_TITLE, page_icon="⚽", layout="wide")
load_dotenv(override=False)

SECTIONS = {
    Tab.TEAMS: teams.render,
    Tab.PLAYERS: players.render,
    Tab.TEAM_DETAILS: team_details.render,
    Tab.MATCHES: matches.render_past,
    Tab.UPCOMING: matches.render_upcoming,
    Tab.TABLE: league_table.render,
    Tab.SEARCH: search.render,
    Tab.EVENT_DETAILS: event_details.render,
}


def main():
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    nav = Navigator(st.session_state)

    header(nav)
    tab_bar(nav)
    st.divider()

    SECTIONS[nav.state.active_tab](nav)

    st.divider()
    st.caption("Datos proporcionados por TheSportsDB · FútbolPro Explorer")

if __name__ == "__main__":
    main()
