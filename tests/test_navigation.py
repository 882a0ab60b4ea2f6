import pytest

from controllers.navigation import NAV_KEY, Navigator, is_enabled, mount_key, reduce
from models.match_model import event_label
from models.navigation import (BackRequested, EventSelected, NavState, PlayerTeamSelected,
                               Selection, Tab, TabRequested, TeamSelected)


def test_initial_state_only_reaches_list_tabs():
    state = NavState()
    assert state.active_tab is Tab.TEAMS
    assert not is_enabled(state, Tab.PLAYERS)
    assert not is_enabled(state, Tab.TEAM_DETAILS)
    assert not is_enabled(state, Tab.EVENT_DETAILS)
    assert is_enabled(state, Tab.SEARCH)


def test_team_selected_opens_players():
    state = reduce(NavState(), TeamSelected("133738", "Real Madrid"))
    assert state.active_tab is Tab.PLAYERS
    assert state.selected_team == Selection(id="133738", name="Real Madrid")


def test_player_team_selected_behaves_like_team_selected():
    a = reduce(NavState(), TeamSelected("133738", "Real Madrid"))
    b = reduce(NavState(), PlayerTeamSelected("133738", "Real Madrid"))
    assert a == b


def test_event_selected_uses_computed_label():
    raw = {"idEvent": "999", "strEvent": "", "strHomeTeam": "Real Madrid", "strAwayTeam": "Barcelona"}
    label = event_label(raw)
    assert label == "Real Madrid vs Barcelona"
    state = reduce(NavState(), EventSelected(raw["idEvent"], label))
    assert state.active_tab is Tab.EVENT_DETAILS
    assert state.selected_event == Selection("999", "Real Madrid vs Barcelona")


def test_event_label_prefers_str_event():
    assert event_label({"strEvent": "Clasico", "strHomeTeam": "A", "strAwayTeam": "B"}) == "Clasico"


def test_disabled_or_current_tab_request_is_a_noop():
    state = NavState()
    assert reduce(state, TabRequested(Tab.PLAYERS)) is state
    assert reduce(state, TabRequested(Tab.TEAMS)) is state


def test_back_keeps_selection_and_uses_fixed_target():
    state = reduce(NavState(), EventSelected("1", "A vs B"))
    back = reduce(state, BackRequested(Tab.EVENT_DETAILS))
    assert back.active_tab is Tab.MATCHES
    assert back.selected_event == Selection("1", "A vs B")

    state = reduce(reduce(NavState(), TeamSelected("7", "X")), TabRequested(Tab.TEAM_DETAILS))
    assert reduce(state, BackRequested(Tab.TEAM_DETAILS)).active_tab is Tab.PLAYERS
    assert reduce(state, BackRequested(Tab.TEAMS)) is state


def test_every_transition_gets_a_new_mount_key():
    first = reduce(NavState(), TeamSelected("1", "A"))
    again = reduce(first, TeamSelected("1", "A"))
    assert mount_key(first, Tab.PLAYERS) != mount_key(again, Tab.PLAYERS)


def test_unknown_event_raises():
    with pytest.raises(TypeError):
        reduce(NavState(), object())


def test_navigator_stores_state():
    store = {}
    nav = Navigator(store)
    nav.dispatch(TeamSelected("133738", "Real Madrid"))
    assert store[NAV_KEY].active_tab is Tab.PLAYERS
    assert nav.is_enabled(Tab.TEAM_DETAILS)
    assert nav.mount_key(Tab.PLAYERS)[2] == "133738"
