import threading

import pandas as pd

from common.constants import LEAGUES
from common.errors import SportsDataError
from common.fetch import FetchState, MountedState, fan_out, fetch_by_league, run_primary


def test_fetch_state_empty_detection():
    assert FetchState.ready([]).is_empty
    assert FetchState.ready(pd.DataFrame()).is_empty
    assert FetchState.ready(None).is_empty
    assert not FetchState.ready([1]).is_empty
    assert not FetchState.loading().is_empty
    assert FetchState.error("x").is_error


def test_run_primary_turns_errors_into_state():
    def boom():
        raise SportsDataError("Error al cargar")
    state = run_primary(boom)
    assert state.is_error and state.message == "Error al cargar"
    assert run_primary(lambda: [1, 2]).data == [1, 2]


def test_one_failing_league_does_not_affect_the_others():
    def loader(league):
        if league.key == "premierLeague":
            raise SportsDataError("Error al cargar partidos de la liga Premier League")
        return [league.key]

    results = dict(fetch_by_league(loader, LEAGUES))
    assert set(results) == {"laLiga", "premierLeague", "serieA"}
    assert results["laLiga"].data == ["laLiga"]
    assert results["serieA"].data == ["serieA"]
    assert results["premierLeague"].is_error


def test_leagues_are_yielded_as_they_settle():
    gate = threading.Event()

    def loader(league):
        if league.key == "laLiga":
            gate.wait(5)
        return league.key

    it = fetch_by_league(loader, LEAGUES)
    first = next(it)
    second = next(it)
    assert {first[0], second[0]} == {"premierLeague", "serieA"}
    gate.set()
    assert next(it)[0] == "laLiga"


def test_fan_out_never_fails():
    def broken():
        raise RuntimeError("network down")

    out = fan_out({
        "lineup": (lambda: ["a"], []),
        "tv": (broken, []),
        "stats": (broken, None),
    })
    assert out == {"lineup": ["a"], "tv": [], "stats": None}


def test_mounted_state_keeps_values_for_same_key():
    store = {}
    MountedState(store, "teams", ("teams", 1, None)).commit("laLiga", "data")
    again = MountedState(store, "teams", ("teams", 1, None))
    assert again.get("laLiga") == "data"


def test_mounted_state_resets_on_new_key_and_drops_stale_commits():
    store = {}
    old = MountedState(store, "players", ("players", 1, "133738"))
    new = MountedState(store, "players", ("players", 2, "133739"))
    assert old.commit("players", "stale") is False
    assert "players" not in new
    assert new.commit("players", "fresh")
    assert new.get("players") == "fresh"
