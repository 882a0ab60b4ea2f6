import json

from streamlit.testing.v1 import AppTest

import controllers.table_controller as table_controller
from common.constants import LEAGUES, LEAGUES_BY_KEY
from common.config import load_settings
from controllers.table_controller import (EXAMPLE_PATH, TABLE_COLUMNS, example_table, live_table,
                                          load_table, table_frame)


def test_example_data_covers_every_league():
    with EXAMPLE_PATH.open(encoding="utf-8") as f:
        raw = json.load(f)
    for lg in LEAGUES:
        df = example_table(lg)
        assert list(df.columns) == TABLE_COLUMNS
        assert len(df) == len(raw[lg.key]) > 0
        assert df["Pos"].tolist() == list(range(1, len(df) + 1))


def test_example_la_liga_leader():
    df = example_table(LEAGUES_BY_KEY["laLiga"])
    top = df.iloc[0]
    assert top["Equipo"] == "Real Madrid"
    assert top["teamid"] == "133738"


def test_default_never_touches_the_network(fake_api):
    api = fake_api({})
    df = load_table(LEAGUES_BY_KEY["serieA"])
    assert not df.empty
    assert api.calls == []


def test_live_table_tries_older_seasons(fake_api):
    def by_season(params):
        if params["s"] == "2022-2023":
            return {"table": [{"strTeam": "Napoli", "idTeam": "1", "intPoints": "90"},
                              {"strTeam": "Lazio", "idTeam": "2", "intPoints": "74"}]}
        return {"table": None}

    api = fake_api({"lookuptable.php": by_season})
    df = live_table(LEAGUES_BY_KEY["serieA"])
    assert df["Equipo"].tolist() == ["Napoli", "Lazio"]
    assert df["Pts"].tolist() == [90, 74]
    assert [c[1]["s"] for c in api.calls] == ["2023-2024", "2022-2023"]


def test_live_table_falls_back_to_example_data(fake_api):
    fake_api({})
    league = LEAGUES_BY_KEY["premierLeague"]
    df = load_table(league, use_live=True)
    assert df.equals(example_table(league))


def test_table_frame_keeps_source_order():
    df = table_frame([{"name": "B", "total": 10}, {"name": "A", "total": 30}])
    assert df["Equipo"].tolist() == ["B", "A"]
    assert df["Pos"].tolist() == [1, 2]
    assert df["PJ"].tolist() == [0, 0]


def test_live_switch_from_env_and_secrets():
    assert load_settings(env={}, secrets={}).use_live_table_data is False
    assert load_settings(env={"USE_LIVE_TABLE_DATA": "true"}, secrets={}).use_live_table_data
    assert not load_settings(env={"USE_LIVE_TABLE_DATA": "true"},
                             secrets={"use_live_table_data": False}).use_live_table_data


def _table_app():
    from sections import league_table
    league_table.render(use_live=False)


def test_table_section_renders_example_data(monkeypatch):
    def no_network(*args, **kwargs):
        raise AssertionError("network used")

    monkeypatch.setattr(table_controller, "get_list", no_network)
    at = AppTest.from_function(_table_app).run()
    assert not at.exception
    assert len(at.tabs) == 3
    assert len(at.dataframe) == 3
    assert at.dataframe[0].value["Equipo"].iloc[0] == "Real Madrid"
