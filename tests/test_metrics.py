import math

import pandas as pd

from common.metrics import (Goal, paired_stats, parse_cards, parse_goals, split_lineup,
                            stat_share, timeline_icon, to_int)
from common.utils import (filter_by_name, filter_by_value, first_of, format_date, format_social_link,
                          format_time, or_na, unique_values)


def test_parse_goals_two_scorers():
    assert parse_goals("12:Messi;45:Ronaldo") == [Goal("12", "Messi"), Goal("45", "Ronaldo")]


def test_parse_goals_empty_inputs():
    assert parse_goals("") == []
    assert parse_goals(None) == []
    assert parse_goals(float("nan")) == []


def test_parse_goals_trailing_separator_and_missing_scorer():
    assert parse_goals("33:;") == [Goal("33", "")]


def test_parse_cards():
    assert parse_cards("10:Ramos;80:Busquets") == ["10:Ramos", "80:Busquets"]
    assert parse_cards(None) == []


def test_to_int_and_stat_share():
    assert to_int("7 (2)") == 7
    assert to_int("") == 0
    assert stat_share("3", "1") == 75.0
    assert stat_share("0", "0") == 0.0
    assert stat_share(None, "") == 0.0


def test_stat_share_stays_within_percent_range():
    assert stat_share("-3", "5") == 0.0
    assert stat_share("4", "-1") == 100.0
    assert to_int("-5") == -5


def test_paired_stats_defaults_missing_to_zero():
    df = paired_stats({"intHomeShots": "10", "intAwayShots": "5"})
    shots = df.set_index("Stat").loc["Tiros totales"]
    assert shots["Home"] == "10" and shots["Away"] == "5"
    assert math.isclose(shots["HomeShare"], 100 * 10 / 15)
    corners = df.set_index("Stat").loc["Córners"]
    assert corners["Home"] == "0" and corners["HomeShare"] == 0.0
    assert not df.set_index("Stat").loc["Tarjetas rojas", "HasBar"]


def test_split_lineup_groups_by_side_and_role():
    lineup = pd.DataFrame([
        {"strPlayer": "A", "strHome": "1", "strSubstitute": "0"},
        {"strPlayer": "B", "strHome": "1", "strSubstitute": "1"},
        {"strPlayer": "C", "strHome": "0", "strSubstitute": "0"},
    ])
    groups = split_lineup(lineup)
    assert groups[("home", "starters")]["strPlayer"].tolist() == ["A"]
    assert groups[("home", "subs")]["strPlayer"].tolist() == ["B"]
    assert groups[("away", "starters")]["strPlayer"].tolist() == ["C"]
    assert groups[("away", "subs")].empty


def test_timeline_icon():
    assert timeline_icon("Goal") == "⚽"
    assert timeline_icon("subst") == "⏱️"


def test_format_date_and_time():
    assert format_date("2024-05-12") == "12/05/2024"
    assert format_date("") == "N/A"
    assert format_date("not a date") == "not a date"
    assert format_time("20:00:00") == "20:00"
    assert format_time(None) == "N/A"


def test_fallback_helpers():
    assert or_na("") == "N/A"
    assert first_of("", None, "b.png", default="x") == "b.png"
    assert first_of("", default="x") == "x"
    assert format_social_link("www.realmadrid.com") == "https://www.realmadrid.com"
    assert format_social_link("http://a.b") == "http://a.b"


def test_name_filter_and_position_intersection():
    players = pd.DataFrame({
        "strPlayer": ["Luka Modric", "Lucas Vazquez", "Vinicius Junior", "Thibaut Courtois"],
        "strPosition": ["Midfielder", "Defender", "Forward", "Goalkeeper"],
    })
    by_name = filter_by_name(players, "LUC", "strPlayer")
    assert len(by_name) == 1
    by_name = filter_by_name(players, "u", "strPlayer")
    assert len(by_name) == 4
    both = filter_by_value(by_name, "Defender", "strPosition")
    assert both["strPlayer"].tolist() == ["Lucas Vazquez"]
    assert len(filter_by_value(players, None, "strPosition")) == 4


def test_unique_values_keeps_first_seen_order():
    df = pd.DataFrame({"strPosition": ["Forward", "", "Defender", "Forward"]})
    assert unique_values(df, "strPosition") == ["Forward", "Defender"]
