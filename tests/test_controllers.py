import pytest

from common.constants import LEAGUES_BY_KEY
from common.errors import MissingFieldError, NotFoundError, SportsDataError
from common.fetch import run_primary
from controllers.data_controller import (load_past_matches, load_players, load_teams,
                                         search_players)
from controllers.detail_controller import fold_stats, load_event, load_player, load_team
from controllers.stats_controller import compute_event_stats
from sections.players import ALL_POSITIONS, filter_players

LA_LIGA = LEAGUES_BY_KEY["laLiga"]


def _match(i, **extra):
    raw = {"idEvent": str(i), "strEvent": f"Match {i}", "strHomeTeam": "A", "strAwayTeam": "B"}
    raw.update(extra)
    return raw


def test_load_teams_badge_fallback(fake_api):
    api = fake_api({"search_all_teams.php": {"teams": [
        {"idTeam": "133738", "strTeam": "Real Madrid", "strBadge": "rm.png"},
        {"idTeam": "133739", "strTeam": "Barcelona"},
    ]}})
    df = load_teams(LA_LIGA)
    assert df["Badge"].tolist()[0] == "rm.png"
    assert df["Badge"].tolist()[1].startswith("https://placehold.co/")
    assert api.calls == [("search_all_teams.php", {"l": "Spanish La Liga"})]


def test_null_field_is_an_empty_collection(fake_api):
    fake_api({"search_all_teams.php": {"teams": None}})
    state = run_primary(load_teams, LA_LIGA)
    assert not state.is_error
    assert state.is_empty


def test_missing_field_is_an_error(fake_api):
    fake_api({"search_all_teams.php": {"unexpected": []}})
    with pytest.raises(MissingFieldError):
        load_teams(LA_LIGA)
    state = run_primary(load_teams, LA_LIGA)
    assert state.is_error
    assert state.message == "Error al cargar equipos de Spanish La Liga"


def test_past_matches_are_sliced_and_labelled(fake_api):
    events = [_match(i) for i in range(15)] + [_match(99, strEvent=None)]
    events[0] = _match(0, strEvent="", strHomeTeam="Real Madrid", strAwayTeam="Barcelona")
    fake_api({"eventspastleague.php": {"events": events}})
    df = load_past_matches(LA_LIGA, limit=10)
    assert len(df) == 10
    assert df["Label"].iloc[0] == "Real Madrid vs Barcelona"
    assert df["Label"].iloc[1] == "Match 1"


def test_players_filters_intersect(fake_api):
    fake_api({"lookup_all_players.php": {"player": [
        {"idPlayer": "1", "strPlayer": "Luka Modric", "strPosition": "Midfielder"},
        {"idPlayer": "2", "strPlayer": "Lucas Vazquez", "strPosition": "Defender"},
        {"idPlayer": "3", "strPlayer": "Lucas Silva", "strPosition": "Midfielder"},
        {"idPlayer": "4", "strPlayer": "Thibaut Courtois", "strPosition": "Goalkeeper"},
    ]}})
    players = load_players("133738", "Real Madrid")
    assert len(filter_players(players, "lucas", ALL_POSITIONS)) == 2
    assert filter_players(players, "lucas", "Midfielder")["idPlayer"].tolist() == ["3"]
    assert len(filter_players(players, "", "Midfielder")) == 2


def test_search_players_failure(fake_api):
    fake_api({})
    with pytest.raises(SportsDataError):
        search_players("messi")


def test_load_team_not_found(fake_api):
    fake_api({"lookupteam.php": {"teams": None}})
    state = run_primary(load_team, "1")
    assert state.is_error
    assert state.message == "No se encontraron detalles para este equipo"
    with pytest.raises(NotFoundError):
        load_team("1")


def test_load_team_fallbacks(fake_api):
    fake_api({"lookupteam.php": {"teams": [{
        "idTeam": "133738", "strTeam": "Real Madrid", "strTeamBadge": "b.png",
        "strDescriptionEN": "English", "strTeamJersey": "kit.png", "strWebsite": "www.realmadrid.com",
    }]}})
    team = load_team("133738")
    assert team.badge == "b.png"
    assert team.description == "English"
    assert team.kit == "kit.png"
    assert team.socials["Web"] == "www.realmadrid.com"
    assert team.socials["Twitter"] == ""


def test_player_enrichment_failures_degrade_to_empty(fake_api):
    fake_api({
        "lookupplayer.php": {"players": [{"idPlayer": "34146370", "strPlayer": "Jude Bellingham"}]},
        "lookuphonours.php": {"honours": [{"strHonour": "LaLiga", "strSeason": "2023-2024"}]},
        "lookupformerteams.php": ConnectionError("boom"),
        # lookupcontracts.php missing -> SportsDataError
    })
    bundle = load_player("34146370")
    assert bundle.player.name == "Jude Bellingham"
    assert bundle.honours["strHonour"].tolist() == ["LaLiga"]
    assert bundle.former_teams.empty
    assert bundle.contracts.empty


def test_player_primary_failure_blocks(fake_api):
    fake_api({"lookuphonours.php": {"honours": []}})
    state = run_primary(load_player, "1")
    assert state.is_error
    assert state.message == "Error al cargar detalles del jugador"


def test_event_with_only_primary(fake_api):
    fake_api({"lookupevent.php": {"events": [{
        "idEvent": "1", "strHomeTeam": "Real Madrid", "strAwayTeam": "Barcelona",
    }]}})
    bundle = load_event("1")
    assert bundle.event.name == "Real Madrid vs Barcelona"
    assert bundle.lineup.empty and bundle.timeline.empty and bundle.tv.empty
    assert bundle.stats is None
    comparison, formations = compute_event_stats(bundle.stats, bundle.event)
    assert comparison.empty and formations == {}


def test_event_stats_rows_are_folded(fake_api):
    fake_api({
        "lookupevent.php": {"events": [{"idEvent": "1", "strHomeTeam": "A", "strAwayTeam": "B"}]},
        "lookupeventstats.php": {"eventstats": [
            {"strStat": "Total Shots", "intHome": "12", "intAway": "4"},
            {"strStat": "Corner Kicks", "intHome": "5", "intAway": "5"},
        ]},
    })
    bundle = load_event("1")
    comparison, formations = compute_event_stats(bundle.stats, bundle.event)
    shots = comparison.set_index("Stat").loc["Tiros totales"]
    assert shots["HomeValue"] == 12 and shots["AwayValue"] == 4
    assert shots["HomeShare"] == 75.0
    assert formations["A"]["Formación"] == "N/A"


def test_fold_stats_flat_record():
    stats = fold_stats([{"intHomeShots": "3", "strHomeFormation": "4-3-3"}])
    assert stats.get("intHomeShots") == "3"
    assert stats.get("strHomeFormation") == "4-3-3"
    assert fold_stats([]) is None
