import copy

from src.worlds.validation import validate_worlds, validate_season


SEASON = {
    "year": 2023,
    "championTeam": "T1",
    "runnerUpTeam": "Weibo Gaming",
    "location": "Seoul",
    "score": "3-0",
    "keyPlayers": [],
    "highlightVideos": [],
}


def _doc(*seasons):
    return {"lastUpdated": "2024-01-01T00:00:00Z", "seasons": list(seasons)}


def test_accepts_well_formed_document():
    assert validate_worlds(_doc(SEASON, dict(SEASON, year=2022, championTeam="DRX")))


def test_accepts_empty_season_list():
    assert validate_worlds({"seasons": []})


def test_nested_player_and_video_shapes_are_not_checked():
    season = dict(SEASON, keyPlayers=[42, None, {"unexpected": True}], highlightVideos=["x"])

    assert validate_worlds(_doc(season))


def test_rejects_non_objects():
    for value in (None, [], "seasons", 3, True):
        assert not validate_worlds(value)


def test_rejects_missing_or_non_list_seasons():
    assert not validate_worlds({})
    assert not validate_worlds({"seasons": None})
    assert not validate_worlds({"seasons": {"2023": SEASON}})


def test_one_bad_season_rejects_everything():
    bad = dict(SEASON, year="2023")

    assert not validate_worlds(_doc(SEASON, bad))


def test_rejects_empty_champion():
    assert not validate_worlds(_doc(dict(SEASON, championTeam="")))


def test_allows_empty_runner_up():
    assert validate_worlds(_doc(dict(SEASON, runnerUpTeam="")))


def test_year_must_be_a_number():
    assert validate_season(dict(SEASON, year=2011.0))
    assert not validate_season(dict(SEASON, year=None))
    assert not validate_season(dict(SEASON, year=True))


def test_each_required_field_is_type_checked():
    wrong_values = {
        "championTeam": 7,
        "runnerUpTeam": None,
        "location": ["Seoul"],
        "score": 3,
        "keyPlayers": "Faker",
        "highlightVideos": {},
    }
    for field, value in wrong_values.items():
        season = copy.deepcopy(SEASON)
        season[field] = value
        assert not validate_season(season), field

        missing = copy.deepcopy(SEASON)
        del missing[field]
        assert not validate_season(missing), field


def test_non_object_season_is_rejected():
    assert not validate_worlds({"seasons": [None]})
    assert not validate_worlds({"seasons": ["2023"]})
