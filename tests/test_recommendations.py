import pytest

from conftest import make_game
from steam_compat.affinity import find_common_games
from steam_compat.recommendations import generate_recommendations, recommendation_score

THRESHOLD = 30


@pytest.fixture
def libraries(empty_catalog):
    games1 = [
        make_game(1, 100, ["RPG"], name="Alpha"),
        make_game(2, 20, name="Bravo"),
        make_game(3, 600, ["Action", "RPG"], name="Charlie"),
    ]
    games2 = [
        make_game(1, 100, ["RPG"], name="Alpha"),
        make_game(4, 300, ["Strategy"], name="Delta"),
        make_game(5, 60, [], name="Echo"),
    ]
    common = find_common_games(games1, games2, THRESHOLD, empty_catalog)
    return games1, games2, common


def test_recommendations_split_between_users(libraries):
    games1, games2, common = libraries

    recs = generate_recommendations(games1, games2, common, THRESHOLD, 3)

    assert [r.app_id for r in recs] == [3, 4, 5]
    assert [r.recommendation_score for r in recs] == pytest.approx([56.0, 50.5, 50.1])
    assert recs[0].reason == "Charlie is a good match (playtime: 10h)"
    assert recs[0].genres == ["Action", "RPG"]
    assert recs[0].estimated_playtime == 600


def test_recommendations_skip_common_and_unplayed(libraries):
    games1, games2, common = libraries

    ids = {r.app_id for r in generate_recommendations(games1, games2, common, THRESHOLD, 10)}

    assert 1 not in ids  # общая игра
    assert 2 not in ids  # ниже порога


def test_recommendations_odd_cap_favours_second_user(libraries):
    games1, games2, common = libraries

    recs = generate_recommendations(games1, games2, common, THRESHOLD, 1)

    assert [r.app_id for r in recs] == [4]


def test_recommendations_zero_cap(libraries):
    games1, games2, common = libraries
    assert generate_recommendations(games1, games2, common, THRESHOLD, 0) == []


def test_recommendations_never_exceed_cap():
    games1 = [make_game(i, 100) for i in range(1, 20)]
    games2 = [make_game(i, 100) for i in range(100, 120)]

    recs = generate_recommendations(games1, games2, [], THRESHOLD, 5)

    assert len(recs) == 5
    assert sum(1 for r in recs if r.app_id < 100) == 2


def test_recommendation_score_caps_playtime_points():
    assert recommendation_score(make_game(1, 30000), set()) == pytest.approx(80.0)


def test_recommendation_score_genre_points():
    game = make_game(1, 0, ["RPG", "Action", "Puzzle"])
    assert recommendation_score(game, {"RPG", "Action"}) == pytest.approx(60.0)


def test_recommendation_score_bounded():
    game = make_game(1, 60000, [f"G{i}" for i in range(10)])
    assert recommendation_score(game, {f"G{i}" for i in range(10)}) == 100.0
