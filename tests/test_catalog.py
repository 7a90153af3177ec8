import pytest
from pydantic import ValidationError

from conftest import make_game, make_library
from steam_compat.catalog import InMemoryCoopCatalog, default_catalog
from steam_compat.data.coop_games import COOP_GAMES
from steam_compat.models.schemas import CoopGameInfo, CoopType
from steam_compat.scoring import analyze, is_coop_game


def test_lookup(small_catalog):
    assert len(small_catalog) == 4
    assert 2 in small_catalog
    assert small_catalog.get(2).name == "Zombie Squad"
    assert small_catalog.get(99) is None


def test_iterates_in_app_id_order():
    catalog = InMemoryCoopCatalog(
        [
            {"app_id": 30, "name": "C", "coop_type": "local", "max_players": 2, "is_popular": True},
            {"app_id": 10, "name": "A", "coop_type": "online", "max_players": 2, "is_popular": True},
            {"app_id": 20, "name": "B", "coop_type": "both", "max_players": 2, "genres": ["X"]},
        ]
    )

    assert [g.app_id for g in catalog.all()] == [10, 20, 30]
    assert [g.app_id for g in catalog.popular()] == [10, 30]
    assert [g.app_id for g in catalog.by_type("local")] == [20, 30]


def test_default_popular_order():
    popular = [g.app_id for g in default_catalog().popular()]
    assert popular[:8] == [550, 620, 105600, 218620, 239140, 242760, 252950, 268910]
    assert popular == sorted(popular)


def test_default_suggestions_follow_catalog_order():
    lib1 = make_library(make_game(1, 100))
    lib2 = make_library(make_game(2, 100))

    result = analyze(lib1, lib2, "a", "b")

    assert [s.app_id for s in result.coop_suggestions] == [
        550, 620, 105600, 218620, 239140, 242760, 252950, 268910
    ]


def test_search_by_genres(small_catalog):
    assert [g.app_id for g in small_catalog.search_by_genres(["Zombies", "Party"])] == [2, 4]
    assert small_catalog.search_by_genres([]) == []


def test_by_type_includes_both(small_catalog):
    assert [g.app_id for g in small_catalog.by_type("local")] == [3, 4]
    assert [g.app_id for g in small_catalog.by_type(CoopType.online)] == [1, 2, 3]


def test_accepts_models_and_dicts():
    info = CoopGameInfo(app_id=5, name="Model", coop_type="local", max_players=2)
    catalog = InMemoryCoopCatalog([info, {"app_id": 6, "name": "Dict", "coop_type": "both", "max_players": 3}])
    assert [g.app_id for g in catalog.all()] == [5, 6]


def test_rejects_invalid_entry():
    with pytest.raises(ValidationError):
        InMemoryCoopCatalog([{"app_id": 1, "name": "Bad", "coop_type": "split-screen", "max_players": 2}])


def test_default_catalog_contents():
    catalog = default_catalog()

    assert len(catalog) == len(COOP_GAMES) == 25
    assert catalog is default_catalog()
    portal = catalog.get(620)
    assert portal.name == "Portal 2"
    assert portal.coop_type == CoopType.online
    assert portal.steam_url.startswith("https://store.steampowered.com/app/620/")
    assert all(g.is_popular for g in catalog.all())


def test_is_coop_game():
    assert is_coop_game(620)
    assert not is_coop_game(1)


def test_is_coop_game_with_custom_catalog(small_catalog, empty_catalog):
    assert is_coop_game(1, small_catalog)
    assert not is_coop_game(620, empty_catalog)
