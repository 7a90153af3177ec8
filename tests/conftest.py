import pytest

from steam_compat.catalog import InMemoryCoopCatalog
from steam_compat.models.schemas import Game, GameLibrary


def make_game(app_id, playtime=0, genres=None, name=None):
    return Game(app_id=app_id, name=name or f"Game {app_id}", playtime_forever=playtime, genres=genres)


def make_library(*games, is_public=True):
    return GameLibrary(games=list(games), total_count=len(games), is_public=is_public)


@pytest.fixture
def small_catalog():
    return InMemoryCoopCatalog(
        [
            {
                "app_id": 1,
                "name": "Duo Puzzle",
                "coop_type": "online",
                "max_players": 2,
                "genres": ["Puzzle", "Co-op"],
                "is_popular": True,
            },
            {
                "app_id": 2,
                "name": "Zombie Squad",
                "coop_type": "online",
                "max_players": 4,
                "genres": ["Action", "Zombies"],
                "is_popular": True,
            },
            {
                "app_id": 3,
                "name": "Farm Friends",
                "coop_type": "both",
                "max_players": 4,
                "genres": ["Simulation", "Farming"],
                "is_popular": False,
            },
            {
                "app_id": 4,
                "name": "Party Night",
                "coop_type": "local",
                "max_players": 8,
                "genres": ["Party"],
                "is_popular": True,
            },
        ]
    )


@pytest.fixture
def empty_catalog():
    return InMemoryCoopCatalog([])
