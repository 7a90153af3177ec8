"""
Статическая база популярных co-op игр (ключ — Steam App ID).
Только чтение: подгружается в InMemoryCoopCatalog.
"""

from __future__ import annotations

from typing import Any


def _store(app_id: int, slug: str) -> str:
    return f"https://store.steampowered.com/app/{app_id}/{slug}/"


COOP_GAMES: list[dict[str, Any]] = [
    {
        "app_id": 620,
        "name": "Portal 2",
        "coop_type": "online",
        "max_players": 2,
        "description": "Co-op puzzle game: two players solve test chambers with portals",
        "steam_url": _store(620, "Portal_2"),
        "genres": ["Puzzle", "Co-op", "First-Person"],
        "is_popular": True,
    },
    {
        "app_id": 550,
        "name": "Left 4 Dead 2",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op zombie shooter: four survivors push through the horde",
        "steam_url": _store(550, "Left_4_Dead_2"),
        "genres": ["Action", "Co-op", "Zombies", "FPS"],
        "is_popular": True,
    },
    {
        "app_id": 105600,
        "name": "Terraria",
        "coop_type": "online",
        "max_players": 8,
        "description": "2D sandbox adventure: build, explore and fight bosses together",
        "steam_url": _store(105600, "Terraria"),
        "genres": ["Sandbox", "Adventure", "Co-op", "2D"],
        "is_popular": True,
    },
    {
        "app_id": 413150,
        "name": "Stardew Valley",
        "coop_type": "online",
        "max_players": 4,
        "description": "Farming sim: grow a farm with friends",
        "steam_url": _store(413150, "Stardew_Valley"),
        "genres": ["Simulation", "Farming", "Co-op", "Relaxing"],
        "is_popular": True,
    },
    {
        "app_id": 322330,
        "name": "Don't Starve Together",
        "coop_type": "online",
        "max_players": 6,
        "description": "Co-op survival: stay alive together in a harsh world",
        "steam_url": _store(322330, "Dont_Starve_Together"),
        "genres": ["Survival", "Co-op", "Indie", "Adventure"],
        "is_popular": True,
    },
    {
        "app_id": 728880,
        "name": "Overcooked! 2",
        "coop_type": "both",
        "max_players": 4,
        "description": "Chaotic co-op cooking: finish orders through teamwork",
        "steam_url": _store(728880, "Overcooked_2"),
        "genres": ["Co-op", "Party Game", "Local Co-Op", "Cooking"],
        "is_popular": True,
    },
    {
        "app_id": 1222700,
        "name": "A Way Out",
        "coop_type": "online",
        "max_players": 2,
        "description": "Co-op-only story adventure about a prison break",
        "steam_url": _store(1222700, "A_Way_Out"),
        "genres": ["Adventure", "Co-op", "Story Rich", "Action"],
        "is_popular": True,
    },
    {
        "app_id": 548430,
        "name": "Deep Rock Galactic",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op FPS: dwarf miners dig through hostile caves",
        "steam_url": _store(548430, "Deep_Rock_Galactic"),
        "genres": ["FPS", "Co-op", "Mining", "Dwarfs"],
        "is_popular": True,
    },
    {
        "app_id": 1426210,
        "name": "It Takes Two",
        "coop_type": "both",
        "max_players": 2,
        "description": "Co-op-only platforming adventure for two",
        "steam_url": _store(1426210, "It_Takes_Two"),
        "genres": ["Adventure", "Co-op", "Platformer", "Story Rich"],
        "is_popular": True,
    },
    {
        "app_id": 892970,
        "name": "Valheim",
        "coop_type": "online",
        "max_players": 10,
        "description": "Viking survival: explore, build and fight in co-op",
        "steam_url": _store(892970, "Valheim"),
        "genres": ["Survival", "Co-op", "Building", "Vikings"],
        "is_popular": True,
    },
    {
        "app_id": 945360,
        "name": "Among Us",
        "coop_type": "online",
        "max_players": 15,
        "description": "Social deduction party game aboard a spaceship",
        "steam_url": _store(945360, "Among_Us"),
        "genres": ["Party Game", "Multiplayer", "Social Deduction", "Space"],
        "is_popular": True,
    },
    {
        "app_id": 739630,
        "name": "Phasmophobia",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op ghost hunting horror investigation",
        "steam_url": _store(739630, "Phasmophobia"),
        "genres": ["Horror", "Co-op", "Ghosts", "Investigation"],
        "is_popular": True,
    },
    {
        "app_id": 632360,
        "name": "Risk of Rain 2",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op roguelike third-person shooter",
        "steam_url": _store(632360, "Risk_of_Rain_2"),
        "genres": ["Roguelike", "Co-op", "Third-Person Shooter", "3D"],
        "is_popular": True,
    },
    {
        "app_id": 268910,
        "name": "Cuphead",
        "coop_type": "local",
        "max_players": 2,
        "description": "Hard run-and-gun boss rush with local co-op",
        "steam_url": _store(268910, "Cuphead"),
        "genres": ["Action", "Local Co-Op", "Platformer", "Difficult"],
        "is_popular": True,
    },
    {
        "app_id": 996770,
        "name": "Moving Out",
        "coop_type": "both",
        "max_players": 4,
        "description": "Physics-based co-op moving company party game",
        "steam_url": _store(996770, "Moving_Out"),
        "genres": ["Co-op", "Party Game", "Physics", "Local Co-Op"],
        "is_popular": True,
    },
    {
        "app_id": 477160,
        "name": "Human Fall Flat",
        "coop_type": "both",
        "max_players": 8,
        "description": "Wobbly physics puzzle platformer with co-op",
        "steam_url": _store(477160, "Human_Fall_Flat"),
        "genres": ["Puzzle", "Co-op", "Physics", "Platformer"],
        "is_popular": True,
    },
    {
        "app_id": 648800,
        "name": "Raft",
        "coop_type": "online",
        "max_players": 10,
        "description": "Ocean survival: build a raft together",
        "steam_url": _store(648800, "Raft"),
        "genres": ["Survival", "Co-op", "Building", "Ocean"],
        "is_popular": True,
    },
    {
        "app_id": 1097150,
        "name": "Fall Guys",
        "coop_type": "online",
        "max_players": 60,
        "description": "Party battle royale of obstacle courses",
        "steam_url": _store(1097150, "Fall_Guys"),
        "genres": ["Party Game", "Battle Royale", "Multiplayer", "Colorful"],
        "is_popular": True,
    },
    {
        "app_id": 252950,
        "name": "Rocket League",
        "coop_type": "online",
        "max_players": 8,
        "description": "Car soccer in teams",
        "steam_url": _store(252950, "Rocket_League"),
        "genres": ["Sports", "Racing", "Multiplayer", "Soccer"],
        "is_popular": True,
    },
    {
        "app_id": 397540,
        "name": "Borderlands 3",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op looter shooter",
        "steam_url": _store(397540, "Borderlands_3"),
        "genres": ["FPS", "Co-op", "Loot", "Action RPG"],
        "is_popular": True,
    },
    {
        "app_id": 1085660,
        "name": "Destiny 2",
        "coop_type": "online",
        "max_players": 6,
        "description": "Sci-fi MMO shooter with fireteam activities",
        "steam_url": _store(1085660, "Destiny_2"),
        "genres": ["FPS", "MMO", "Co-op", "Sci-fi"],
        "is_popular": True,
    },
    {
        "app_id": 582010,
        "name": "Monster Hunter: World",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op hunting action RPG",
        "steam_url": _store(582010, "Monster_Hunter_World"),
        "genres": ["Action", "Co-op", "Hunting", "RPG"],
        "is_popular": True,
    },
    {
        "app_id": 218620,
        "name": "PAYDAY 2",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op heist shooter",
        "steam_url": _store(218620, "PAYDAY_2"),
        "genres": ["FPS", "Co-op", "Heist", "Crime"],
        "is_popular": True,
    },
    {
        "app_id": 239140,
        "name": "Dying Light",
        "coop_type": "online",
        "max_players": 4,
        "description": "Co-op zombie survival action with a day/night cycle",
        "steam_url": _store(239140, "Dying_Light"),
        "genres": ["Survival", "Co-op", "Zombies", "Parkour"],
        "is_popular": True,
    },
    {
        "app_id": 242760,
        "name": "The Forest",
        "coop_type": "online",
        "max_players": 8,
        "description": "Co-op survival horror in a forest",
        "steam_url": _store(242760, "The_Forest"),
        "genres": ["Survival", "Co-op", "Horror", "Building"],
        "is_popular": True,
    },
]
