from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

# --- Базовые классификаторы ---


class CoopType(str, Enum):
    local = "local"
    online = "online"
    both = "both"


class _Snapshot(BaseModel):
    """Неизменяемый снимок: создаётся один раз, дальше только читается."""

    class Config:
        frozen = True
        extra = "ignore"


# --- Входные данные (приходят из Steam-клиента или JSON) ---


class Game(_Snapshot):
    app_id: int = Field(..., description="Steam App ID")
    name: str
    playtime_forever: int = Field(0, ge=0, description="Общее время в игре, минуты")
    playtime_2weeks: int | None = Field(default=None, ge=0, description="За последние 2 недели, минуты")
    img_icon_url: str | None = None
    genres: list[str] | None = None


class GameLibrary(_Snapshot):
    games: list[Game] = Field(default_factory=list)
    total_count: int = Field(0, ge=0)
    is_public: bool = True


class SteamUser(_Snapshot):
    steam_id: str
    persona_name: str
    avatar_url: str = ""
    profile_url: str = ""
    community_visibility_state: int = 1


# --- Результаты анализа ---


class CommonGame(_Snapshot):
    app_id: int
    name: str
    user1_playtime: int
    user2_playtime: int
    compatibility_factor: float = Field(..., ge=0, le=1)
    is_coop_supported: bool = False
    # жанры берём из копии первого пользователя
    genres: list[str] = Field(default_factory=list)


class GenreCompatibility(_Snapshot):
    genre: str
    user1_count: int
    user2_count: int
    common_count: int
    compatibility_score: float = Field(..., ge=0, le=100)


class PlaytimeCompatibility(_Snapshot):
    average_playtime_difference: float = 0.0
    playtime_correlation: float = Field(0.0, ge=-1, le=1)
    similar_playtime_games: int = 0
    total_common_playtime: int = 0


class GameRecommendation(_Snapshot):
    app_id: int
    name: str
    recommendation_score: float = Field(..., ge=0, le=100)
    reason: str
    genres: list[str] = Field(default_factory=list)
    estimated_playtime: int = 0


# --- Co-op ---


class CoopGameInfo(_Snapshot):
    app_id: int
    name: str
    coop_type: CoopType
    max_players: int = Field(..., ge=1)
    description: str = ""
    steam_url: str = ""
    genres: list[str] = Field(default_factory=list)
    is_popular: bool = False


class CoopGameSuggestion(_Snapshot):
    app_id: int
    name: str
    coop_type: CoopType
    max_players: int
    description: str = ""
    steam_url: str = ""
    compatibility_score: float = Field(..., ge=0, le=100)
    recommendation_reason: str = ""
    both_own_game: bool = False


class CoopGameFilter(_Snapshot):
    coop_type: CoopType | None = None
    # минимальное значение max_players у игры
    max_players: int | None = Field(default=None, ge=1)
    genres: list[str] = Field(default_factory=list)
    min_compatibility_score: float | None = Field(default=None, ge=0, le=100)


class CoopGameStats(_Snapshot):
    total_coop_games: int = 0
    local_coop_games: int = 0
    online_coop_games: int = 0
    both_coop_games: int = 0
    average_max_players: float = 0.0
    popular_genres: list[str] = Field(default_factory=list)


# --- Итог ---


class CompatibilityResult(_Snapshot):
    score: int = Field(..., ge=0, le=100)
    common_games: list[CommonGame] = Field(default_factory=list)
    genre_compatibility: list[GenreCompatibility] = Field(default_factory=list)
    playtime_compatibility: PlaytimeCompatibility
    recommendations: list[GameRecommendation] = Field(default_factory=list)
    coop_suggestions: list[CoopGameSuggestion] = Field(default_factory=list)
    analysis_date: datetime
    user1_steam_id: str
    user2_steam_id: str
    # компоненты (0..100) до умножения на веса
    components: dict[str, float] = Field(default_factory=dict)
