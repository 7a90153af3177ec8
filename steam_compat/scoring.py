from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from .affinity import (
    analyze_genre_compatibility,
    calculate_playtime_compatibility,
    find_common_games,
)
from .catalog import CoopCatalog, default_catalog
from .coop import CoopGameSuggester
from .errors import InsufficientDataError, InvalidInputError, PrivateProfileError
from .models.schemas import (
    CommonGame,
    CompatibilityResult,
    CoopGameFilter,
    CoopGameSuggestion,
    GameLibrary,
    GenreCompatibility,
    PlaytimeCompatibility,
)
from .recommendations import generate_recommendations
from .utils import get_env_int, get_logger

log = get_logger("steam-compat.scoring")

# ==== ВЕСА КОМПОНЕНТОВ ИТОГОВОЙ ОЦЕНКИ ====
DEFAULT_WEIGHTS: dict[str, float] = {
    "common_games": 0.35,  # доля общих игр + средний фактор
    "genre": 0.25,  # совпадение жанров (топ-5)
    "playtime": 0.25,  # корреляция и похожее время игры
    "coop": 0.15,  # co-op бонус
}

DEFAULT_MIN_PLAYTIME = 30  # минут; игры короче не участвуют в жанровом анализе
DEFAULT_MAX_RECOMMENDATIONS = 10
DEFAULT_MAX_COOP_SUGGESTIONS = 8

TOP_GENRES = 5
SIMILAR_GAMES_FOR_FULL_SCORE = 10
HIGH_COOP_SCORE = 80


@dataclass
class AnalysisConfig:
    weights: dict[str, float] = None
    min_playtime_for_analysis: int = DEFAULT_MIN_PLAYTIME
    max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS
    max_coop_suggestions: int = DEFAULT_MAX_COOP_SUGGESTIONS

    def __post_init__(self):
        if self.weights is None:
            self.weights = dict(DEFAULT_WEIGHTS)
        else:
            # частичные веса дополняем значениями по умолчанию
            self.weights = {**DEFAULT_WEIGHTS, **self.weights}
        unknown = set(self.weights) - set(DEFAULT_WEIGHTS)
        if unknown:
            raise ValueError(f"Unknown weight keys: {sorted(unknown)}")
        if sum(self.weights.values()) <= 0:
            raise ValueError("Weights must sum to a positive value")
        if self.min_playtime_for_analysis < 0:
            raise ValueError("min_playtime_for_analysis must be >= 0")
        if self.max_recommendations < 0:
            raise ValueError("max_recommendations must be >= 0")
        if self.max_coop_suggestions < 0:
            raise ValueError("max_coop_suggestions must be >= 0")

    @classmethod
    def from_env(cls) -> AnalysisConfig:
        """Пороги и лимиты из окружения (.env), веса — по умолчанию."""
        return cls(
            min_playtime_for_analysis=get_env_int("COMPAT_MIN_PLAYTIME", DEFAULT_MIN_PLAYTIME),
            max_recommendations=get_env_int("COMPAT_MAX_RECOMMENDATIONS", DEFAULT_MAX_RECOMMENDATIONS),
            max_coop_suggestions=get_env_int(
                "COMPAT_MAX_COOP_SUGGESTIONS", DEFAULT_MAX_COOP_SUGGESTIONS
            ),
        )


# ===== КОМПОНЕНТЫ ОЦЕНКИ (0..100) =====


def base_score(common_games: Sequence[CommonGame], total_games1: int, total_games2: int) -> float:
    if total_games1 == 0 or total_games2 == 0:
        return 0.0
    ratio = len(common_games) / ((total_games1 + total_games2) / 2)
    avg_factor = (
        sum(g.compatibility_factor for g in common_games) / len(common_games) if common_games else 0.0
    )
    return min(100.0, ratio * 100 * 0.7 + avg_factor * 100 * 0.3)


def genre_score(genres: Sequence[GenreCompatibility]) -> float:
    if not genres:
        return 0.0
    top = genres[:TOP_GENRES]
    return min(100.0, sum(g.compatibility_score for g in top) / len(top))


def playtime_score(playtime: PlaytimeCompatibility) -> float:
    correlation_score = (playtime.playtime_correlation + 1) * 50
    similar_ratio = playtime.similar_playtime_games / SIMILAR_GAMES_FOR_FULL_SCORE * 100
    return min(100.0, correlation_score * 0.6 + similar_ratio * 0.4)


def coop_bonus(suggestions: Sequence[CoopGameSuggestion]) -> float:
    if not suggestions:
        return 0.0
    owned = sum(1 for s in suggestions if s.both_own_game)
    high = sum(1 for s in suggestions if s.compatibility_score >= HIGH_COOP_SCORE)
    owned_bonus = min(50, owned * 15)
    quality_bonus = min(30, high * 10)
    variety_bonus = min(20, len(suggestions) * 3)
    return float(min(100, owned_bonus + quality_bonus + variety_bonus))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_libraries(library1: GameLibrary | None, library2: GameLibrary | None) -> None:
    """Проверка входа до любых вычислений."""
    if library1 is None or library2 is None:
        raise InvalidInputError("Both game libraries are required")
    if not library1.is_public:
        raise PrivateProfileError("User 1 profile is private")
    if not library2.is_public:
        raise PrivateProfileError("User 2 profile is private")
    if not library1.games and not library2.games:
        raise InsufficientDataError("Both users have empty game libraries")


class CompatibilityAnalyzer:
    """
    Анализ совместимости двух библиотек.
    Каталог и co-op подборщик передаются явно; сам анализатор состояния не меняет.
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        suggester: CoopGameSuggester | None = None,
        catalog: CoopCatalog | None = None,
    ):
        self.config = config or AnalysisConfig()
        if suggester is not None:
            # каталог один на весь анализ: флаги is_coop_supported и co-op источники
            if catalog is not None and catalog is not suggester.catalog:
                raise ValueError("catalog must be the same object as suggester.catalog")
            self.catalog = suggester.catalog
            self.suggester = suggester
        else:
            self.catalog = catalog if catalog is not None else default_catalog()
            self.suggester = CoopGameSuggester(self.catalog, self.config.max_coop_suggestions)

    def analyze(
        self,
        library1: GameLibrary,
        library2: GameLibrary,
        user1_steam_id: str,
        user2_steam_id: str,
        coop_filter: CoopGameFilter | None = None,
    ) -> CompatibilityResult:
        validate_libraries(library1, library2)
        cfg = self.config
        games1, games2 = library1.games, library2.games

        common = find_common_games(games1, games2, cfg.min_playtime_for_analysis, self.catalog)
        genres = analyze_genre_compatibility(games1, games2, cfg.min_playtime_for_analysis)
        playtime = calculate_playtime_compatibility(common)
        recommendations = generate_recommendations(
            games1, games2, common, cfg.min_playtime_for_analysis, cfg.max_recommendations
        )
        coop = self.suggester.generate_suggestions(
            common, games1, games2, coop_filter, max_suggestions=cfg.max_coop_suggestions
        )
        log.debug(
            "Stages done: common=%d genres=%d recs=%d coop=%d",
            len(common),
            len(genres),
            len(recommendations),
            len(coop),
        )

        components = {
            "common_games": base_score(common, len(games1), len(games2)),
            "genre": genre_score(genres),
            "playtime": playtime_score(playtime),
            "coop": coop_bonus(coop),
        }
        weighted = sum(components[k] * cfg.weights[k] for k in DEFAULT_WEIGHTS)
        final = round_half_up(min(100.0, max(0.0, weighted)))

        log.info(
            "Compatibility %s vs %s: score=%d (common=%d)",
            user1_steam_id,
            user2_steam_id,
            final,
            len(common),
        )
        return CompatibilityResult(
            score=final,
            common_games=common,
            genre_compatibility=genres,
            playtime_compatibility=playtime,
            recommendations=recommendations,
            coop_suggestions=coop,
            analysis_date=datetime.now(UTC),
            user1_steam_id=user1_steam_id,
            user2_steam_id=user2_steam_id,
            components={k: round(v, 6) for k, v in components.items()},
        )


def build_analyzer(
    config: AnalysisConfig | None = None, catalog: CoopCatalog | None = None
) -> CompatibilityAnalyzer:
    """Точка сборки: конфиг -> каталог -> подборщик -> анализатор."""
    config = config or AnalysisConfig()
    if catalog is None:
        catalog = default_catalog()
    suggester = CoopGameSuggester(catalog, config.max_coop_suggestions)
    return CompatibilityAnalyzer(config=config, suggester=suggester, catalog=catalog)


def analyze(
    library1: GameLibrary,
    library2: GameLibrary,
    user1_steam_id: str,
    user2_steam_id: str,
    config: AnalysisConfig | None = None,
    coop_filter: CoopGameFilter | None = None,
) -> CompatibilityResult:
    return build_analyzer(config).analyze(
        library1, library2, user1_steam_id, user2_steam_id, coop_filter
    )


def is_coop_game(app_id: int, catalog: CoopCatalog | None = None) -> bool:
    if catalog is None:
        catalog = default_catalog()
    return catalog.get(app_id) is not None
