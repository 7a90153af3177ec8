"""
Подбор co-op игр для пары пользователей.

Три источника кандидатов:
1. общие игры, которые есть в co-op каталоге (обе стороны уже владеют);
2. игры каталога, совпадающие по жанровым предпочтениям пары;
3. популярные игры каталога, которых ещё нет ни у кого.

Затем фильтр, дедупликация по app_id (остаётся лучший скор) и сортировка.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .catalog import CoopCatalog, default_catalog
from .models.schemas import (
    CommonGame,
    CoopGameFilter,
    CoopGameInfo,
    CoopGameStats,
    CoopGameSuggestion,
    CoopType,
    Game,
)
from .steam_utils import store_url

DEFAULT_MAX_SUGGESTIONS = 8

# ==== Эмпирические константы (настраиваемые) ====
OWNED_BASE_SCORE = 70.0
OWNED_FACTOR_WEIGHT = 25.0
OWNED_MAX_SCORE = 95.0

PREFERENCE_BASE_SCORE = 40.0
PREFERENCE_MATCH_WEIGHT = 50.0
PREFERENCE_MAX_SCORE = 90.0
PREFERENCE_MIN_MATCH = 0.3  # строго больше

POPULAR_SCORE = 60.0

COMMON_GENRE_WEIGHT = 3.0  # множитель фактора совместимости общей игры
PLAYED_MIN_MINUTES = 60  # строго больше часа
PLAYTIME_WEIGHT_DIVISOR = 300.0  # 5 часов = максимальный вес
PLAYTIME_WEIGHT_CAP = 2.0

COOP_TYPE_TEXT = {
    CoopType.local: "local",
    CoopType.online: "online",
    CoopType.both: "local & online",
}


def _suggestion(
    info: CoopGameInfo, score: float, reason: str, both_own: bool, name: str | None = None
) -> CoopGameSuggestion:
    return CoopGameSuggestion(
        app_id=info.app_id,
        name=name or info.name,
        coop_type=info.coop_type,
        max_players=info.max_players,
        description=info.description,
        steam_url=info.steam_url or store_url(info.app_id),
        compatibility_score=score,
        recommendation_reason=reason,
        both_own_game=both_own,
    )


def preferred_genre_weights(
    user1_games: Sequence[Game],
    user2_games: Sequence[Game],
    common_games: Sequence[CommonGame],
) -> dict[str, float]:
    """Веса жанров пары: общие игры весят factor*3, наигранные (>1ч) — до 2 за игру."""
    weights: dict[str, float] = {}

    for g in common_games:
        for genre in g.genres:
            weights[genre] = weights.get(genre, 0.0) + g.compatibility_factor * COMMON_GENRE_WEIGHT

    for g in (*user1_games, *user2_games):
        if not g.genres or g.playtime_forever <= PLAYED_MIN_MINUTES:
            continue
        w = min(PLAYTIME_WEIGHT_CAP, g.playtime_forever / PLAYTIME_WEIGHT_DIVISOR)
        for genre in g.genres:
            weights[genre] = weights.get(genre, 0.0) + w

    return weights


def genre_match_score(game_genres: Iterable[str], weights: dict[str, float]) -> float:
    """Доля суммарного веса предпочтений, которую покрывают жанры игры (0..1)."""
    genres = list(game_genres)
    if not genres or not weights:
        return 0.0
    total = sum(weights.values())
    if total == 0:
        return 0.0
    matched = sum(weights.get(genre, 0.0) for genre in genres)
    return matched / total


class CoopGameSuggester:
    """Собирает co-op предложения поверх переданного каталога."""

    def __init__(self, catalog: CoopCatalog, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS):
        self.catalog = catalog
        self.max_suggestions = max_suggestions

    def is_coop_game(self, app_id: int) -> bool:
        return self.catalog.get(app_id) is not None

    def generate_suggestions(
        self,
        common_games: Sequence[CommonGame],
        user1_games: Sequence[Game],
        user2_games: Sequence[Game],
        coop_filter: CoopGameFilter | None = None,
        max_suggestions: int | None = None,
    ) -> list[CoopGameSuggestion]:
        """max_suggestions перекрывает лимит подборщика (его задаёт AnalysisConfig)."""
        limit = self.max_suggestions if max_suggestions is None else max_suggestions
        suggestions: list[CoopGameSuggestion] = []
        suggestions += self.from_common_games(common_games)
        suggestions += self.from_preferences(user1_games, user2_games, common_games)
        suggestions += self.from_popular(
            user1_games, user2_games, exclude_ids={s.app_id for s in suggestions}
        )

        filtered = self.apply_filter(suggestions, coop_filter)
        return self.dedupe_and_sort(filtered)[: max(0, limit)]

    # ---------- источники ----------
    def from_common_games(self, common_games: Sequence[CommonGame]) -> list[CoopGameSuggestion]:
        out: list[CoopGameSuggestion] = []
        for g in common_games:
            info = self.catalog.get(g.app_id)
            if info is None:
                continue
            score = min(OWNED_MAX_SCORE, OWNED_BASE_SCORE + g.compatibility_factor * OWNED_FACTOR_WEIGHT)
            reason = f"A {COOP_TYPE_TEXT[info.coop_type]} co-op game you both already own"
            out.append(_suggestion(info, score, reason, both_own=True, name=g.name))
        return out

    def from_preferences(
        self,
        user1_games: Sequence[Game],
        user2_games: Sequence[Game],
        common_games: Sequence[CommonGame],
    ) -> list[CoopGameSuggestion]:
        owned = {g.app_id for g in user1_games} | {g.app_id for g in user2_games}
        weights = preferred_genre_weights(user1_games, user2_games, common_games)

        out: list[CoopGameSuggestion] = []
        for info in self.catalog.all():
            if info.app_id in owned:
                continue
            match = genre_match_score(info.genres, weights)
            if match <= PREFERENCE_MIN_MATCH:
                continue
            score = min(PREFERENCE_MAX_SCORE, PREFERENCE_BASE_SCORE + match * PREFERENCE_MATCH_WEIGHT)
            reason = f"A {COOP_TYPE_TEXT[info.coop_type]} co-op game that fits your shared taste"
            out.append(_suggestion(info, score, reason, both_own=False))
        return out

    def from_popular(
        self,
        user1_games: Sequence[Game],
        user2_games: Sequence[Game],
        exclude_ids: set[int],
    ) -> list[CoopGameSuggestion]:
        owned = {g.app_id for g in user1_games} | {g.app_id for g in user2_games}
        out: list[CoopGameSuggestion] = []
        for info in self.catalog.popular():
            if info.app_id in owned or info.app_id in exclude_ids:
                continue
            reason = f"A popular {COOP_TYPE_TEXT[info.coop_type]} co-op game"
            out.append(_suggestion(info, POPULAR_SCORE, reason, both_own=False))
        return out

    # ---------- фильтр / дедуп ----------
    def apply_filter(
        self, suggestions: Sequence[CoopGameSuggestion], coop_filter: CoopGameFilter | None
    ) -> list[CoopGameSuggestion]:
        if coop_filter is None:
            return list(suggestions)

        wanted_genres = set(coop_filter.genres)
        out: list[CoopGameSuggestion] = []
        for s in suggestions:
            if (
                coop_filter.coop_type is not None
                and s.coop_type != coop_filter.coop_type
                and s.coop_type != CoopType.both
            ):
                continue
            if coop_filter.max_players is not None and s.max_players < coop_filter.max_players:
                continue
            if wanted_genres:
                info = self.catalog.get(s.app_id)
                if info is None or not wanted_genres.intersection(info.genres):
                    continue
            if (
                coop_filter.min_compatibility_score is not None
                and s.compatibility_score < coop_filter.min_compatibility_score
            ):
                continue
            out.append(s)
        return out

    @staticmethod
    def dedupe_and_sort(suggestions: Sequence[CoopGameSuggestion]) -> list[CoopGameSuggestion]:
        best: dict[int, CoopGameSuggestion] = {}
        for s in suggestions:
            current = best.get(s.app_id)
            if current is None or s.compatibility_score > current.compatibility_score:
                best[s.app_id] = s
        return sorted(best.values(), key=lambda s: s.compatibility_score, reverse=True)

    # ---------- справочная статистика ----------
    def stats(self) -> CoopGameStats:
        return coop_game_stats(self.catalog)


def coop_game_stats(catalog: CoopCatalog | None = None) -> CoopGameStats:
    if catalog is None:
        catalog = default_catalog()
    games = catalog.all()
    if not games:
        return CoopGameStats()

    by_type = Counter(g.coop_type for g in games)
    genre_counts: Counter[str] = Counter()
    for g in games:
        genre_counts.update(g.genres)

    # при равенстве most_common сохраняет порядок первого появления
    return CoopGameStats(
        total_coop_games=len(games),
        local_coop_games=by_type[CoopType.local],
        online_coop_games=by_type[CoopType.online],
        both_coop_games=by_type[CoopType.both],
        average_max_players=sum(g.max_players for g in games) / len(games),
        popular_genres=[genre for genre, _ in genre_counts.most_common(5)],
    )
