from __future__ import annotations

import math
from collections.abc import Sequence

from .catalog import CoopCatalog
from .models.schemas import CommonGame, Game, GenreCompatibility, PlaytimeCompatibility

# ==== Пороговые значения фактора совместимости ====
BOTH_UNPLAYED_FACTOR = 0.1
ONE_UNPLAYED_FACTOR = 0.4
SIMILARITY_WEIGHT = 0.7
PLAYTIME_BONUS_WEIGHT = 0.3
PLAYTIME_BONUS_CAP_MINUTES = 60 * 20  # 20 часов суммарно = максимальный бонус

# «похожая» игра: разница не больше 30% от большего времени
SIMILAR_PLAYTIME_RATIO = 0.3


def game_compatibility_factor(playtime1: int, playtime2: int, min_playtime: int) -> float:
    """
    Фактор совместимости по одной общей игре (0..1).
    Учитывает и близость времени игры, и абсолютную вовлечённость.
    """
    below1 = playtime1 < min_playtime
    below2 = playtime2 < min_playtime
    if below1 and below2:
        return BOTH_UNPLAYED_FACTOR
    if below1 or below2:
        return ONE_UNPLAYED_FACTOR

    hi = max(playtime1, playtime2)
    lo = min(playtime1, playtime2)
    if hi == 0:
        return BOTH_UNPLAYED_FACTOR

    similarity = lo / hi
    bonus = min(1.0, (playtime1 + playtime2) / PLAYTIME_BONUS_CAP_MINUTES)
    return min(1.0, similarity * SIMILARITY_WEIGHT + bonus * PLAYTIME_BONUS_WEIGHT)


def find_common_games(
    games1: Sequence[Game],
    games2: Sequence[Game],
    min_playtime: int,
    catalog: CoopCatalog,
) -> list[CommonGame]:
    """
    Пересечение библиотек по app_id. Время игры user1 всегда из первого списка.
    Сортировка по фактору (desc), при равенстве — порядок первого списка.
    """
    by_id = {g.app_id: g for g in games2}
    seen: set[int] = set()
    common: list[CommonGame] = []

    for g1 in games1:
        g2 = by_id.get(g1.app_id)
        if g2 is None or g1.app_id in seen:
            continue
        seen.add(g1.app_id)
        common.append(
            CommonGame(
                app_id=g1.app_id,
                name=g1.name,
                user1_playtime=g1.playtime_forever,
                user2_playtime=g2.playtime_forever,
                compatibility_factor=game_compatibility_factor(
                    g1.playtime_forever, g2.playtime_forever, min_playtime
                ),
                is_coop_supported=catalog.get(g1.app_id) is not None,
                genres=list(g1.genres or []),
            )
        )

    common.sort(key=lambda c: c.compatibility_factor, reverse=True)
    return common


def _genre_counts(games: Sequence[Game], min_playtime: int, order: dict[str, None]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for g in games:
        if not g.genres or g.playtime_forever < min_playtime:
            continue
        for genre in g.genres:
            counts[genre] = counts.get(genre, 0) + 1
            order.setdefault(genre, None)
    return counts


def analyze_genre_compatibility(
    games1: Sequence[Game], games2: Sequence[Game], min_playtime: int
) -> list[GenreCompatibility]:
    """Совместимость по жанрам: учитываем только игры, сыгранные не меньше порога."""
    # порядок жанров: по первому появлению
    all_genres: dict[str, None] = {}
    counts1 = _genre_counts(games1, min_playtime, all_genres)
    counts2 = _genre_counts(games2, min_playtime, all_genres)

    result: list[GenreCompatibility] = []
    for genre in all_genres:
        c1 = counts1.get(genre, 0)
        c2 = counts2.get(genre, 0)
        if c1 == 0 and c2 == 0:
            continue
        common = min(c1, c2)
        hi = max(c1, c2)
        result.append(
            GenreCompatibility(
                genre=genre,
                user1_count=c1,
                user2_count=c2,
                common_count=common,
                compatibility_score=(common / hi) * 100 if hi > 0 else 0.0,
            )
        )

    result.sort(key=lambda g: g.compatibility_score, reverse=True)
    return result


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Коэффициент корреляции Пирсона; 0 при нулевой дисперсии или пустых данных."""
    if len(x) != len(y) or not x:
        return 0.0

    n = len(x)
    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(a * b for a, b in zip(x, y))
    sum_x2 = sum(a * a for a in x)
    sum_y2 = sum(b * b for b in y)

    numerator = n * sum_xy - sum_x * sum_y
    variance = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if variance <= 0:
        return 0.0
    denominator = math.sqrt(variance)
    if denominator == 0:
        return 0.0
    # clamp: погрешность float может дать 1.0000000000000002
    return max(-1.0, min(1.0, numerator / denominator))


def calculate_playtime_compatibility(common_games: Sequence[CommonGame]) -> PlaytimeCompatibility:
    if not common_games:
        return PlaytimeCompatibility()

    total_difference = 0
    total_playtime = 0
    similar = 0
    playtimes1: list[int] = []
    playtimes2: list[int] = []

    for g in common_games:
        difference = abs(g.user1_playtime - g.user2_playtime)
        total_difference += difference
        total_playtime += g.user1_playtime + g.user2_playtime
        playtimes1.append(g.user1_playtime)
        playtimes2.append(g.user2_playtime)

        hi = max(g.user1_playtime, g.user2_playtime)
        if hi > 0 and difference / hi <= SIMILAR_PLAYTIME_RATIO:
            similar += 1

    return PlaytimeCompatibility(
        average_playtime_difference=total_difference / len(common_games),
        playtime_correlation=pearson_correlation(playtimes1, playtimes2),
        similar_playtime_games=similar,
        total_common_playtime=total_playtime,
    )
