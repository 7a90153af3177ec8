from __future__ import annotations

from collections.abc import Sequence

from .models.schemas import CommonGame, Game, GameRecommendation

BASE_SCORE = 50.0
MAX_PLAYTIME_POINTS = 30.0
HOURS_PER_POINT = 10.0  # 1 балл за каждые 10 часов, потолок на 300 часах
GENRE_MATCH_POINTS = 5.0


def recommendation_score(game: Game, common_genres: set[str]) -> float:
    """База 50 + до 30 за время игры + 5 за каждый жанр, встречающийся среди общих игр."""
    score = BASE_SCORE
    hours = game.playtime_forever / 60
    score += min(MAX_PLAYTIME_POINTS, hours / HOURS_PER_POINT)
    if game.genres:
        score += sum(GENRE_MATCH_POINTS for genre in game.genres if genre in common_genres)
    return min(100.0, max(0.0, score))


def _recommend(game: Game, common_genres: set[str]) -> GameRecommendation:
    return GameRecommendation(
        app_id=game.app_id,
        name=game.name,
        recommendation_score=recommendation_score(game, common_genres),
        reason=f"{game.name} is a good match (playtime: {int(game.playtime_forever / 60 + 0.5)}h)",
        genres=list(game.genres or []),
        estimated_playtime=game.playtime_forever,
    )


def generate_recommendations(
    games1: Sequence[Game],
    games2: Sequence[Game],
    common_games: Sequence[CommonGame],
    min_playtime: int,
    max_recommendations: int,
) -> list[GameRecommendation]:
    """
    Игры, которые есть только у одного из пользователей, как рекомендации другому.
    Квота: первому пользователю cap // 2, второму остаток.
    """
    if max_recommendations <= 0:
        return []

    common_ids = {g.app_id for g in common_games}
    common_genres = {genre for g in common_games for genre in g.genres}

    only1 = [g for g in games1 if g.app_id not in common_ids and g.playtime_forever >= min_playtime]
    only2 = [g for g in games2 if g.app_id not in common_ids and g.playtime_forever >= min_playtime]

    quota1 = max_recommendations // 2
    quota2 = max_recommendations - quota1

    recs = [_recommend(g, common_genres) for g in only1[:quota1]]
    recs += [_recommend(g, common_genres) for g in only2[:quota2]]

    recs.sort(key=lambda r: r.recommendation_score, reverse=True)
    return recs[:max_recommendations]
