from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from .data.coop_games import COOP_GAMES
from .models.schemas import CoopGameInfo, CoopType


class CoopCatalog(Protocol):
    """Источник co-op метаданных (только чтение)."""

    def get(self, app_id: int) -> CoopGameInfo | None: ...

    def all(self) -> list[CoopGameInfo]: ...

    def popular(self) -> list[CoopGameInfo]: ...

    def search_by_genres(self, genres: Iterable[str]) -> list[CoopGameInfo]: ...

    def by_type(self, coop_type: CoopType | str) -> list[CoopGameInfo]: ...


class InMemoryCoopCatalog:
    """Каталог поверх словаря app_id -> CoopGameInfo. Перебор по возрастанию app_id."""

    def __init__(self, entries: Iterable[CoopGameInfo | dict[str, Any]]):
        games: dict[int, CoopGameInfo] = {}
        for e in entries:
            info = e if isinstance(e, CoopGameInfo) else CoopGameInfo(**e)
            games[info.app_id] = info
        self._games = dict(sorted(games.items()))

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, app_id: object) -> bool:
        return app_id in self._games

    def get(self, app_id: int) -> CoopGameInfo | None:
        return self._games.get(app_id)

    def all(self) -> list[CoopGameInfo]:
        return list(self._games.values())

    def popular(self) -> list[CoopGameInfo]:
        return [g for g in self._games.values() if g.is_popular]

    def search_by_genres(self, genres: Iterable[str]) -> list[CoopGameInfo]:
        wanted = set(genres)
        return [g for g in self._games.values() if wanted.intersection(g.genres)]

    def by_type(self, coop_type: CoopType | str) -> list[CoopGameInfo]:
        """Игры указанного режима; 'both' подходит под любой запрос."""
        ct = CoopType(coop_type)
        return [g for g in self._games.values() if g.coop_type in (ct, CoopType.both)]


_default_catalog: InMemoryCoopCatalog | None = None


def default_catalog() -> InMemoryCoopCatalog:
    """Встроенный каталог, создаётся при первом обращении."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = InMemoryCoopCatalog(COOP_GAMES)
    return _default_catalog
