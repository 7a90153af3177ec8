from __future__ import annotations

from typing import Any

import requests

from ..errors import (
    INVALID_RESPONSE,
    INVALID_STEAM_ID,
    MISSING_API_KEY,
    NETWORK_ERROR,
    TIMEOUT,
    VANITY_URL_NOT_FOUND,
    SteamApiError,
    error_code_for_status,
)
from ..models.schemas import Game, GameLibrary, SteamUser
from ..steam_utils import (
    app_icon_url,
    extract_custom_url,
    extract_steam_id_from_url,
    is_valid_steam_id,
    is_vanity_name,
)
from ..utils import get_logger
from .base_client import DEFAULT_TIMEOUT, BaseClient
from .cache import TTLCache

log = get_logger("steam-compat.steam")

STEAM_API_BASE = "https://api.steampowered.com"
GET_OWNED_GAMES = "/IPlayerService/GetOwnedGames/v0001/"
GET_PLAYER_SUMMARIES = "/ISteamUser/GetPlayerSummaries/v0002/"
RESOLVE_VANITY_URL = "/ISteamUser/ResolveVanityURL/v0001/"
SERVER_INFO = "/ISteamWebAPIUtil/GetServerInfo/v0001/"

GAME_LIBRARY_TTL = 10 * 60
USER_PROFILE_TTL = 5 * 60


class SteamClient(BaseClient):
    """
    Клиент Steam Web API: библиотеки, профили, resolve кастомных ссылок.
    Ретраи в BaseClient, свой TTLCache на каждый тип запроса.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = STEAM_API_BASE,
        user_agent: str | None = "SteamCompat/1.0",
        timeout: int = DEFAULT_TIMEOUT,
        library_cache: TTLCache | None = None,
        profile_cache: TTLCache | None = None,
    ):
        if not api_key:
            raise SteamApiError(MISSING_API_KEY)
        super().__init__(user_agent=user_agent, timeout=timeout)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.library_cache = library_cache or TTLCache(GAME_LIBRARY_TTL)
        self.profile_cache = profile_cache or TTLCache(USER_PROFILE_TTL)

    # ---------- PING ----------
    def ping(self) -> dict[str, Any]:
        """Мини-проверка доступности API (ping)."""
        try:
            r = self.get(f"{self.base_url}{SERVER_INFO}")
            return {"status": r.status_code, "bytes": len(r.content)}
        except requests.RequestException as e:
            return {"error": str(e)}

    # ---------- НИЗКИЙ УРОВЕНЬ ----------
    def _call(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        query = {"key": self.api_key, "format": "json", **params}
        try:
            r = self.get(f"{self.base_url}{endpoint}", params=query)
        except requests.Timeout as e:
            raise SteamApiError(TIMEOUT, str(e)) from e
        except requests.ConnectionError as e:
            raise SteamApiError(NETWORK_ERROR, str(e)) from e

        if r.status_code >= 400:
            code = error_code_for_status(r.status_code)
            log.error("Steam API %s failed: status=%s code=%s", endpoint, r.status_code, code)
            raise SteamApiError(code, status=r.status_code)

        try:
            payload = r.json()
        except ValueError as e:
            raise SteamApiError(INVALID_RESPONSE, "Response is not valid JSON") from e
        if not isinstance(payload, dict) or not isinstance(payload.get("response"), dict):
            raise SteamApiError(INVALID_RESPONSE)
        return payload["response"]

    # ---------- БИБЛИОТЕКА ----------
    def get_owned_games(
        self,
        steam_id: str,
        include_appinfo: bool = True,
        include_played_free_games: bool = True,
    ) -> GameLibrary:
        if not is_valid_steam_id(steam_id):
            raise SteamApiError(INVALID_STEAM_ID, f"Invalid Steam ID: {steam_id!r}")

        key = {"owned_games": steam_id, "appinfo": include_appinfo, "free": include_played_free_games}
        cached = self.library_cache.get(key)
        if cached is not None:
            log.debug("Library cache hit: %s", steam_id)
            return cached

        data = self._call(
            GET_OWNED_GAMES,
            {
                "steamid": steam_id,
                "include_appinfo": int(include_appinfo),
                "include_played_free_games": int(include_played_free_games),
            },
        )
        library = parse_owned_games(data)
        self.library_cache.set(key, library)
        return library

    # ---------- ПРОФИЛИ ----------
    def get_player_summaries(self, steam_ids: list[str]) -> list[SteamUser]:
        key = {"summaries": sorted(steam_ids)}
        cached = self.profile_cache.get(key)
        if cached is not None:
            return cached

        data = self._call(GET_PLAYER_SUMMARIES, {"steamids": ",".join(steam_ids)})
        players = data.get("players")
        if not isinstance(players, list):
            raise SteamApiError(INVALID_RESPONSE)
        users = [
            SteamUser(
                steam_id=p["steamid"],
                persona_name=p.get("personaname", ""),
                avatar_url=p.get("avatarfull", ""),
                profile_url=p.get("profileurl", ""),
                community_visibility_state=p.get("communityvisibilitystate", 1),
            )
            for p in players
        ]
        self.profile_cache.set(key, users)
        return users

    # ---------- STEAM ID ----------
    def resolve_vanity_url(self, vanity_url: str, url_type: int = 1) -> str:
        data = self._call(RESOLVE_VANITY_URL, {"vanityurl": vanity_url, "url_type": url_type})
        if data.get("success") != 1 or not data.get("steamid"):
            raise SteamApiError(VANITY_URL_NOT_FOUND, data.get("message") or None)
        return data["steamid"]

    def resolve_steam_id(self, text: str) -> str:
        """ID64, ссылка на профиль, ссылка /id/<name> или просто имя."""
        value = text.strip()
        if is_valid_steam_id(value):
            return value
        steam_id = extract_steam_id_from_url(value)
        if steam_id:
            return steam_id
        vanity = extract_custom_url(value)
        if vanity is None and is_vanity_name(value):
            vanity = value
        if vanity:
            return self.resolve_vanity_url(vanity)
        raise SteamApiError(INVALID_STEAM_ID, f"Invalid Steam ID or profile URL: {text!r}")


def parse_owned_games(data: dict[str, Any]) -> GameLibrary:
    """
    Ответ GetOwnedGames -> GameLibrary.
    Для приватного профиля Steam отдаёт пустой response: ни "games", ни "game_count".
    """
    raw_games = data.get("games")
    if raw_games is None:
        if "game_count" in data:
            return GameLibrary(games=[], total_count=0, is_public=True)
        return GameLibrary(games=[], total_count=0, is_public=False)

    games = [
        Game(
            app_id=g["appid"],
            name=g.get("name") or f"Game {g['appid']}",
            playtime_forever=g.get("playtime_forever", 0),
            playtime_2weeks=g.get("playtime_2weeks"),
            img_icon_url=app_icon_url(g["appid"], g.get("img_icon_url")),
        )
        for g in raw_games
    ]
    return GameLibrary(games=games, total_count=data.get("game_count", len(games)), is_public=True)
