from __future__ import annotations

import re

STEAM_ID64_RE = re.compile(r"^[0-9]{17}$")
PROFILE_URL_RE = re.compile(r"/profiles/([0-9]{17})")
CUSTOM_URL_RE = re.compile(r"/id/([a-zA-Z0-9_-]+)")
VANITY_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

STORE_APP_URL = "https://store.steampowered.com/app/{app_id}/"
APP_ICON_URL = "https://media.steampowered.com/steamcommunity/public/images/apps/{app_id}/{icon}.jpg"


def is_valid_steam_id(steam_id: str) -> bool:
    """Steam ID64 — ровно 17 цифр."""
    return bool(STEAM_ID64_RE.fullmatch(steam_id))


def extract_steam_id_from_url(url: str) -> str | None:
    """ID64 из ссылки вида .../profiles/<id>; для кастомных ссылок None (нужен resolve)."""
    m = PROFILE_URL_RE.search(url)
    return m.group(1) if m else None


def extract_custom_url(url: str) -> str | None:
    m = CUSTOM_URL_RE.search(url)
    return m.group(1) if m else None


def is_vanity_name(text: str) -> bool:
    return bool(VANITY_NAME_RE.fullmatch(text))


def app_icon_url(app_id: int, icon_hash: str | None) -> str | None:
    if not icon_hash:
        return None
    return APP_ICON_URL.format(app_id=app_id, icon=icon_hash)


def store_url(app_id: int) -> str:
    return STORE_APP_URL.format(app_id=app_id)


def format_playtime(minutes: int) -> str:
    """45 -> '45m', 200 -> '3h 20m', 3180 -> '2d 5h'."""
    if minutes < 60:
        return f"{minutes}m"
    hours, rest_min = divmod(minutes, 60)
    if hours < 24:
        return f"{hours}h {rest_min}m" if rest_min else f"{hours}h"
    days, rest_h = divmod(hours, 24)
    return f"{days}d {rest_h}h" if rest_h else f"{days}d"
