from unittest.mock import MagicMock

import pytest
import requests

from steam_compat.clients.cache import TTLCache
from steam_compat.clients.steam_client import (
    GET_OWNED_GAMES,
    SteamClient,
    parse_owned_games,
)
from steam_compat.errors import SteamApiError

STEAM_ID = "76561197960287930"


def _response(status=200, payload=None, content=b"{}"):
    r = MagicMock()
    r.status_code = status
    r.content = content
    if isinstance(payload, Exception):
        r.json.side_effect = payload
    else:
        r.json.return_value = payload
    return r


@pytest.fixture
def client():
    c = SteamClient(api_key="test-key", base_url="https://steam.test/")
    c.session.get = MagicMock()
    yield c
    c.close()


def test_missing_api_key():
    with pytest.raises(SteamApiError) as exc:
        SteamClient(api_key="")
    assert exc.value.code == "MISSING_API_KEY"
    assert exc.value.retryable is False


def test_get_owned_games(client):
    client.session.get.return_value = _response(
        payload={
            "response": {
                "game_count": 2,
                "games": [
                    {"appid": 620, "name": "Portal 2", "playtime_forever": 300, "img_icon_url": "abc"},
                    {"appid": 70, "playtime_forever": 0, "playtime_2weeks": 15},
                ],
            }
        }
    )

    library = client.get_owned_games(STEAM_ID)

    assert library.is_public is True
    assert library.total_count == 2
    assert [g.app_id for g in library.games] == [620, 70]
    assert library.games[1].name == "Game 70"
    assert library.games[1].playtime_2weeks == 15
    assert library.games[0].img_icon_url.endswith("/apps/620/abc.jpg")

    url = client.session.get.call_args.args[0]
    params = client.session.get.call_args.kwargs["params"]
    assert url == f"https://steam.test{GET_OWNED_GAMES}"
    assert params["key"] == "test-key"
    assert params["steamid"] == STEAM_ID
    assert params["include_appinfo"] == 1
    assert client.session.get.call_args.kwargs["timeout"] == client.timeout


def test_get_owned_games_is_cached(client):
    client.session.get.return_value = _response(payload={"response": {"game_count": 0}})

    first = client.get_owned_games(STEAM_ID)
    second = client.get_owned_games(STEAM_ID)

    assert first is second
    assert client.session.get.call_count == 1
    assert client.library_cache.stats()["hits"] == 1


def test_cache_expires():
    now = [0.0]
    cache = TTLCache(600, clock=lambda: now[0])
    c = SteamClient(api_key="k", library_cache=cache)
    c.session.get = MagicMock(return_value=_response(payload={"response": {"game_count": 0}}))

    c.get_owned_games(STEAM_ID)
    now[0] = 601
    c.get_owned_games(STEAM_ID)

    assert c.session.get.call_count == 2


def test_get_owned_games_invalid_id(client):
    with pytest.raises(SteamApiError) as exc:
        client.get_owned_games("12345")
    assert exc.value.code == "INVALID_STEAM_ID"
    client.session.get.assert_not_called()


@pytest.mark.parametrize(
    "status,code,retryable",
    [
        (401, "INVALID_API_KEY", False),
        (403, "INVALID_API_KEY", False),
        (429, "RATE_LIMITED", True),
        (500, "SERVER_ERROR", True),
        (503, "SERVICE_UNAVAILABLE", True),
        (404, "UNKNOWN_ERROR", False),
    ],
)
def test_http_errors_are_mapped(client, status, code, retryable):
    client.session.get.return_value = _response(status=status)

    with pytest.raises(SteamApiError) as exc:
        client.get_owned_games(STEAM_ID)

    assert exc.value.code == code
    assert exc.value.retryable is retryable
    assert exc.value.status == status


@pytest.mark.parametrize(
    "error,code",
    [
        (requests.Timeout("slow"), "TIMEOUT"),
        (requests.ConnectionError("down"), "NETWORK_ERROR"),
    ],
)
def test_transport_errors(client, error, code):
    client.session.get.side_effect = error

    with pytest.raises(SteamApiError) as exc:
        client.get_owned_games(STEAM_ID)

    assert exc.value.code == code
    assert exc.value.retryable is True


@pytest.mark.parametrize("payload", [ValueError("no json"), ["not", "a", "dict"], {"no_response": {}}])
def test_invalid_response(client, payload):
    client.session.get.return_value = _response(payload=payload)

    with pytest.raises(SteamApiError) as exc:
        client.get_owned_games(STEAM_ID)

    assert exc.value.code == "INVALID_RESPONSE"


def test_private_profile_library():
    library = parse_owned_games({})
    assert library.is_public is False
    assert library.games == []


def test_public_empty_library():
    library = parse_owned_games({"game_count": 0})
    assert library.is_public is True
    assert library.total_count == 0


def test_get_player_summaries(client):
    client.session.get.return_value = _response(
        payload={
            "response": {
                "players": [
                    {
                        "steamid": STEAM_ID,
                        "personaname": "gabe",
                        "avatarfull": "https://avatars.test/a.jpg",
                        "profileurl": "https://steamcommunity.com/id/gabe/",
                        "communityvisibilitystate": 3,
                    }
                ]
            }
        }
    )

    users = client.get_player_summaries([STEAM_ID])

    assert users[0].persona_name == "gabe"
    assert users[0].community_visibility_state == 3
    assert client.session.get.call_args.kwargs["params"]["steamids"] == STEAM_ID
    client.get_player_summaries([STEAM_ID])
    assert client.session.get.call_count == 1


def test_get_player_summaries_bad_payload(client):
    client.session.get.return_value = _response(payload={"response": {}})
    with pytest.raises(SteamApiError, match="INVALID_RESPONSE"):
        client.get_player_summaries([STEAM_ID])


def test_resolve_vanity_url(client):
    client.session.get.return_value = _response(payload={"response": {"success": 1, "steamid": STEAM_ID}})
    assert client.resolve_vanity_url("gabe") == STEAM_ID
    assert client.session.get.call_args.kwargs["params"]["vanityurl"] == "gabe"


def test_resolve_vanity_url_not_found(client):
    client.session.get.return_value = _response(payload={"response": {"success": 42, "message": "No match"}})
    with pytest.raises(SteamApiError) as exc:
        client.resolve_vanity_url("nobody-here")
    assert exc.value.code == "VANITY_URL_NOT_FOUND"
    assert exc.value.message == "No match"


@pytest.mark.parametrize(
    "text",
    [STEAM_ID, f" {STEAM_ID} ", f"https://steamcommunity.com/profiles/{STEAM_ID}/"],
)
def test_resolve_steam_id_without_request(client, text):
    assert client.resolve_steam_id(text) == STEAM_ID
    client.session.get.assert_not_called()


@pytest.mark.parametrize("text", ["https://steamcommunity.com/id/gabe/", "gabe"])
def test_resolve_steam_id_via_vanity(client, text):
    client.session.get.return_value = _response(payload={"response": {"success": 1, "steamid": STEAM_ID}})
    assert client.resolve_steam_id(text) == STEAM_ID
    assert client.session.get.call_args.kwargs["params"]["vanityurl"] == "gabe"


def test_resolve_steam_id_rejects_garbage(client):
    with pytest.raises(SteamApiError) as exc:
        client.resolve_steam_id("not a profile!")
    assert exc.value.code == "INVALID_STEAM_ID"


def test_ping(client):
    client.session.get.return_value = _response(content=b'{"servertime": 1}')
    assert client.ping() == {"status": 200, "bytes": 17}

    client.session.get.side_effect = requests.ConnectionError("down")
    assert "error" in client.ping()


def test_unknown_error_code_falls_back():
    err = SteamApiError("SOMETHING_NEW")
    assert err.code == "UNKNOWN_ERROR"
    assert err.message == "Unknown error"
