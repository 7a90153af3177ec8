import os
import requests
from dotenv import load_dotenv


def main():
    load_dotenv()

    REQUIRED_KEYS = [
        "STEAM_API_KEY",
    ]

    missing = [k for k in REQUIRED_KEYS if not os.getenv(k)]
    if missing:
        print("⚠️ Missing variables in .env:", ", ".join(missing))
    else:
        print("✅ Environment variables loaded.")

    base_url = os.getenv("STEAM_API_BASE_URL", "https://api.steampowered.com").rstrip("/")
    headers = {"User-Agent": os.getenv("STEAM_USER_AGENT", "SteamCompat/1.0")}

    # GetServerInfo не требует ключа — проверяем доступность
    try:
        r = requests.get(f"{base_url}/ISteamWebAPIUtil/GetServerInfo/v0001/", headers=headers, timeout=15)
        print(f"Steam Web API status: {r.status_code}, bytes: {len(r.content)}")
    except Exception as e:
        print("Steam Web API request error:", e)

    # С ключом — проверяем, что ключ принимается
    key = os.getenv("STEAM_API_KEY")
    if key:
        params = {"key": key, "vanityurl": "valve", "format": "json"}
        try:
            r = requests.get(
                f"{base_url}/ISteamUser/ResolveVanityURL/v0001/",
                params=params,
                headers=headers,
                timeout=15,
            )
            print(f"Steam API key check status: {r.status_code}")
        except Exception as e:
            print("Steam API key check error:", e)


if __name__ == "__main__":
    main()
