from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from steam_compat.clients.steam_client import STEAM_API_BASE, SteamClient
from steam_compat.coop import coop_game_stats
from steam_compat.errors import CompatibilityAnalysisError, SteamApiError
from steam_compat.models.schemas import CompatibilityResult, CoopGameFilter, CoopType, GameLibrary
from steam_compat.scoring import AnalysisConfig, build_analyzer
from steam_compat.steam_utils import format_playtime
from steam_compat.utils import get_env, get_logger, load_env, read_json, write_json

log = get_logger("steam-compat.main")


def bootstrap() -> SteamClient:
    """Инициализируем Steam-клиент из окружения."""
    load_env()
    return SteamClient(
        api_key=get_env("STEAM_API_KEY"),
        base_url=get_env("STEAM_API_BASE_URL", STEAM_API_BASE),
        user_agent=get_env("STEAM_USER_AGENT", "SteamCompat/1.0"),
    )


def load_library(path: Path) -> GameLibrary:
    """GameLibrary из JSON-файла (формат model_dump)."""
    return GameLibrary.model_validate(read_json(path))


def build_filter(args: argparse.Namespace) -> CoopGameFilter | None:
    if not (args.coop_type or args.min_players or args.min_score is not None or args.genre):
        return None
    return CoopGameFilter(
        coop_type=CoopType(args.coop_type) if args.coop_type else None,
        max_players=args.min_players,
        genres=args.genre or [],
        min_compatibility_score=args.min_score,
    )


def log_summary(result: CompatibilityResult) -> None:
    log.info("Compatibility score: %d / 100", result.score)
    for name, value in result.components.items():
        log.info("  %-14s %6.1f", name, value)

    log.info("Common games: %d", len(result.common_games))
    for g in result.common_games[:5]:
        log.info(
            "  %-30s %9s / %-9s factor=%.2f%s",
            g.name,
            format_playtime(g.user1_playtime),
            format_playtime(g.user2_playtime),
            g.compatibility_factor,
            " [co-op]" if g.is_coop_supported else "",
        )

    if result.recommendations:
        log.info("Recommendations:")
        for i, r in enumerate(result.recommendations, 1):
            log.info("  %2d. %-30s score=%.1f", i, r.name, r.recommendation_score)

    if result.coop_suggestions:
        log.info("Co-op suggestions:")
        for i, s in enumerate(result.coop_suggestions, 1):
            log.info(
                "  %2d. %-30s %-6s up to %d players, score=%.1f",
                i,
                s.name,
                s.coop_type.value,
                s.max_players,
                s.compatibility_score,
            )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Steam library compatibility checker")
    parser.add_argument("user1", nargs="?", help="Steam ID64, profile URL or vanity name")
    parser.add_argument("user2", nargs="?", help="Steam ID64, profile URL or vanity name")
    parser.add_argument("--library1", type=Path, help="Offline mode: GameLibrary JSON for user 1")
    parser.add_argument("--library2", type=Path, help="Offline mode: GameLibrary JSON for user 2")
    parser.add_argument("--coop-type", choices=[t.value for t in CoopType])
    parser.add_argument("--min-players", type=int, help="Minimum max-player count for co-op games")
    parser.add_argument("--min-score", type=float, help="Minimum co-op suggestion score")
    parser.add_argument("--genre", action="append", help="Required co-op genre (repeatable)")
    parser.add_argument("--out", type=Path, help="Write the full result as JSON")
    parser.add_argument("--stats", action="store_true", help="Log co-op catalog statistics")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    load_env()

    if args.stats:
        stats = coop_game_stats()
        log.info("Co-op catalog: %s", stats.model_dump(mode="json"))

    offline = args.library1 is not None or args.library2 is not None
    if offline and not (args.library1 and args.library2):
        log.error("Offline mode needs both --library1 and --library2")
        return 2
    if not offline and not (args.user1 and args.user2):
        if args.stats:
            return 0
        log.error("Two users are required (or --library1/--library2)")
        return 2

    try:
        if offline:
            user1 = args.user1 or args.library1.stem
            user2 = args.user2 or args.library2.stem
            library1 = load_library(args.library1)
            library2 = load_library(args.library2)
        else:
            with bootstrap() as client:
                user1 = client.resolve_steam_id(args.user1)
                user2 = client.resolve_steam_id(args.user2)
                library1 = client.get_owned_games(user1)
                library2 = client.get_owned_games(user2)
            log.info(
                "Fetched libraries: %s (%d games), %s (%d games)",
                user1,
                library1.total_count,
                user2,
                library2.total_count,
            )

        analyzer = build_analyzer(AnalysisConfig.from_env())
        result = analyzer.analyze(library1, library2, user1, user2, build_filter(args))
    except CompatibilityAnalysisError as e:
        log.error("Analysis failed [%s]: %s", e.error_type, e.message)
        return 1
    except SteamApiError as e:
        log.error("Steam API error [%s]: %s", e.code, e.message)
        return 1
    except ValidationError as e:
        log.error("Invalid library file: %s", e)
        return 1
    except (OSError, ValueError, RuntimeError) as e:
        # нечитаемый файл, битый JSON, некорректные COMPAT_* переменные
        log.error("Configuration or input error: %s", e)
        return 1

    log_summary(result)
    if args.out:
        write_json(result.model_dump(mode="json"), args.out)
        log.info("Saved result: %s", args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
