"""
Простой TTL-кэш для ответов Steam API.

Ключ — хэш JSON-представления (порядок ключей не важен).
Анализатор ничего не кэширует сам: это забота вызывающего слоя.
"""
from __future__ import annotations

import hashlib
import json
import time
from collections.abc import Callable
from typing import Any


def make_key(key: Any) -> str:
    normalized = json.dumps(key, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class TTLCache:
    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: Any) -> Any | None:
        k = make_key(key)
        entry = self._entries.get(k)
        if entry and self._clock() - entry[0] < self.ttl_seconds:
            self.hits += 1
            return entry[1]
        if entry:
            del self._entries[k]
        self.misses += 1
        return None

    def set(self, key: Any, value: Any) -> None:
        now = self._clock()
        self._prune(now)
        self._entries[make_key(key)] = (now, value)

    def _prune(self, now: float) -> None:
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at >= self.ttl_seconds]
        for k in expired:
            del self._entries[k]

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict[str, Any]:
        total = self.hits + self.misses
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
        }
