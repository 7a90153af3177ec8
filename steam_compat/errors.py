from __future__ import annotations

from typing import Any


class CompatibilityAnalysisError(Exception):
    """Ошибка валидации входа анализатора; тип ошибки в error_type."""

    error_type = "CALCULATION_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.error_type, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidInputError(CompatibilityAnalysisError):
    error_type = "INVALID_INPUT"


class PrivateProfileError(CompatibilityAnalysisError):
    error_type = "PRIVATE_PROFILE"


class InsufficientDataError(CompatibilityAnalysisError):
    error_type = "INSUFFICIENT_DATA"


# ---- Ошибки Steam Web API (слой получения данных) ----

MISSING_API_KEY = "MISSING_API_KEY"
INVALID_API_KEY = "INVALID_API_KEY"
RATE_LIMITED = "RATE_LIMITED"
TIMEOUT = "TIMEOUT"
NETWORK_ERROR = "NETWORK_ERROR"
INVALID_STEAM_ID = "INVALID_STEAM_ID"
VANITY_URL_NOT_FOUND = "VANITY_URL_NOT_FOUND"
PRIVATE_PROFILE = "PRIVATE_PROFILE"
SERVER_ERROR = "SERVER_ERROR"
SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
INVALID_RESPONSE = "INVALID_RESPONSE"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

# код -> (сообщение по умолчанию, можно ли повторить позже)
STEAM_API_ERRORS: dict[str, tuple[str, bool]] = {
    MISSING_API_KEY: ("Steam API key is not configured", False),
    INVALID_API_KEY: ("Invalid Steam API key", False),
    RATE_LIMITED: ("API rate limit exceeded", True),
    TIMEOUT: ("Request timeout", True),
    NETWORK_ERROR: ("Network connection error", True),
    INVALID_STEAM_ID: ("Invalid Steam ID format", False),
    VANITY_URL_NOT_FOUND: ("Vanity URL not found", False),
    PRIVATE_PROFILE: ("Profile is private", False),
    SERVER_ERROR: ("Steam API server error", True),
    SERVICE_UNAVAILABLE: ("Steam API service unavailable", True),
    INVALID_RESPONSE: ("Invalid API response format", False),
    UNKNOWN_ERROR: ("Unknown error", False),
}


class SteamApiError(Exception):
    def __init__(self, code: str, message: str | None = None, status: int | None = None):
        default_message, retryable = STEAM_API_ERRORS.get(code, STEAM_API_ERRORS[UNKNOWN_ERROR])
        self.code = code if code in STEAM_API_ERRORS else UNKNOWN_ERROR
        self.message = message or default_message
        self.retryable = retryable
        self.status = status
        super().__init__(f"{self.code}: {self.message}")


def error_code_for_status(status: int) -> str:
    """HTTP-статус Steam API -> код ошибки."""
    if status in (401, 403):
        return INVALID_API_KEY
    if status == 429:
        return RATE_LIMITED
    if status == 503:
        return SERVICE_UNAVAILABLE
    if 500 <= status < 600:
        return SERVER_ERROR
    return UNKNOWN_ERROR
