from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    match_diagnostics: bool
    rules_dir: str
    rules_cache_ttl_seconds: int
    max_text_chars: int
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    sentry_dsn=_get_env("SENTRY_DSN"),
    match_diagnostics=_get_env_bool("MATCH_DIAGNOSTICS", False),
    rules_dir=_get_env("RULES_DIR", ".") or ".",
    rules_cache_ttl_seconds=_get_env_int("RULES_CACHE_TTL_SECONDS", 60),
    max_text_chars=_get_env_int("MAX_TEXT_CHARS", 50000),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
)

if settings.rules_cache_ttl_seconds <= 0:
    raise RuntimeError("RULES_CACHE_TTL_SECONDS must be a positive number of seconds.")

if settings.max_text_chars < 1000:
    raise RuntimeError("MAX_TEXT_CHARS must be at least 1000.")
