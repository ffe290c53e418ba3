import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: List[str]) -> Tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    cors_allowed_origins: Tuple[str, ...]
    min_resume_chars: int
    resume_preview_chars: int
    host: str
    port: int


def load_settings() -> Settings:
    return Settings(
        app_name=_get_env("APP_NAME", "Resume Match Scorer API"),
        app_version=_get_env("APP_VERSION", "1.0.0"),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            ["http://localhost:3000", "http://localhost:3001"]
        ),
        min_resume_chars=_get_env_int("MIN_RESUME_CHARS", 50),
        resume_preview_chars=_get_env_int("RESUME_PREVIEW_CHARS", 1000),
        host=_get_env("HOST", "0.0.0.0"),
        port=_get_env_int("PORT", 8000),
    )


settings = load_settings()
