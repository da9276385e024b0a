import os
from pathlib import Path
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from a local .env file if present.
# __file__ is backend/app/core/config.py -> parents[2] is backend/
BACKEND_ENV = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(BACKEND_ENV)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean from the environment with sensible defaults."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_list(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default or []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_origins() -> List[str]:
    """
    CORS_ORIGINS env override, or permissive (*) so the UI can be served from a
    separate dev server.
    """
    origins = _env_list("CORS_ORIGINS", ["*"])

    seen = set()
    deduped = []
    for origin in origins:
        if origin in seen:
            continue
        seen.add(origin)
        deduped.append(origin)
    return deduped


@dataclass
class Settings:
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Character Roster API"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_origins: List[str] = field(default_factory=_cors_origins)
    seed_roster: bool = field(default_factory=lambda: _env_bool("SEED_ROSTER", True))
    serve_ui: bool = field(default_factory=lambda: _env_bool("SERVE_UI", True))
    generation_interval_seconds: float = field(
        default_factory=lambda: _env_float("GENERATION_INTERVAL_SECONDS", 2.0)
    )
    generation_remove_probability: float = field(
        default_factory=lambda: _env_float("GENERATION_REMOVE_PROBABILITY", 0.3)
    )
    generation_min_roster_size: int = field(default_factory=lambda: _env_int("GENERATION_MIN_ROSTER_SIZE", 5))
    generator_seed: Optional[int] = field(default_factory=lambda: _env_int("GENERATOR_SEED"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()
