"""Backend configuration (small + easy to read).

- read env vars (optionally via .env)
- expose a cached `get_settings()` function
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from .utils import get_repo_root


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def default_feedback_file() -> str:
    return str(get_repo_root() / "feedback.json")


@dataclass(frozen=True)
class Settings:
    # App
    app_name: str = "Product Feedback API"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    feedback_file: str = "feedback.json"
    atomic_writes: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once (cached)."""
    load_dotenv()

    return Settings(
        app_name=os.getenv("APP_NAME", "Product Feedback API"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
        feedback_file=os.getenv("FEEDBACK_FILE") or default_feedback_file(),
        atomic_writes=_env_bool("FEEDBACK_ATOMIC_WRITES", False),
    )
