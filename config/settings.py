from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Store selection
    store_backend: str  # sqlite | rest
    store_table: str

    # Local SQLite store
    db_path: str

    # Remote REST store
    store_url: str | None
    store_api_key: str | None
    request_timeout_seconds: int

    # Core/runtime
    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    store_backend = os.getenv("STORE_BACKEND", "sqlite").lower()
    store_url = os.getenv("STORE_URL") or None
    return Settings(
        store_backend=store_backend,
        store_table=os.getenv("STORE_TABLE", "companies"),
        db_path=os.getenv("DB_PATH", "tracker.db"),
        store_url=store_url,
        store_api_key=os.getenv("STORE_API_KEY") or None,
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
