from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_request_timeout_seconds: float
    pool_tags_max_pages: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "30")),
        pool_tags_max_pages=int(_env("POOL_TAGS_MAX_PAGES", "0")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
