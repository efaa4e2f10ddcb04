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
    base_url: str = "https://www.allabolag.se"
    segmentation_path: str = "/segmentering"
    search_path: str = "/bransch-sök"

    request_timeout_seconds: int = 30

    log_level: str = "INFO"
    run_env: str = "local"

    @property
    def segmentation_url(self) -> str:
        return f"{self.base_url}{self.segmentation_path}"

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{self.search_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        base_url=os.getenv("REGISTRY_BASE_URL", "https://www.allabolag.se").rstrip("/"),
        segmentation_path=os.getenv("SEGMENTATION_PATH", "/segmentering"),
        search_path=os.getenv("SEARCH_PATH", "/bransch-sök"),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
