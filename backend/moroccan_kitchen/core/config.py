# Environment-driven settings (.env)
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "recipes.json"

class Settings(BaseSettings):
    CATALOG_PATH: Optional[str] = None    # defaults to the bundled catalog

    # matcher: keep recipes whose percentage is strictly above this value
    MATCH_MIN_PERCENTAGE: int = 0

    # display tiers (percent floors)
    TIER_PERFECT: int = 100
    TIER_NEAR: int = 70
    TIER_PARTIAL: int = 25

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    def catalog_path(self) -> Path:
        return Path(self.CATALOG_PATH) if self.CATALOG_PATH else DEFAULT_CATALOG

settings = Settings()
