"""Engine configuration from environment."""
from datetime import date
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of staywindow/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "StayWindow"

    # Legal cutover: no presence day before this date is ever counted
    effective_start_date: date = date(2025, 10, 12)

    day_limit: int = 90
    window_size: int = 180
    amber_threshold_days: int = 15

    # Comma-separated territory codes; empty means the built-in Schengen set
    counted_territories: str = ""

    @field_validator("counted_territories", mode="before")
    @classmethod
    def strip_territories(cls, v: str) -> str:
        return (v or "").strip()

    batch_max_workers: int | None = None
    batch_use_processes: bool = True

    class Config:
        env_file = str(_env_path)
        extra = "ignore"

    def territory_codes(self) -> frozenset[str] | None:
        """Parsed override of the counted-territory set, or None for the default."""
        if not self.counted_territories:
            return None
        codes = (c.strip().upper() for c in self.counted_territories.split(","))
        return frozenset(c for c in codes if c)


@lru_cache
def get_settings() -> Settings:
    return Settings()
