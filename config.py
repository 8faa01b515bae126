"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _origins() -> List[str]:
    raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    database_url: Optional[str] = field(default_factory=lambda: os.environ.get("DATABASE_URL") or None)
    cors_origins: List[str] = field(default_factory=_origins)
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper())
    max_individual_settlement: Decimal = field(
        default_factory=lambda: Decimal(os.environ.get("MAX_INDIVIDUAL_SETTLEMENT", "50000"))
    )
    max_total_settlement: Decimal = field(
        default_factory=lambda: Decimal(os.environ.get("MAX_TOTAL_SETTLEMENT", "100000"))
    )


def get_settings() -> Settings:
    return Settings()
