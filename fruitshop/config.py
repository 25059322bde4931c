# fruitshop/config.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


# -------------------
# Config (env-driven)
# -------------------
class Settings(BaseModel):
    # Empty skill id disables the applicationId check (local testing).
    skill_id: str = os.getenv("SKILL_ID", "").strip()
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./fruitshop.db").strip()
    default_locale: str = os.getenv("DEFAULT_LOCALE", "en-US").strip() or "en-US"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


settings = Settings()
