from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str | None
    log_level: str


def get_settings() -> Settings:
    # 1) env var
    env = os.getenv("PRICES_DATA_DIR")
    if env and env.strip():
        p = Path(env).expanduser()
    else:
        # 2) default: backend/data
        # prices/settings.py -> prices/ -> backend/
        p = Path(__file__).resolve().parents[1] / "data"

    p.mkdir(parents=True, exist_ok=True)

    db_url = os.getenv("PRICES_DATABASE_URL", "").strip() or None
    log_level = os.getenv("PRICES_LOG_LEVEL", "").strip().upper() or "INFO"

    return Settings(data_dir=p, database_url=db_url, log_level=log_level)
