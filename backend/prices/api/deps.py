from __future__ import annotations

from functools import lru_cache

from prices.settings import get_settings
from prices.repositories.price_repository import PriceRepository
from prices.repositories.jsonl_price_repository import JsonlPriceRepository
from prices.repositories.sql_price_repository import SqlPriceRepository
from prices.services.price_service import PriceService


@lru_cache
def get_price_repo() -> PriceRepository:
    # If PRICES_DATABASE_URL is set -> use SQL repo (Postgres/SQLite)
    settings = get_settings()
    if settings.database_url:
        return SqlPriceRepository()

    return JsonlPriceRepository(prices_path=settings.data_dir / "prices.jsonl")


def get_price_service() -> PriceService:
    return PriceService(repository=get_price_repo())
