from __future__ import annotations

from prices.settings import get_settings
from prices.repositories.jsonl_price_repository import JsonlPriceRepository
from prices.repositories.price_repository import PriceRepository
from prices.repositories.sql_price_repository import SqlPriceRepository
from prices.sample_data import ZARA_BRAND_ID, ZARA_BRAND_NAME, reference_prices


def seed_reference_prices(repo: PriceRepository) -> dict:
    stored = 0
    skipped = 0
    for p in reference_prices():
        existing = {c.id for c in repo.find_candidates(p.product_id, p.brand_id)}
        if p.id in existing:
            skipped += 1
            continue
        repo.add(p)
        stored += 1
    return {"stored": stored, "skipped": skipped}


def main() -> int:
    settings = get_settings()
    if settings.database_url:
        repo = SqlPriceRepository()
        repo.add_brand(brand_id=ZARA_BRAND_ID, name=ZARA_BRAND_NAME, description="Zara brand")
        target = settings.database_url
    else:
        repo = JsonlPriceRepository(prices_path=settings.data_dir / "prices.jsonl")
        target = str(settings.data_dir / "prices.jsonl")

    res = seed_reference_prices(repo)
    print(res | {"to": target})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
