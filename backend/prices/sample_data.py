from __future__ import annotations

import datetime as dt
from decimal import Decimal

from prices.domain.price import Price


ZARA_BRAND_ID = 1
ZARA_BRAND_NAME = "ZARA"


def reference_prices() -> list[Price]:
    """
    Jeu de données de référence : produit 35455, marque 1 (ZARA), tarifs 1 à 4.
    """
    return [
        Price(
            id=1,
            product_id=35455,
            brand_id=ZARA_BRAND_ID,
            price_list=1,
            start_date=dt.datetime(2020, 6, 14, 0, 0, 0),
            end_date=dt.datetime(2020, 12, 31, 23, 59, 59),
            priority=0,
            amount=Decimal("35.50"),
            currency="EUR",
        ),
        Price(
            id=2,
            product_id=35455,
            brand_id=ZARA_BRAND_ID,
            price_list=2,
            start_date=dt.datetime(2020, 6, 14, 15, 0, 0),
            end_date=dt.datetime(2020, 6, 14, 18, 30, 0),
            priority=1,
            amount=Decimal("25.45"),
            currency="EUR",
        ),
        Price(
            id=3,
            product_id=35455,
            brand_id=ZARA_BRAND_ID,
            price_list=3,
            start_date=dt.datetime(2020, 6, 15, 0, 0, 0),
            end_date=dt.datetime(2020, 6, 15, 11, 0, 0),
            priority=1,
            amount=Decimal("30.50"),
            currency="EUR",
        ),
        Price(
            id=4,
            product_id=35455,
            brand_id=ZARA_BRAND_ID,
            price_list=4,
            start_date=dt.datetime(2020, 6, 15, 16, 0, 0),
            end_date=dt.datetime(2020, 12, 31, 23, 59, 59),
            priority=1,
            amount=Decimal("38.95"),
            currency="EUR",
        ),
    ]
