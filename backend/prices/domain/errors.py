from __future__ import annotations

import datetime as dt


class InvalidQueryError(ValueError):
    """Query parameters rejected before any data access."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class PriceNotFoundError(LookupError):
    """No price record is applicable for (product, brand, date)."""

    def __init__(self, product_id: int, brand_id: int, application_date: dt.datetime) -> None:
        super().__init__(
            f"no applicable price for product {product_id}, brand {brand_id} "
            f"at {application_date.isoformat()}"
        )
        self.product_id = product_id
        self.brand_id = brand_id
        self.application_date = application_date
