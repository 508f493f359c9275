from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Price:
    """
    Un prix applicable à un produit pour une marque, sur une fenêtre de validité
    [start_date, end_date] inclusive. En cas de chevauchement, la priorité la plus
    haute l'emporte.
    """
    id: int
    product_id: int
    brand_id: int
    price_list: int
    start_date: dt.datetime
    end_date: dt.datetime
    priority: int
    amount: Decimal        # jamais de float
    currency: str          # code ISO, ex: "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.start_date, dt.datetime):
            raise ValueError("price.start_date must be a datetime")
        if not isinstance(self.end_date, dt.datetime):
            raise ValueError("price.end_date must be a datetime")
        if not isinstance(self.amount, Decimal):
            raise ValueError("price.amount must be a Decimal")
        if not isinstance(self.priority, int):
            raise ValueError("price.priority must be an integer")
        # code devise transmis tel quel
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValueError("price.currency must be a non-empty string")

    def is_applicable_at(self, instant: dt.datetime) -> bool:
        if instant is None:
            raise TypeError("instant must not be None")
        return self.start_date <= instant <= self.end_date

    def has_higher_priority_than(self, other: Price) -> bool:
        if other is None:
            raise TypeError("other price must not be None")
        return self.priority > other.priority
