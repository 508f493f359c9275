from __future__ import annotations

from abc import ABC, abstractmethod

from prices.domain.price import Price


class PriceRepository(ABC):
    @abstractmethod
    def add(self, price: Price) -> None: ...

    @abstractmethod
    def find_candidates(self, product_id: int, brand_id: int) -> list[Price]:
        """All prices for (product, brand), whatever the date. Empty list if none."""
        ...
