from __future__ import annotations

from dataclasses import dataclass, field

from prices.domain.price import Price
from prices.repositories.price_repository import PriceRepository


@dataclass
class InMemoryPriceRepository(PriceRepository):
    """
    Repo en mémoire.
    - Déterministe
    - Facile à tester
    """
    _items: list[Price] = field(default_factory=list)

    def add(self, price: Price) -> None:
        if any(p.id == price.id for p in self._items):
            raise ValueError(f"Price with id {price.id} already exists")
        self._items.append(price)

    def find_candidates(self, product_id: int, brand_id: int) -> list[Price]:
        items = [p for p in self._items if p.product_id == product_id and p.brand_id == brand_id]
        # Tri déterministe : priorité desc, puis id
        return sorted(items, key=lambda p: (-p.priority, p.id))
