from __future__ import annotations

import datetime as dt
from typing import Iterable

from prices.domain.errors import PriceNotFoundError
from prices.domain.price import Price
from prices.domain.price_query import PriceQuery


def filter_applicable(candidates: Iterable[Price], instant: dt.datetime) -> list[Price]:
    # fenêtre fermée des deux côtés
    return [p for p in candidates if p.is_applicable_at(instant)]


def select_highest_priority(prices: Iterable[Price]) -> Price | None:
    """
    Priorité max. En cas d'égalité, le premier dans l'ordre d'entrée gagne.
    """
    best: Price | None = None
    for p in prices:
        if best is None or p.has_higher_priority_than(best):
            best = p
    return best


def resolve_applicable_price(query: PriceQuery, candidates: Iterable[Price]) -> Price:
    """
    Ne suppose rien sur les candidats : ordre quelconque, dates hors fenêtre incluses.
    La requête doit déjà être validée.
    """
    applicable = filter_applicable(candidates, query.application_date)
    best = select_highest_priority(applicable)
    if best is None:
        raise PriceNotFoundError(query.product_id, query.brand_id, query.application_date)
    return best
