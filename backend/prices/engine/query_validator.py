from __future__ import annotations

from prices.domain.errors import InvalidQueryError
from prices.domain.price_query import PriceQuery


def validate_price_query(query: PriceQuery) -> None:
    """
    Règles de la requête, dans cet ordre (la première erreur gagne) :
    date -> product_id présent -> product_id > 0 -> brand_id présent -> brand_id > 0
    """
    if query is None:
        raise TypeError("query must not be None")

    if query.application_date is None:
        raise InvalidQueryError("application date is required")

    if query.product_id is None:
        raise InvalidQueryError("product id is required")
    if query.product_id <= 0:
        raise InvalidQueryError(f"product id must be positive, got {query.product_id}")

    if query.brand_id is None:
        raise InvalidQueryError("brand id is required")
    if query.brand_id <= 0:
        raise InvalidQueryError(f"brand id must be positive, got {query.brand_id}")
