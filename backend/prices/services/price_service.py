from __future__ import annotations

import logging

from prices.domain.errors import InvalidQueryError, PriceNotFoundError
from prices.domain.price import Price
from prices.domain.price_query import PriceQuery
from prices.engine.price_resolver import resolve_applicable_price
from prices.engine.query_validator import validate_price_query
from prices.repositories.price_repository import PriceRepository


log = logging.getLogger(__name__)


class PriceService:
    def __init__(self, *, repository: PriceRepository) -> None:
        self._repo = repository

    def get_applicable_price(self, query: PriceQuery) -> Price:
        log.debug("resolving applicable price for %s", query)

        try:
            validate_price_query(query)
        except InvalidQueryError as e:
            log.warning("invalid price query: %s", e.reason)
            raise

        candidates = self._repo.find_candidates(query.product_id, query.brand_id)
        log.debug(
            "%d candidate prices for product %s, brand %s",
            len(candidates),
            query.product_id,
            query.brand_id,
        )

        try:
            return resolve_applicable_price(query, candidates)
        except PriceNotFoundError as e:
            log.warning("%s", e)
            raise
