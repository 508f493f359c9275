from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from prices.api.deps import get_price_service
from prices.api.schemas.prices import ErrorResponse, PriceOut
from prices.domain.errors import InvalidQueryError, PriceNotFoundError
from prices.domain.price import Price
from prices.domain.price_query import PriceQuery, to_naive_utc
from prices.services.price_service import PriceService


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/prices", tags=["prices"])


@router.get(
    "",
    response_model=PriceOut,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid query parameters"},
        404: {"model": ErrorResponse, "description": "No applicable price"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
def get_applicable_price(
    # optionnels ici : l'absence est signalée par le validateur du domaine (400)
    application_date: dt.datetime | None = Query(
        default=None, alias="applicationDate", examples=["2020-06-14T10:00:00"]
    ),
    product_id: int | None = Query(default=None, alias="productId", examples=[35455]),
    brand_id: int | None = Query(default=None, alias="brandId", examples=[1]),
    service: PriceService = Depends(get_price_service),
) -> PriceOut:
    logger.info(
        "price lookup applicationDate=%s productId=%s brandId=%s",
        application_date,
        product_id,
        brand_id,
    )

    query = PriceQuery(
        application_date=to_naive_utc(application_date),
        product_id=product_id,
        brand_id=brand_id,
    )

    try:
        price = service.get_applicable_price(query)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=e.reason)
    except PriceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("price found: priceList=%s price=%s %s", price.price_list, price.amount, price.currency)
    return _to_response(price)


def _to_response(p: Price) -> PriceOut:
    return PriceOut(
        product_id=p.product_id,
        brand_id=p.brand_id,
        price_list=p.price_list,
        start_date=p.start_date,
        end_date=p.end_date,
        price=str(p.amount),     # Decimal -> string
        currency=p.currency,
    )
