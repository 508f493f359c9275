from __future__ import annotations

import argparse
import datetime as dt

from prices.api.deps import get_price_service
from prices.domain.errors import InvalidQueryError, PriceNotFoundError
from prices.domain.price_query import PriceQuery, to_naive_utc
from prices.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve the applicable price of a product.")
    parser.add_argument("--date", required=True, type=dt.datetime.fromisoformat, help="YYYY-MM-DDTHH:MM:SS")
    parser.add_argument("--product", required=True, type=int)
    parser.add_argument("--brand", required=True, type=int)
    args = parser.parse_args(argv)

    configure_logging()
    query = PriceQuery(application_date=to_naive_utc(args.date), product_id=args.product, brand_id=args.brand)

    try:
        p = get_price_service().get_applicable_price(query)
    except InvalidQueryError as e:
        print(f"invalid query: {e.reason}")
        return 2
    except PriceNotFoundError as e:
        print(str(e))
        return 1

    print({
        "product_id": p.product_id,
        "brand_id": p.brand_id,
        "price_list": p.price_list,
        "start_date": p.start_date.isoformat(),
        "end_date": p.end_date.isoformat(),
        "price": str(p.amount),
        "currency": p.currency,
    })
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
