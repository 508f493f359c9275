import datetime as dt
from decimal import Decimal

import pytest

from prices.domain.errors import PriceNotFoundError
from prices.domain.price import Price
from prices.domain.price_query import PriceQuery
from prices.engine.price_resolver import (
    filter_applicable,
    resolve_applicable_price,
    select_highest_priority,
)
from prices.sample_data import reference_prices


def _price(*, id: int, priority: int, start: dt.datetime, end: dt.datetime, amount: str = "10.00", price_list: int = 1) -> Price:
    return Price(
        id=id,
        product_id=35455,
        brand_id=1,
        price_list=price_list,
        start_date=start,
        end_date=end,
        priority=priority,
        amount=Decimal(amount),
        currency="EUR",
    )


def _query(when: dt.datetime) -> PriceQuery:
    return PriceQuery(application_date=when, product_id=35455, brand_id=1)


BASE = _price(
    id=1, priority=0, price_list=1, amount="35.50",
    start=dt.datetime(2020, 6, 14, 0, 0), end=dt.datetime(2020, 12, 31, 23, 59, 59),
)
PROMO = _price(
    id=2, priority=1, price_list=2, amount="25.45",
    start=dt.datetime(2020, 6, 14, 15, 0), end=dt.datetime(2020, 6, 14, 18, 30),
)


def test_filter_applicable_is_inclusive():
    start = BASE.start_date
    end = BASE.end_date
    one = dt.timedelta(seconds=1)

    assert filter_applicable([BASE], start) == [BASE]
    assert filter_applicable([BASE], end) == [BASE]
    assert filter_applicable([BASE], start - one) == []
    assert filter_applicable([BASE], end + one) == []


def test_select_highest_priority_empty():
    assert select_highest_priority([]) is None


def test_select_highest_priority_tie_returns_a_max_priority_record():
    a = _price(id=10, priority=3, start=BASE.start_date, end=BASE.end_date)
    b = _price(id=11, priority=3, start=BASE.start_date, end=BASE.end_date)
    c = _price(id=12, priority=1, start=BASE.start_date, end=BASE.end_date)

    best = select_highest_priority([c, a, b])
    assert best in (a, b)


def test_priority_wins_inside_promo_window():
    best = resolve_applicable_price(_query(dt.datetime(2020, 6, 14, 16, 0)), [BASE, PROMO])
    assert best.price_list == 2
    assert best.amount == Decimal("25.45")


def test_lower_priority_when_promo_window_excludes_instant():
    best = resolve_applicable_price(_query(dt.datetime(2020, 6, 14, 10, 0)), [BASE, PROMO])
    assert best.price_list == 1
    assert best.amount == Decimal("35.50")


def test_result_independent_of_candidate_order():
    when = dt.datetime(2020, 6, 14, 16, 0)
    assert resolve_applicable_price(_query(when), [PROMO, BASE]) == PROMO
    assert resolve_applicable_price(_query(when), [BASE, PROMO]) == PROMO


def test_empty_candidates_raise_not_found():
    when = dt.datetime(2020, 6, 14, 10, 0)
    with pytest.raises(PriceNotFoundError) as exc:
        resolve_applicable_price(_query(when), [])

    assert exc.value.product_id == 35455
    assert exc.value.brand_id == 1
    assert exc.value.application_date == when


def test_no_window_contains_date_raises_not_found():
    with pytest.raises(PriceNotFoundError):
        resolve_applicable_price(_query(dt.datetime(2019, 1, 1, 10, 0)), [BASE, PROMO])


@pytest.mark.parametrize(
    "when, expected_price_list",
    [
        (dt.datetime(2020, 6, 14, 10, 0), 1),
        (dt.datetime(2020, 6, 14, 16, 0), 2),
        (dt.datetime(2020, 6, 14, 21, 0), 1),
        (dt.datetime(2020, 6, 15, 10, 0), 3),
        (dt.datetime(2020, 6, 16, 21, 0), 4),
    ],
)
def test_reference_scenarios(when, expected_price_list):
    best = resolve_applicable_price(_query(when), list(reversed(reference_prices())))
    assert best.price_list == expected_price_list
