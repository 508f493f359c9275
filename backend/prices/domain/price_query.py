from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PriceQuery:
    # Champs optionnels : c'est le validateur qui signale les absences, dans l'ordre.
    application_date: dt.datetime | None = None
    product_id: int | None = None
    brand_id: int | None = None


def to_naive_utc(value: dt.datetime | None) -> dt.datetime | None:
    # les fenêtres de prix sont stockées en naïf
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(dt.timezone.utc).replace(tzinfo=None)
