from __future__ import annotations

import json
import datetime as dt
from pathlib import Path

from prices.domain.money import parse_amount
from prices.domain.price import Price
from prices.repositories.price_repository import PriceRepository


class JsonlPriceRepository(PriceRepository):
    def __init__(self, *, prices_path: Path) -> None:
        self._path = prices_path
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()

    def add(self, price: Price) -> None:
        if any(p.id == price.id for p in self._read_all()):
            raise ValueError(f"Price with id {price.id} already exists")
        line = json.dumps(self._to_record(price), ensure_ascii=False, separators=(",", ":"))
        with self._path.open("a", encoding="utf-8", newline="\n") as f:
            f.write(line + "\n")

    def find_candidates(self, product_id: int, brand_id: int) -> list[Price]:
        items = [p for p in self._read_all() if p.product_id == product_id and p.brand_id == brand_id]
        items.sort(key=lambda p: (-p.priority, p.id))
        return items

    # -------- internals --------
    def _read_all(self) -> list[Price]:
        out: list[Price] = []
        with self._path.open("r", encoding="utf-8") as f:
            for line_no, raw in enumerate(f, start=1):
                raw = raw.strip()
                if not raw:
                    continue
                try:
                    out.append(self._from_record(json.loads(raw)))
                except Exception as e:
                    raise ValueError(f"prices.jsonl: invalid record at line {line_no}: {e}") from e
        return out

    @staticmethod
    def _from_record(d: dict) -> Price:
        if not isinstance(d, dict):
            raise ValueError("record must be an object")

        return Price(
            id=_req_int(d, "id"),
            product_id=_req_int(d, "product_id"),
            brand_id=_req_int(d, "brand_id"),
            price_list=_req_int(d, "price_list"),
            start_date=dt.datetime.fromisoformat(_req_str(d, "start_date")),
            end_date=dt.datetime.fromisoformat(_req_str(d, "end_date")),
            priority=_req_int(d, "priority"),
            # montant en string pour ne jamais passer par un float
            amount=parse_amount(_req_str(d, "amount")),
            currency=_req_str(d, "currency"),
        )

    @staticmethod
    def _to_record(p: Price) -> dict:
        return {
            "id": p.id,
            "product_id": p.product_id,
            "brand_id": p.brand_id,
            "price_list": p.price_list,
            "start_date": p.start_date.isoformat(),
            "end_date": p.end_date.isoformat(),
            "priority": p.priority,
            "amount": str(p.amount),
            "currency": p.currency,
        }


def _req_str(d: dict, key: str) -> str:
    v = d.get(key)
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"missing/invalid '{key}'")
    return v


def _req_int(d: dict, key: str) -> int:
    v = d.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ValueError(f"missing/invalid '{key}'")
    return v
