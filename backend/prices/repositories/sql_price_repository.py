from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, Numeric, String, select
from sqlalchemy.orm import Mapped, Session, mapped_column, sessionmaker

from prices.db import init_db, new_session
from prices.db_base import Base
from prices.domain.price import Price
from prices.repositories.price_repository import PriceRepository


class BrandRow(Base):
    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)


class PriceRow(Base):
    __tablename__ = "prices"
    __table_args__ = (
        Index("ix_prices_product_brand", "product_id", "brand_id"),
    )

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    brand_id: Mapped[int] = mapped_column(Integer, ForeignKey("brands.id"), nullable=False)
    product_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    price_list: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(24, 10), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)


class SqlPriceRepository(PriceRepository):
    def __init__(self, *, session_factory: sessionmaker[Session] | None = None) -> None:
        if session_factory is None:
            # ensure tables exist (simple). Migrations live in backend/migrations.
            init_db()
            self._new_session = new_session
        else:
            self._new_session = session_factory

    def add_brand(self, *, brand_id: int, name: str, description: str | None = None) -> None:
        with self._new_session() as s:
            if s.get(BrandRow, brand_id) is None:
                s.add(BrandRow(id=brand_id, name=name, description=description))
                s.commit()

    def add(self, price: Price) -> None:
        row = PriceRow(
            id=price.id,
            brand_id=price.brand_id,
            product_id=price.product_id,
            price_list=price.price_list,
            start_date=price.start_date,
            end_date=price.end_date,
            priority=price.priority,
            price=price.amount,
            currency=price.currency,
        )
        with self._new_session() as s:
            if s.get(PriceRow, price.id) is not None:
                raise ValueError(f"Price with id {price.id} already exists")
            s.add(row)
            s.commit()

    def find_candidates(self, product_id: int, brand_id: int) -> list[Price]:
        stmt = (
            select(PriceRow)
            .where(PriceRow.product_id == product_id)
            .where(PriceRow.brand_id == brand_id)
            .order_by(PriceRow.priority.desc(), PriceRow.id)
        )

        with self._new_session() as s:
            rows = s.execute(stmt).scalars().all()

        return [self._to_domain(r) for r in rows]

    def find_applicable(self, product_id: int, brand_id: int, instant: dt.datetime) -> list[Price]:
        """Same as find_candidates, pre-filtered on the validity window by the database."""
        stmt = (
            select(PriceRow)
            .where(PriceRow.product_id == product_id)
            .where(PriceRow.brand_id == brand_id)
            .where(PriceRow.start_date <= instant)
            .where(PriceRow.end_date >= instant)
            .order_by(PriceRow.priority.desc(), PriceRow.id)
        )

        with self._new_session() as s:
            rows = s.execute(stmt).scalars().all()

        return [self._to_domain(r) for r in rows]

    @staticmethod
    def _to_domain(r: PriceRow) -> Price:
        return Price(
            id=r.id,
            product_id=r.product_id,
            brand_id=r.brand_id,
            price_list=r.price_list,
            start_date=r.start_date,
            end_date=r.end_date,
            priority=r.priority,
            amount=_trim_scale(Decimal(r.price)),
            currency=r.currency,
        )


_CENTS = Decimal("0.01")


def _trim_scale(amount: Decimal) -> Decimal:
    # la colonne complète à 10 décimales : on retire les zéros ajoutés, au moins 2 décimales
    trimmed = amount.normalize()
    if trimmed.as_tuple().exponent > -2:
        return trimmed.quantize(_CENTS)
    return trimmed
