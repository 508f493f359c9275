from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PriceOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: int = Field(examples=[35455])
    brand_id: int = Field(examples=[1])
    price_list: int = Field(examples=[1])
    start_date: dt.datetime
    end_date: dt.datetime
    price: str = Field(description="Decimal amount, as a string", examples=["35.50"])
    currency: str = Field(examples=["EUR"])


class ErrorResponse(BaseModel):
    timestamp: dt.datetime
    status: int
    error: str
    message: str
    path: str
