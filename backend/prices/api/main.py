from contextlib import asynccontextmanager

from fastapi import FastAPI

from prices.db import init_db
from prices.logging_config import configure_logging
from prices.settings import get_settings

from prices.api.errors import register_exception_handlers
from prices.api.routes.health import router as health_router
from prices.api.routes.prices import router as prices_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Fail fast if DB unreachable + ensure tables exist
    if get_settings().database_url:
        init_db()
    yield


app = FastAPI(
    title="Prices API",
    version="1.0.0",
    description="Applicable price of a product for a brand at a given date. "
    "When validity windows overlap, the highest priority wins.",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(prices_router, prefix="/api")
