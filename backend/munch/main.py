import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from munch.api.health import router as health_router
from munch.api.routes_auth import router as auth_router
from munch.api.routes_cart import router as cart_router
from munch.api.routes_checkout import router as checkout_router
from munch.api.routes_contact import router as contact_router
from munch.api.routes_foods import router as foods_router
from munch.api.routes_navigation import router as navigation_router
from munch.api.routes_order import router as order_router
from munch.api.routes_screens import router as screens_router
from munch import __version__
from munch.config import settings
from munch.db import dispose_engine, init_db
from munch.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    logger.info("Munch backend started")
    try:
        yield
    finally:
        dispose_engine()


app = FastAPI(title="Munch - Food Ordering Backend", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(navigation_router)

app.include_router(screens_router)

app.include_router(auth_router)

app.include_router(foods_router)

app.include_router(cart_router)

app.include_router(checkout_router)

app.include_router(order_router)

app.include_router(contact_router)
