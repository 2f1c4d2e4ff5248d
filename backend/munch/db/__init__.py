import importlib
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from munch.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()

# every model module has to be imported before create_all sees its table
MODEL_MODULES = [
    "munch.models.food",
    "munch.models.cart_item",
    "munch.models.order",
    "munch.models.contact",
    "munch.models.user",
]

SAMPLE_FOODS = [
    {"name": "Burger", "description": "A juicy beef burger", "price_cents": 599, "image_ref": "img_11"},
    {"name": "Pizza", "description": "Cheesy pizza with pepperoni", "price_cents": 799, "image_ref": "img_4"},
]


def _build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions hop between threadpool workers
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, echo=False, connect_args=connect_args)


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                logger.info("Creating database engine for %s", settings.DATABASE_URL)
                _engine = _build_engine(settings.DATABASE_URL)
    return _engine


def dispose_engine() -> None:
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None


def new_session() -> Session:
    return SessionLocal(bind=get_engine())


def init_db(reset: bool = False, seed: Optional[bool] = None) -> None:
    """
    Initialize DB schema.

    Behavior:
      - reset=True (or RESET_DB in settings) drops and recreates every table.
      - Otherwise existing tables are left in place.
      - When seeding is enabled and the food table is empty, the sample foods are inserted.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    engine = get_engine()
    if reset or settings.RESET_DB:
        logger.warning("Resetting database (dropping all tables)")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized")

    if seed is None:
        seed = settings.SEED_FOODS
    if seed:
        seed_sample_foods()


def seed_sample_foods() -> int:
    from munch.repositories.food_repo import FoodRepository

    s = new_session()
    try:
        repo = FoodRepository(s)
        if repo.count():
            return 0
        for ent in SAMPLE_FOODS:
            repo.insert(**ent)
        s.commit()
        logger.info("Seeded %d sample foods", len(SAMPLE_FOODS))
        return len(SAMPLE_FOODS)
    finally:
        s.close()


def get_db() -> Iterator[Session]:
    db = new_session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def smart_transaction(session: Session) -> Iterator[None]:
    """
    Begin a transaction on the given Session.
    If one is already active, open a SAVEPOINT (begin_nested) instead, and
    the caller stays responsible for committing the outer transaction.
    Usage:
        with smart_transaction(db):
            ... DB work ...
    """
    if session.in_transaction():
        cm = session.begin_nested()
    else:
        cm = session.begin()
    with cm:
        yield
