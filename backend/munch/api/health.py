import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from munch.db import get_engine

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except SQLAlchemyError:
        logger.exception("Database health check failed")

    return {"status": "ok" if db_ok else "degraded", "db": db_ok}
