import logging
import threading

import pytest

from munch.db import dispose_engine, get_engine, new_session, smart_transaction
from munch.logging_config import HANDLER_NAME, configure_logging
from munch.models.food import Food


def test_engine_is_a_singleton():
    assert get_engine() is get_engine()


def test_engine_created_once_across_threads():
    dispose_engine()
    seen = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        seen.append(get_engine())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(e is seen[0] for e in seen)


def test_smart_transaction_begins_and_commits(db):
    assert not db.in_transaction()
    with smart_transaction(db):
        assert db.in_transaction()
        assert not db.in_nested_transaction()
        db.add(Food(name="Soup", price_cents=350))
    assert not db.in_transaction()

    other = new_session()
    try:
        assert [f.name for f in other.query(Food).all()] == ["Soup"]
    finally:
        other.close()


def test_smart_transaction_nests_inside_active_transaction(db):
    db.query(Food).count()
    assert db.in_transaction()
    with smart_transaction(db):
        assert db.in_nested_transaction()
    # outer transaction is left to the caller
    assert db.in_transaction()
    db.rollback()


def test_smart_transaction_rolls_back_on_error(db):
    with pytest.raises(RuntimeError):
        with smart_transaction(db):
            db.add(Food(name="Soup", price_cents=350))
            db.flush()
            raise RuntimeError("boom")
    assert db.query(Food).count() == 0


def test_configure_logging_adds_one_handler():
    configure_logging("debug")
    configure_logging("info")
    root = logging.getLogger()
    assert [h.get_name() for h in root.handlers].count(HANDLER_NAME) == 1
    assert root.level == logging.INFO
