import logging

from sqlalchemy import create_engine, text

from core.query_logger import QueryLogger, setup_query_logging


def test_slow_queries_are_counted_and_logged(caplog):
    tracker = QueryLogger(slow_query_threshold=0.5)

    with caplog.at_level(logging.WARNING, logger="query_performance"):
        tracker.record("SELECT * FROM reservations", 0.1)
        tracker.record("SELECT * FROM orders", 0.9)

    assert tracker.query_stats["total_queries"] == 2
    assert tracker.query_stats["slow_queries"] == 1
    assert "SLOW QUERY" in caplog.text
    assert "orders" in caplog.text


def test_engine_listeners_record_every_statement():
    engine = create_engine("sqlite://")
    tracker = setup_query_logging(engine)

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
        foreign_keys = conn.execute(text("PRAGMA foreign_keys")).scalar()

    assert tracker.query_stats["total_queries"] >= 2
    assert foreign_keys == 1
