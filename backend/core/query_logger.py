# backend/core/query_logger.py

import logging
import time
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine import Engine

from .config import get_settings

logger = logging.getLogger("sqlalchemy.engine")
query_logger = logging.getLogger("query_performance")


class QueryLogger:
    """Collects query timings and reports slow statements"""

    def __init__(self, slow_query_threshold: float = 1.0, log_statements: bool = False):
        self.slow_query_threshold = slow_query_threshold
        self.log_statements = log_statements
        self.query_stats: Dict[str, Any] = {
            "total_queries": 0,
            "slow_queries": 0,
            "total_time": 0.0,
        }

    def record(self, statement: str, elapsed: float) -> None:
        self.query_stats["total_queries"] += 1
        self.query_stats["total_time"] += elapsed

        if elapsed > self.slow_query_threshold:
            self.query_stats["slow_queries"] += 1
            query_logger.warning("SLOW QUERY (%.3fs): %s...", elapsed, statement[:200])
        elif self.log_statements:
            logger.debug("Query complete in %.3fs", elapsed)


def setup_query_logging(engine: Engine) -> QueryLogger:
    """
    Attach timing listeners to an SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance

    Returns:
        The QueryLogger collecting statistics for this engine
    """
    settings = get_settings()
    tracker = QueryLogger(
        slow_query_threshold=settings.slow_query_threshold_seconds,
        log_statements=settings.log_sql_queries,
    )

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.perf_counter())
        if tracker.log_statements:
            logger.debug("Start Query: %s", statement)

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        started = conn.info["query_start_time"].pop(-1)
        tracker.record(statement, time.perf_counter() - started)

    if engine.url.get_backend_name() == "sqlite":

        @event.listens_for(engine, "connect")
        def enable_sqlite_foreign_keys(dbapi_conn, connection_record):
            """SQLite ignores foreign keys unless asked per connection"""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return tracker
