"""
Application startup validation and initialization.

Checks the configuration and the database before the app serves requests.
"""

import logging
import sys
from typing import List, Optional, Tuple

import sqlalchemy as sa
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.config import Settings, get_settings, validate_production_config
from core.database import Base, engine as default_engine

logger = logging.getLogger(__name__)

REQUIRED_TABLES = [
    "users",
    "categories",
    "menu_items",
    "orders",
    "order_items",
    "reservations",
]


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self, settings: Optional[Settings] = None, engine: Optional[Engine] = None):
        self.settings = settings or get_settings()
        self.engine = engine or default_engine
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_environment_config(self) -> bool:
        try:
            validate_production_config(self.settings)
        except ValueError as e:
            self.errors.append(str(e))
            return False
        return True

    def check_database_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except SQLAlchemyError as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return False

    def check_required_tables(self) -> bool:
        """Missing tables are only a warning; migrations may not have run yet."""
        try:
            existing_tables = sa.inspect(self.engine).get_table_names()
        except SQLAlchemyError as e:
            self.warnings.append(f"Could not check database tables: {str(e)}")
            return True

        missing_tables = [t for t in REQUIRED_TABLES if t not in existing_tables]
        if missing_tables:
            self.warnings.append(
                f"Missing database tables: {', '.join(missing_tables)}. "
                "Run migrations with: alembic upgrade head"
            )
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        checks = [
            ("Environment Configuration", self.check_environment_config),
            ("Database Connection", self.check_database_connection),
            ("Database Tables", self.check_required_tables),
        ]

        all_passed = True
        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            if not check_func():
                all_passed = False

        return all_passed, self.errors, self.warnings


def run_startup_checks(settings: Optional[Settings] = None, engine: Optional[Engine] = None):
    """Run all startup validation checks. Exits in production when a check fails."""
    settings = settings or get_settings()
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    validator = StartupValidator(settings, engine)
    passed, errors, warnings = validator.validate_all()

    for warning in warnings:
        logger.warning(f"Startup warning: {warning}")
    for error in errors:
        logger.error(f"Startup error: {error}")

    if not passed and settings.is_production:
        logger.error("Cannot start in production with errors")
        sys.exit(1)
    elif not passed:
        logger.warning("Starting in development mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings


def init_db(engine: Optional[Engine] = None) -> None:
    """Create missing tables. Development convenience; production uses alembic."""
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine or default_engine)


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
