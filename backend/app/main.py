from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.exceptions import register_exception_handlers
from app.startup import configure_logging, init_db, run_startup_checks

# ========== Accounts ==========
from modules.auth.routes.auth_routes import router as auth_router

# ========== Menu Management ==========
from modules.menu.routes.menu_routes import router as menu_router

# ========== Orders Management ==========
from modules.orders.routes.order_routes import router as order_router

# ========== Reservations ==========
from modules.reservations.routes.reservation_routes import router as reservation_router

# ========== Analytics ==========
from modules.analytics.routers import analytics_router

# ========== Health ==========
from modules.health.routes.health_routes import router as health_router


def create_app(settings: Optional[Settings] = None, run_checks: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    `run_checks=False` skips the startup database checks and table creation,
    which tests do because they manage their own schema.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if run_checks:
            run_startup_checks(settings)
            if settings.is_development:
                init_db()
        yield

    app = FastAPI(
        title=settings.app_name,
        description="""
    Menu browsing, online ordering, table reservations and an admin
    dashboard for a single restaurant.

    ## Reservations
    - Available time slots per date and party size
    - Booking, upcoming list and status updates

    ## Orders
    - Dine-in, pickup and delivery orders with prices taken from the menu
    """,
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Register exception handlers for consistent error responses
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========== Include all routers ==========
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(menu_router)
    app.include_router(order_router)
    app.include_router(reservation_router)
    app.include_router(analytics_router)

    return app


app = create_app()
