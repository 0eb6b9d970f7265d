# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Customer API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings
from app.exceptions import (
    CustomerAPIException,
    customer_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import customers, health
from app.version import VERSION
from core.repositories.customer_repository import SQLAlchemyCustomerRepository
from core.services.customer_service import CustomerService
from lib.database import Database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Create the database engine, tables, and the customer service
    - Shutdown: Dispose of the engine's connection pool
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting Customer API in {app_settings.ENVIRONMENT} mode")

    database = Database(app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)
    if app_settings.DATABASE_CREATE_TABLES:
        await database.create_tables()

    app.state.database = database
    app.state.customer_service = CustomerService(
        SQLAlchemyCustomerRepository(database.session_factory)
    )

    yield

    # Shutdown
    logger.info("Shutting down Customer API")
    await database.dispose()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the environment settings

    Returns:
        FastAPI: Application with middleware, handlers and routers attached
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Customer API",
        description="CRUD operations over customers.",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Customers",
                "description": "Create, read, update and delete customers",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )
    app.state.settings = app_settings

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(CustomerAPIException, customer_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        customers.router,
        prefix="/customers",
        tags=["Customers"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Customer API",
            "version": VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
