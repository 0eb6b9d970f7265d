# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The instances themselves are built once in the application lifespan and
# stored on app.state.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.customer_service import CustomerService
from lib.database import Database


def get_customer_service(request: Request) -> CustomerService:
    """
    Get the CustomerService created at startup.

    Tests can swap it out through app.dependency_overrides.
    """
    return request.app.state.customer_service


def get_database(request: Request) -> Database:
    """Get the Database created at startup."""
    return request.app.state.database


# Type aliases for dependency injection
CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
DatabaseDep = Annotated[Database, Depends(get_database)]
