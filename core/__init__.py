# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the customer business logic:
# - models/: Pydantic schemas for request and response bodies
# - repositories/: Persistence contract and its SQLAlchemy implementation
# - services/: Operations called by the API routers
# =============================================================================
