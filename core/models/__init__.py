# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - customer.py: Customer create/update/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .customer import (
    REQUIRED_FIELDS,
    Customer,
    CustomerCreate,
    CustomerUpdate,
)

__all__ = [
    "REQUIRED_FIELDS",
    "Customer",
    "CustomerCreate",
    "CustomerUpdate",
]
