# =============================================================================
# core/repositories/__init__.py - Persistence Layer Exports
# =============================================================================

from .customer_repository import CustomerRepository, SQLAlchemyCustomerRepository

__all__ = [
    "CustomerRepository",
    "SQLAlchemyCustomerRepository",
]
