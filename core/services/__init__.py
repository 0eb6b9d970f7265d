# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .customer_service import CustomerService

__all__ = [
    "CustomerService",
]
