# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - customers.py: Customer CRUD endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import customers
from . import health

__all__ = [
    "customers",
    "health",
]
