# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - orm.py: SQLAlchemy declarative tables
# - database.py: Async engine/session wrapper and database errors
# - utils.py: Shared utilities (path id parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, DatabaseError, RecordNotFoundError
from lib.orm import Base, CustomerRecord
from lib.utils import parse_customer_id

__all__ = [
    # Database
    "Database",
    "DatabaseError",
    "RecordNotFoundError",
    # ORM
    "Base",
    "CustomerRecord",
    # Utils
    "parse_customer_id",
]
