# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Customer API:
# - test_utils.py: Path id parsing
# - test_models.py: Pydantic schema behavior
# - test_customer_service.py: Service logic against an in-memory repository
# - test_customer_repository.py: SQLAlchemy repository against SQLite
# - test_customers_api.py: HTTP contract of the /customers endpoints
# - test_health.py: Health endpoints
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
