# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_models.py: Pydantic models and the library catalog
# - test_routes.py: Endpoints through the FastAPI test client
# - test_users.py: User store wrapper, service and endpoint (store mocked)
# - test_server.py: Port binding and startup failure handling
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
