# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# - Sets up mock environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """Test client bound to the application."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_user_rows():
    """Rows as the users table returns them."""
    return [
        {
            "id": "6f1c2a9e-0b1d-4a53-9d1f-1c2b3a4d5e6f",
            "name": "Alice",
            "email": "alice@example.com",
            "created_at": "2024-01-15T10:00:00+00:00",
        },
        {
            "id": "7a2d3b0f-1c2e-4b64-8e20-2d3c4b5e6f70",
            "name": "Bob",
            "email": "bob@example.com",
            "created_at": "2024-01-16T09:30:00+00:00",
        },
    ]


@pytest.fixture(autouse=True)
def reset_supabase_client():
    """Never reuse a cached store client between tests."""
    from lib.supabase_client import SupabaseClient

    SupabaseClient.reset()
    yield
    SupabaseClient.reset()
