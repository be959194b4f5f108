# =============================================================================
# core/services/user_service.py - User Lookup
# =============================================================================
# Reads user records from the external store.
# Separates HTTP concerns from store access.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.config import settings
from app.exceptions import UserStoreUnavailableError

logger = logging.getLogger(__name__)


class UserService:
    """Service for user lookups."""

    @staticmethod
    def list_users() -> list[dict[str, Any]]:
        """
        Fetch all users from the store.

        Returns:
            Store rows, unmodified

        Raises:
            UserStoreUnavailableError: If the store cannot be queried
        """
        try:
            return SupabaseClient.fetch_users(settings.USERS_TABLE)
        except SupabaseClientError as e:
            logger.error(f"Failed to list users: {e}")
            raise UserStoreUnavailableError(settings.USERS_TABLE, e.message) from e
