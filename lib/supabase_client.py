# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# Typed wrapper for the user store. One client instance is shared across
# the application and created on first use.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   users = SupabaseClient.fetch_users()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """Error during Supabase operations."""

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Singleton access to the Supabase client.

    All methods are class methods, so callers never instantiate this.

    Example:
        rows = SupabaseClient.fetch_users()
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests and after config changes)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_users(cls, table: str | None = None) -> list[dict[str, Any]]:
        """
        Fetch every row of the users table.

        Rows are returned exactly as the store sends them.

        Args:
            table: Table name (default: settings.USERS_TABLE)

        Returns:
            List of row dicts, empty if the table has no rows

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()
        table_name = table or settings.USERS_TABLE

        try:
            response = client.table(table_name).select("*").execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch users: {e}",
                code="FETCH_USERS_FAILED",
                suggestion="Check that the table exists and the service key can read it",
                details={"table": table_name},
            ) from e

        users = response.data or []
        logger.debug(f"Fetched {len(users)} rows from {table_name}")
        return users

    @classmethod
    def ping(cls, table: str | None = None) -> None:
        """
        Run the cheapest possible query against the users table.

        Raises:
            SupabaseClientError: If the store is unreachable
        """
        client = cls.get_client()
        table_name = table or settings.USERS_TABLE

        try:
            client.table(table_name).select("*").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Store ping failed: {e}",
                code="PING_FAILED",
                details={"table": table_name},
            ) from e
