# =============================================================================
# core/models/user.py - User Record Schema
# =============================================================================
# Documents the shape of rows in the users table. The table schema and its
# lifecycle are owned by the store; GET /users forwards rows as-is.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    A user row as stored in Supabase.

    Extra columns (id, created_at, ...) are allowed so a row read from the
    store always parses.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(
        ...,
        description="Display name"
    )

    email: str = Field(
        ...,
        description="Contact email"
    )
