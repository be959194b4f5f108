# =============================================================================
# core/models/book.py - Book Schema
# =============================================================================
# A library entry. The library itself is a constant list of these,
# see core/services/library_service.py.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    One record of the in-memory library.

    Example:
        {
            "id": 1,
            "title": "The Great Gatsby",
            "author": "F. Scott Fitzgerald"
        }
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Book identifier"
    )

    title: str = Field(
        ...,
        description="Book title"
    )

    author: str = Field(
        ...,
        description="Author name"
    )
