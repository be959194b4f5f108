# =============================================================================
# app/routers/library.py - Library Endpoint
# =============================================================================
# Serves the in-memory book list.
# =============================================================================

from fastapi import APIRouter

from core.models.book import Book
from core.services.library_service import LibraryService

router = APIRouter()


@router.get("/library", response_model=list[Book])
async def list_books():
    """
    List the library.

    Always the same three books, in catalog order.
    """
    return LibraryService.list_books()
