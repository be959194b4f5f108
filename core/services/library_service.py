# =============================================================================
# core/services/library_service.py - Library Catalog
# =============================================================================
# The library is a fixed list held in memory for the life of the process.
# =============================================================================

from core.models.book import Book

LIBRARY: tuple[Book, ...] = (
    Book(id=1, title="The Great Gatsby", author="F. Scott Fitzgerald"),
    Book(id=2, title="To Kill a Mockingbird", author="Harper Lee"),
    Book(id=3, title="1984", author="George Orwell"),
)


class LibraryService:
    """Read access to the in-memory library."""

    @staticmethod
    def list_books() -> list[Book]:
        """Return every book, in catalog order."""
        return list(LIBRARY)
