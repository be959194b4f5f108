# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .library_service import LIBRARY, LibraryService
from .user_service import UserService

__all__ = [
    "LIBRARY",
    "LibraryService",
    "UserService",
]
