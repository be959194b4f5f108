# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - book.py: Book record served by GET /library
# - form.py: FormSubmission parsed by POST /submitForm
# - user.py: UserRecord, the documented shape of the users table
# =============================================================================

from .book import Book
from .form import FormSubmission
from .user import UserRecord

__all__ = [
    "Book",
    "FormSubmission",
    "UserRecord",
]
