# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - root.py: GET /
# - library.py: GET /library
# - users.py: GET /users
# - forms.py: POST /submitForm
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import forms
from . import health
from . import library
from . import root
from . import users

__all__ = [
    "forms",
    "health",
    "library",
    "root",
    "users",
]
