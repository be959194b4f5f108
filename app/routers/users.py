# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Reads users from the external store. The Supabase client is synchronous,
# so the lookup runs in the thread pool and the handler awaits it.
# =============================================================================

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from core.models.user import UserRecord
from core.services.user_service import UserService

router = APIRouter()


@router.get(
    "/users",
    responses={
        200: {"model": list[UserRecord], "description": "Rows of the users table"},
        503: {"description": "User store unavailable"},
    },
)
async def list_users():
    """
    List users.

    Returns the store rows exactly as the store sends them.
    """
    return await run_in_threadpool(UserService.list_users)
