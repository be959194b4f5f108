# =============================================================================
# app/routers/root.py - Greeting Endpoint
# =============================================================================

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def hello():
    """Return a fixed greeting."""
    return {"hello": "world"}
