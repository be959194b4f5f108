# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   python scripts/serve.py
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    BookshelfException,
    bookshelf_exception_handler,
    validation_exception_handler,
)
from app.routers import forms, health, library, root, users

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(f"Starting Bookshelf API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Bookshelf API")


app = FastAPI(
    title="Bookshelf API",
    description="""
## Bookshelf API

A small demo service.

| Endpoint | Purpose |
|----------|---------|
| `GET /` | Greeting |
| `GET /library` | The book list |
| `GET /users` | Users from the user store |
| `POST /submitForm` | Echo a name/email form as text |
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Root", "description": "Greeting"},
        {"name": "Library", "description": "In-memory book list"},
        {"name": "Users", "description": "User records from Supabase"},
        {"name": "Forms", "description": "Form submissions"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(BookshelfException, bookshelf_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(root.router, tags=["Root"])
app.include_router(library.router, tags=["Library"])
app.include_router(users.router, tags=["Users"])
app.include_router(forms.router, tags=["Forms"])
app.include_router(health.router, tags=["Health"])
