# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - server.py: Port binding and uvicorn startup
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# to the core/ package.
# =============================================================================

__version__ = "1.0.0"
