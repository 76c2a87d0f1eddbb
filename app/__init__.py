# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Error types and their JSON handlers
# - dependencies.py: Depends() providers for the store and settings
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# storage rules to the core/ package.
# =============================================================================
