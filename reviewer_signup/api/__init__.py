"""HTTP layer - FastAPI application, routes and dependencies."""
