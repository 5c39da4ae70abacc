"""FastAPI application and service-level routes."""
