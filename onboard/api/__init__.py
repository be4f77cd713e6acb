"""HTTP API package - FastAPI application, routes and request/response models."""
