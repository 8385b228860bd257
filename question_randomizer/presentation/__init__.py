"""Presentation layer: FastAPI routers, middleware and HTTP error mapping."""
