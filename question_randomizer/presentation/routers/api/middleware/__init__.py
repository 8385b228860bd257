"""API middleware and request-scoped dependencies."""
