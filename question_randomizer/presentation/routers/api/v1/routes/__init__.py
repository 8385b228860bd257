"""Route Metadata Registry.

Exports:
    ROUTE_REGISTRY: All v1 endpoints
    register_routes_from_registry: Build FastAPI routes from the registry
"""

from question_randomizer.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from question_randomizer.presentation.routers.api.v1.routes.registry import (
    ROUTE_REGISTRY,
)

__all__ = [
    "ROUTE_REGISTRY",
    "register_routes_from_registry",
]
