"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup.
See question_randomizer/presentation/routers/api/v1/routes/registry.py for
the complete route catalog.

Resources:
    /api/v1/categories      - Question categories
    /api/v1/qualifications  - Question qualifications
    /api/v1/questions       - Question bank
    /api/v1/conversations   - Conversations and messages
    /api/v1/randomizations  - Randomization sessions and their item lists
"""

from fastapi import APIRouter

from question_randomizer.core.config import settings
from question_randomizer.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from question_randomizer.presentation.routers.api.v1.routes.registry import (
    ROUTE_REGISTRY,
)

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
