"""Security adapters."""

from question_randomizer.infrastructure.security.jwt_identity_service import (
    JWTIdentityService,
)

__all__ = ["JWTIdentityService"]
