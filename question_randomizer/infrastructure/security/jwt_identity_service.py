"""Bearer token validation.

Tokens are issued by an external identity provider. This service only
verifies the signature (and expiry/audience when present) and extracts
the user identifier claim.

Usage:
    service = JWTIdentityService(secret_key=settings.jwt_secret_key)
    match service.resolve_user_id(token):
        case Success(value=user_id):
            ...
        case Failure(error=error):
            ...
"""

import jwt
from jwt.exceptions import InvalidTokenError

from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import AuthenticationError
from question_randomizer.core.result import Failure, Result, Success


class JWTIdentityService:
    """Validates bearer JWTs and extracts the user ID claim."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        user_id_claim: str = "sub",
        audience: str | None = None,
    ) -> None:
        """Initialize with verification settings.

        Args:
            secret_key: Key used to verify signatures.
            algorithm: Accepted signing algorithm.
            user_id_claim: Claim holding the user identifier.
            audience: Expected ``aud`` claim, or None to skip the check.
        """
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._user_id_claim = user_id_claim
        self._audience = audience

    def resolve_user_id(self, token: str) -> Result[str, AuthenticationError]:
        """Validate a token and return its user ID.

        Args:
            token: Raw bearer token.

        Returns:
            Success(user_id) for a valid token carrying a non-empty user
            claim, Failure(AuthenticationError) otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_TOKEN,
                    message="Invalid or expired token",
                )
            )

        user_id = payload.get(self._user_id_claim)
        if not user_id:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_TOKEN,
                    message="Token has no user identifier",
                )
            )
        return Success(value=str(user_id))
