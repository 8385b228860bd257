"""Bearer authentication and mediator dependencies.

Tokens are only validated here (they are issued elsewhere). Two entry
points use the same accessor:

- ``require_authenticated_user``: route-level guard added by the route
  generator for AUTHENTICATED routes. Rejects the request with 401 before
  any body is processed.
- ``RequestCurrentUser``: the ``CurrentUserProtocol`` implementation that
  handlers receive through the mediator.

Usage:
    async def list_categories(
        request: Request,
        mediator: Annotated[Mediator, Depends(get_mediator)],
    ) -> list[CategoryResponse] | JSONResponse:
        result = await mediator.send(GetCategories())
"""

from functools import partial
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from question_randomizer.application.cqrs import Mediator
from question_randomizer.core.container import (
    create_handler,
    get_db_session,
    get_dispatcher,
    get_identity_service,
)
from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import AuthenticationError
from question_randomizer.core.result import Failure, Result, Success
from question_randomizer.infrastructure.security.jwt_identity_service import (
    JWTIdentityService,
)

# auto_error=False: a missing header is reported by the accessor as a
# domain AuthenticationError, then mapped to 401 like an invalid token
bearer_scheme = HTTPBearer(auto_error=False)


class RequestCurrentUser:
    """Current-user accessor for one HTTP request.

    The token is validated on the first ``get_user_id`` call and the
    outcome is cached for the rest of the request.
    """

    def __init__(
        self,
        credentials: HTTPAuthorizationCredentials | None,
        identity_service: JWTIdentityService,
    ) -> None:
        self._credentials = credentials
        self._identity_service = identity_service
        self._resolved: Result[str, AuthenticationError] | None = None

    def get_user_id(self) -> Result[str, AuthenticationError]:
        if self._resolved is None:
            self._resolved = self._resolve()
        return self._resolved

    def _resolve(self) -> Result[str, AuthenticationError]:
        if self._credentials is None or not self._credentials.credentials:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_REQUIRED,
                    message="Authentication required",
                )
            )
        return self._identity_service.resolve_user_id(self._credentials.credentials)


async def get_current_user_accessor(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    identity_service: Annotated[JWTIdentityService, Depends(get_identity_service)],
) -> RequestCurrentUser:
    """Build the request's current-user accessor (cached per request by FastAPI)."""
    return RequestCurrentUser(credentials, identity_service)


async def require_authenticated_user(
    current_user: Annotated[RequestCurrentUser, Depends(get_current_user_accessor)],
) -> str:
    """Reject unauthenticated requests with 401.

    Returns:
        The authenticated user's ID.

    Raises:
        HTTPException 401: If the token is missing, invalid or expired.
    """
    match current_user.get_user_id():
        case Success(value=user_id):
            return user_id
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers={"WWW-Authenticate": "Bearer"},
            )


async def get_mediator(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    current_user: Annotated[RequestCurrentUser, Depends(get_current_user_accessor)],
) -> Mediator:
    """Request-scoped mediator.

    Handlers built through it share the request's database session and
    current-user accessor.
    """
    return Mediator(
        get_dispatcher(),
        partial(create_handler, session=session, current_user=current_user),
    )


AuthenticatedUserId = Annotated[str, Depends(require_authenticated_user)]
MediatorDep = Annotated[Mediator, Depends(get_mediator)]
