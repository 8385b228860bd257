"""Current-user accessor port.

Handlers resolve the acting user through this port instead of receiving a
user ID in the command, so every use case goes through the same
authentication check.
"""

from typing import Protocol

from question_randomizer.core.errors import AuthenticationError
from question_randomizer.core.result import Result


class CurrentUserProtocol(Protocol):
    """Resolves the identity of the user behind the current request."""

    def get_user_id(self) -> Result[str, AuthenticationError]:
        """Return the acting user's ID.

        Returns:
            Success(user_id) when a user is authenticated,
            Failure(AuthenticationError) otherwise.
        """
        ...
