"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from user_relay.domain.users.entities import User


class UserDirectoryPort(ABC):
    """Port for looking up users in an external directory."""

    @abstractmethod
    async def get_user(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            UserNotFoundError: The directory has no such user.
            UpstreamUnavailableError: The directory could not be reached.
            UpstreamDecodeError: The directory answered with an unusable body.
        """
        raise NotImplementedError
