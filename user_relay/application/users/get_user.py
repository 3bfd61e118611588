"""
Use case: Look up a user in the upstream directory.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: One outbound HTTP call through the directory port.
Failure cases: UserNotFoundError, UpstreamUnavailableError, UpstreamDecodeError.
"""

import logging

from user_relay.application.users.dtos import GetUserQuery, UserResult
from user_relay.domain.users.ports import UserDirectoryPort

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Resolves a user id through the directory port and maps it to a DTO."""

    def __init__(self, directory_port: UserDirectoryPort) -> None:
        self._directory_port = directory_port

    async def execute(self, query: GetUserQuery) -> UserResult:
        """Run the user lookup use case.

        Args:
            query: The lookup request carrying the numeric user id.

        Returns:
            The user's email and name.
        """
        logger.debug("Looking up user_id=%d", query.user_id)
        user = await self._directory_port.get_user(query.user_id)
        return UserResult(email=user.email, name=user.name)
