"""
Adapter: Upstream user directory over HTTP.

Implements UserDirectoryPort with a shared httpx.AsyncClient.
One GET per lookup; no retries, no caching.
"""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from user_relay.core.config import Settings
from user_relay.domain.users.entities import User
from user_relay.domain.users.errors import (
    UpstreamDecodeError,
    UpstreamUnavailableError,
    UserNotFoundError,
)
from user_relay.domain.users.ports import UserDirectoryPort

logger = logging.getLogger(__name__)

HTTP_404 = 404


class UpstreamUserPayload(BaseModel):
    """Shape of the upstream user document.

    Unknown fields are ignored. Missing fields decode to empty strings.
    """

    email: str = ""
    name: str = ""


class HttpUserDirectoryAdapter(UserDirectoryPort):
    """Concrete adapter for the upstream users REST resource."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        """Initialize with a shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient, owned by the app lifespan.
            settings: Source of the upstream URL and timeout.
        """
        self._client = http_client
        self._settings = settings

    async def get_user(self, user_id: int) -> User:
        """Fetch one user from the upstream directory.

        Args:
            user_id: Numeric id substituted into the upstream URL.

        Returns:
            The decoded User.

        Raises:
            UserNotFoundError: Upstream answered 404.
            UpstreamUnavailableError: Transport failure or timeout.
            UpstreamDecodeError: Body is not a JSON user object.
        """
        url = self._settings.user_url(user_id)

        try:
            response = await self._client.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._settings.upstream_timeout_seconds,
            )
        except httpx.TransportError as exc:
            logger.warning("Upstream GET %s failed: %r", url, exc)
            raise UpstreamUnavailableError(url, str(exc) or type(exc).__name__) from exc

        if response.status_code == HTTP_404:
            logger.info("Upstream has no user_id=%d", user_id)
            raise UserNotFoundError(user_id)

        try:
            payload = UpstreamUserPayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning(
                "Upstream GET %s returned undecodable body (status=%d): %s",
                url,
                response.status_code,
                exc,
            )
            raise UpstreamDecodeError(url, str(exc)) from exc

        return User(email=payload.email, name=payload.name)
