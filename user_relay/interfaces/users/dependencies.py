"""
Dependency injection for the users bounded context.

Wires the shared upstream HTTP client into the directory adapter
and the adapter into the use case. The client itself is created
once by the application lifespan and lives on ``app.state``.
"""

import httpx
from fastapi import Depends, Request

from user_relay.application.users.get_user import GetUserUseCase
from user_relay.core.config import settings
from user_relay.domain.users.ports import UserDirectoryPort
from user_relay.infrastructure.users.user_directory_adapter import (
    HttpUserDirectoryAdapter,
)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the upstream client owned by the application lifespan."""
    return request.app.state.http_client


def get_user_directory(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> UserDirectoryPort:
    """Build the HTTP user directory adapter."""
    return HttpUserDirectoryAdapter(http_client=http_client, settings=settings)


def get_user_use_case(
    directory: UserDirectoryPort = Depends(get_user_directory),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(directory_port=directory)
