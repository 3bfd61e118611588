"""
FastAPI router for the users relay.

``GET /users/{id}`` resolves a user through the upstream directory.
``OPTIONS /users/...`` answers CORS preflights without any lookup.
Other methods fall through to the framework's 405, which the shared
error handlers wrap in the error envelope.
"""

import asyncio
import re
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from user_relay.application.users.dtos import GetUserQuery
from user_relay.application.users.get_user import GetUserUseCase
from user_relay.core.config import settings
from user_relay.domain.users.errors import ClientDisconnectedError, InvalidUserIdError
from user_relay.interfaces.users.dependencies import get_user_use_case
from user_relay.interfaces.users.schemas import ErrorResponse, UserResponse
from user_relay.shared.security.rate_limiting import limiter

T = TypeVar("T")

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
DISCONNECT_POLL_SECONDS = 0.25

router = APIRouter(tags=["users"])


def parse_user_id(user_path: str) -> int:
    """Parse the last path segment after ``/users/`` as a signed 64-bit id.

    Trailing slashes are ignored, so ``/users/7/`` resolves to 7.

    Raises:
        InvalidUserIdError: The segment is empty, not an integer, or out of range.
    """
    segment = user_path.rstrip("/").rsplit("/", 1)[-1]
    if not USER_ID_PATTERN.fullmatch(segment):
        raise InvalidUserIdError(segment)
    user_id = int(segment)
    if not INT64_MIN <= user_id <= INT64_MAX:
        raise InvalidUserIdError(segment)
    return user_id


async def await_unless_disconnected(request: Request, awaitable: Awaitable[T]) -> T:
    """Await ``awaitable``, cancelling it if the client goes away first.

    Raises:
        ClientDisconnectedError: The inbound connection was closed.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_SECONDS)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()


@router.options("/users/{user_path:path}", include_in_schema=False)
async def preflight_user(user_path: str) -> Response:
    """Answer a CORS preflight. Headers are added by the middleware."""
    return Response(status_code=200)


@router.get(
    "/users/{user_path:path}",
    response_model=UserResponse,
    responses={
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get a user",
    description="Look up a user by numeric id in the upstream directory.",
)
@limiter.limit(settings.rate_limit_default)
async def get_user(
    request: Request,
    user_path: str,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> JSONResponse:
    """Relay a user lookup to the upstream directory."""
    user_id = parse_user_id(user_path)
    result = await await_unless_disconnected(
        request, use_case.execute(GetUserQuery(user_id=user_id))
    )
    body = UserResponse(email=result.email, name=result.name)
    return JSONResponse(content=body.model_dump())
