"""
Centralized error handlers for FastAPI.

Maps domain and framework errors to the error envelope
``{"error": <message>, "status_code": <status>}``.
Upstream error details are logged, never returned to clients.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_relay.domain.users.errors import (
    ClientDisconnectedError,
    InvalidUserIdError,
    UpstreamDecodeError,
    UpstreamUnavailableError,
    UserNotFoundError,
    UserRelayError,
)
from user_relay.shared.security.headers import CORS_HEADERS, SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_429 = 429
HTTP_499 = 499
HTTP_500 = 500


def error_response(
    status_code: int, error: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "status_code": status_code},
        headers=headers,
    )


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidUserIdError)
    async def handle_invalid_user_id(
        _request: Request, exc: InvalidUserIdError
    ) -> JSONResponse:
        """Unparsable ids are reported exactly like unknown routes."""
        logger.info("Rejected user id %r", exc.raw_id)
        return error_response(HTTP_404, _reason(HTTP_404))

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle users the upstream directory does not know."""
        logger.info("User not found: %d", exc.user_id)
        return error_response(HTTP_404, exc.message)

    @app.exception_handler(UpstreamUnavailableError)
    async def handle_upstream_unavailable(
        _request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        """Handle transport failures talking to the upstream directory."""
        logger.error("Upstream unavailable: %s", exc.message)
        return error_response(HTTP_500, "upstream service unavailable")

    @app.exception_handler(UpstreamDecodeError)
    async def handle_upstream_decode(
        _request: Request, exc: UpstreamDecodeError
    ) -> JSONResponse:
        """Handle upstream bodies that are not user documents."""
        logger.error("Upstream decode failure: %s", exc.message)
        return error_response(HTTP_500, "invalid upstream response")

    @app.exception_handler(ClientDisconnectedError)
    async def handle_client_disconnected(
        _request: Request, exc: ClientDisconnectedError
    ) -> Response:
        """Nobody is listening any more; drop the response body."""
        logger.info(exc.message)
        return Response(status_code=HTTP_499)

    @app.exception_handler(UserRelayError)
    async def handle_user_relay(
        _request: Request, exc: UserRelayError
    ) -> JSONResponse:
        """Catch-all for unhandled relay errors."""
        logger.error("Unhandled relay error: %s", exc.message)
        return error_response(HTTP_500, _reason(HTTP_500))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework errors (unknown route, wrong method) in the envelope."""
        return error_response(
            exc.status_code,
            _reason(exc.status_code),
            headers=exc.headers,
        )

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit_exceeded(
        request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Handle rate limit exceeded errors."""
        logger.warning(
            "Rate limit exceeded for %s: %s",
            request.client.host if request.client else "unknown",
            exc.detail,
        )
        return error_response(HTTP_429, _reason(HTTP_429))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs outside the headers middleware, so the headers are set here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(
            HTTP_500,
            _reason(HTTP_500),
            headers={**CORS_HEADERS, **SECURE_HEADERS},
        )
