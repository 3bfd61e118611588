"""
Response headers middleware.

Adds permissive CORS headers and security-related headers to every
response, error responses included, so browsers surface the real
status instead of a CORS failure.

No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": ", ".join(
        ["Accept", "Accept-Encoding", "Content-Type", "Content-Length"]
    ),
}

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


def add_cors_headers(response: Response) -> Response:
    """Set the CORS headers on a response in place and return it."""
    for header_name, header_value in CORS_HEADERS.items():
        response.headers[header_name] = header_value
    return response


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds CORS and secure headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add headers to the response."""
        response = await call_next(request)
        add_cors_headers(response)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        return response
