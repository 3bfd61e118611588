"""
Domain-specific errors for the users bounded context.

All errors raised below the interface layer are defined here.
They are mapped to HTTP responses by the shared error handlers.
No framework imports allowed.
"""


class UserRelayError(Exception):
    """Base error for all user relay errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidUserIdError(UserRelayError):
    """Raised when the path segment cannot be parsed as a user id.

    Surfaced exactly like a missing user: malformed ids are treated
    as absent resources, not as a client syntax error.
    """

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"Invalid user id: {raw_id!r}")
        self.raw_id = raw_id


class UserNotFoundError(UserRelayError):
    """Raised when the upstream directory reports no such user."""

    def __init__(self, user_id: int) -> None:
        super().__init__("user not found")
        self.user_id = user_id


class UpstreamError(UserRelayError):
    """Base error for failures talking to the upstream directory."""


class UpstreamUnavailableError(UpstreamError):
    """Raised on transport failures: DNS, refused connection, timeout."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Upstream request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class UpstreamDecodeError(UpstreamError):
    """Raised when the upstream body cannot be decoded into a User."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not decode upstream response from {url}: {reason}")
        self.url = url
        self.reason = reason


class ClientDisconnectedError(UserRelayError):
    """Raised when the inbound client goes away before the lookup completes."""

    def __init__(self) -> None:
        super().__init__("Client disconnected before the response was ready")
