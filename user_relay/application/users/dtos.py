"""
Data Transfer Objects for the users application layer.

Plain frozen dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for looking up a single user.

    Attributes:
        user_id: Numeric id parsed from the request path.
    """

    user_id: int


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a resolved user.

    Attributes:
        email: The user's email address.
        name: The user's display name.
    """

    email: str
    name: str
