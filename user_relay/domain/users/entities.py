"""
Domain entities for the users bounded context.

No framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user record as exposed by the relay.

    Only the fields the relay forwards are kept; anything else the
    upstream directory returns is dropped at the adapter boundary.
    """

    email: str
    name: str
