"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client limits on the lookup route,
which fans out to the upstream directory.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from user_relay.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
)
