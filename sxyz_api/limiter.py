"""
Rate limiter shared by the whole app.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import Settings

# Every route shares this scope, so a client has one budget across the API
GLOBAL_SCOPE = "global"


def create_limiter() -> Limiter:
    """Build a fresh in-memory fixed-window limiter keyed on the client address."""
    return Limiter(
        key_func=get_remote_address,
        strategy="fixed-window",
        headers_enabled=True,
    )


def global_limit(limiter: Limiter, settings: Settings):
    """Decorator applying the configured limit against the shared global counter."""
    return limiter.shared_limit(settings.rate_limit, scope=GLOBAL_SCOPE)
