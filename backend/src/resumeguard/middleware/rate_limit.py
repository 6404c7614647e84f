"""Rate limiting middleware using slowapi."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from resumeguard.config import get_settings

settings = get_settings()


# Uploads are anonymous, so limits are keyed on client IP
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",  # In-memory storage (suitable for single instance)
    enabled=settings.rate_limit_enabled,
)


# Export limiter
__all__ = ["limiter"]
