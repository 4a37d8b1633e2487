"""
Rate limiting setup.

Uses slowapi to enforce a per-client default limit on every route.
A limiter is built per application so each app (and each test app)
keeps its own counters.
"""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from products_api.core.config import Settings


def build_limiter(app_settings: Settings) -> Limiter:
    """Create a limiter from the rate limit settings."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[app_settings.rate_limit_default],
        enabled=app_settings.rate_limit_enabled,
    )


def install_rate_limiting(app: FastAPI, app_settings: Settings) -> Limiter:
    """Attach a limiter to the app and enforce it through middleware.

    Exceeded limits raise RateLimitExceeded, which the error handlers
    turn into a 429 response. The middleware looks up the endpoint of
    each route to apply limits; that lookup needs FastAPI below 0.120,
    which pyproject.toml pins.
    """
    limiter = build_limiter(app_settings)
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    return limiter
