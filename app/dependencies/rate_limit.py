from fastapi import Request, Response
from fastapi_limiter.depends import RateLimiter

from app.config import settings


def rate_limit(times: int, seconds: int):
    """RateLimiter dependency that can be switched off with RATE_LIMIT_ENABLED."""
    limiter = RateLimiter(times=times, seconds=seconds)

    async def dependency(request: Request, response: Response):
        if not settings.RATE_LIMIT_ENABLED:
            return
        await limiter(request, response)

    return dependency
