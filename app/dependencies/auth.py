from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import httpx
from pydantic import ValidationError
from app.config import settings
from app.schemas.user import UserClaims
from structlog import get_logger

logger = get_logger()
security = HTTPBearer(auto_error=False)

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

async def verify_token(token: str) -> dict:
    """Ask the identity provider for the claims behind a bearer token."""
    async with httpx.AsyncClient(timeout=settings.IDENTITY_TIMEOUT_SECONDS) as client:
        response = await client.get(
            f"{settings.IDENTITY_PROVIDER_URL}/auth/verify",
            headers={"Authorization": f"Bearer {token}"}
        )
        response.raise_for_status()
        return response.json()

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> UserClaims:
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        claims = await verify_token(credentials.credentials)
    except httpx.HTTPStatusError as e:
        logger.warning("Token verification failed", status_code=e.response.status_code)
        raise _unauthorized("Invalid token")
    except httpx.RequestError as e:
        logger.error("Identity provider is unavailable", error=str(e))
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Identity provider is unavailable")

    try:
        user = UserClaims.model_validate(claims)
    except ValidationError:
        logger.warning("Identity provider returned claims without a subject")
        raise _unauthorized("Invalid token")
    logger.debug("User verified", user_id=user.sub)
    return user
