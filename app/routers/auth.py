from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.core.database import get_db
from app.dependencies.auth import get_current_user
from app.schemas.user import UserClaims, UserOut
from app.services.user import upsert_user

logger = get_logger()
router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.get("/user", response_model=UserOut)
async def current_user(user: UserClaims = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Return the caller's profile, creating or refreshing it from the identity claims."""
    try:
        return await upsert_user(db, user)
    except Exception as e:
        logger.error("Fetching user failed", user_id=user.sub, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch user")
