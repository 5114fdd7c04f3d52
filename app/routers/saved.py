from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.core.database import get_db
from app.dependencies.auth import get_current_user
from app.dependencies.rate_limit import rate_limit
from app.models.types import INT4_MAX
from app.schemas.saved_property import (
    SavePropertyRequest,
    SavedPropertyOut,
    SavedPropertyWithProperty,
    SavedStatus,
)
from app.schemas.user import UserClaims
from app.services.saved import (
    PropertyAlreadySaved,
    PropertyNotFound,
    get_saved_properties,
    is_property_saved,
    save_property,
    unsave_property,
)

logger = get_logger()
router = APIRouter(
    prefix="/api/saved-properties",
    tags=["saved-properties"],
    dependencies=[Depends(rate_limit(times=30, seconds=60))],
)

@router.get("", response_model=List[SavedPropertyWithProperty])
async def list_saved(user: UserClaims = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    try:
        return await get_saved_properties(db, user.sub)
    except Exception as e:
        logger.error("Fetching saved properties failed", user_id=user.sub, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch saved properties")

@router.post("", response_model=SavedPropertyOut, status_code=status.HTTP_201_CREATED)
async def save(
    request: SavePropertyRequest,
    user: UserClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        saved = await save_property(db, user.sub, request.property_id)
    except PropertyAlreadySaved:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Property already saved")
    except PropertyNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    except Exception as e:
        logger.error("Save property failed", user_id=user.sub, property_id=request.property_id, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save property")
    logger.info("Saved property", user_id=user.sub, property_id=request.property_id)
    return saved

@router.delete("/{property_id}")
async def unsave(
    property_id: int = Path(..., le=INT4_MAX),
    user: UserClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        removed = await unsave_property(db, user.sub, property_id)
    except Exception as e:
        logger.error("Unsave property failed", user_id=user.sub, property_id=property_id, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to unsave property")
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Saved property not found")
    logger.info("Unsaved property", user_id=user.sub, property_id=property_id)
    return {"message": "Property unsaved successfully"}

@router.get("/{property_id}/status", response_model=SavedStatus)
async def saved_status(
    property_id: int = Path(..., le=INT4_MAX),
    user: UserClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return SavedStatus(is_saved=await is_property_saved(db, user.sub, property_id))
    except Exception as e:
        logger.error("Checking saved status failed", user_id=user.sub, property_id=property_id, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to check saved status")
