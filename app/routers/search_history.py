from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.config import settings
from app.core.database import get_db
from app.dependencies.auth import get_current_user
from app.dependencies.rate_limit import rate_limit
from app.schemas.search_history import SearchHistoryCreate, SearchHistoryOut
from app.schemas.user import UserClaims
from app.services.search_history import add_search_history, get_search_history

logger = get_logger()
router = APIRouter(prefix="/api/search-history", tags=["search-history"])

@router.post(
    "",
    response_model=SearchHistoryOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit(times=30, seconds=60))],
)
async def record_search(
    request: SearchHistoryCreate,
    user: UserClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        entry = await add_search_history(db, user.sub, request)
        logger.info("Recorded search", user_id=user.sub, search_id=entry.id)
        return entry
    except Exception as e:
        logger.error("Recording search failed", user_id=user.sub, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add search history")

@router.get("", response_model=List[SearchHistoryOut])
async def list_searches(
    limit: int = Query(settings.SEARCH_HISTORY_LIMIT, ge=1, le=settings.MAX_PAGE_SIZE),
    user: UserClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await get_search_history(db, user.sub, limit=limit)
    except Exception as e:
        logger.error("Fetching search history failed", user_id=user.sub, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch search history")
