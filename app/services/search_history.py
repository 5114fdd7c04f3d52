from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.search_history import SearchHistory
from app.schemas.search_history import SearchHistoryCreate


async def add_search_history(db: AsyncSession, user_id: str, request: SearchHistoryCreate) -> SearchHistory:
    entry = SearchHistory(
        user_id=user_id,
        search_query=request.search_query,
        filters=request.filters,
    )
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


async def get_search_history(db: AsyncSession, user_id: str, limit: int = 10) -> List[SearchHistory]:
    result = await db.execute(
        select(SearchHistory)
        .where(SearchHistory.user_id == user_id)
        .order_by(SearchHistory.created_at.desc(), SearchHistory.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
