from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.core.database import get_db
from app.dependencies.filters import Page, property_filters
from app.dependencies.rate_limit import rate_limit
from app.models.types import INT4_MAX
from app.schemas.property import PropertyFilters, PropertyOut
from app.services.search import get_property_by_id, search_properties

logger = get_logger()
router = APIRouter(prefix="/api/properties", tags=["properties"])

# Handlers return ORM rows; PropertyOut converts cents to dollars on the way out.

@router.get("", response_model=List[PropertyOut], dependencies=[Depends(rate_limit(times=60, seconds=60))])
async def list_properties(
    filters: PropertyFilters = Depends(property_filters),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    logger.info("Received search request", filters=filters.model_dump(mode="json", exclude_defaults=True))
    try:
        return await search_properties(db, filters, limit=page.limit, offset=page.offset, sort_by=page.sort_by)
    except Exception as e:
        logger.error("Search failed", error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch properties")

@router.get("/{id}", response_model=PropertyOut, dependencies=[Depends(rate_limit(times=60, seconds=60))])
async def get_property(id: int = Path(..., le=INT4_MAX), db: AsyncSession = Depends(get_db)):
    try:
        item = await get_property_by_id(db, id)
    except Exception as e:
        logger.error("Get property failed", id=id, error=str(e), exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch property")
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return item
