from decimal import Decimal
from typing import List, Optional

from fastapi import HTTPException, Query, status
from structlog import get_logger

from app.config import settings
from app.models.types import INT4_MAX
from app.schemas.property import PropertyFilters, PropertyType, SortByEnum
from app.utils.money import MAX_PRICE_DOLLARS, dollars_to_cents

logger = get_logger()


def property_filters(
    search: Optional[str] = Query(None, max_length=200),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0, le=MAX_PRICE_DOLLARS, description="Minimum monthly rent in dollars"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0, le=MAX_PRICE_DOLLARS, description="Maximum monthly rent in dollars"),
    property_types: List[PropertyType] = Query([], alias="propertyTypes"),
    amenities: List[str] = Query([]),
    max_distance: Optional[float] = Query(None, alias="maxDistance", ge=0, allow_inf_nan=False, description="Miles to campus"),
    university: Optional[str] = Query(None),
    bedrooms: Optional[int] = Query(None, ge=0, le=INT4_MAX),
    bathrooms: Optional[float] = Query(None, ge=0, allow_inf_nan=False),
) -> PropertyFilters:
    if min_price is not None and max_price is not None and min_price > max_price:
        logger.warning("Invalid price range", min_price=str(min_price), max_price=str(max_price))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="minPrice cannot be greater than maxPrice")

    search = search.strip() if search else None
    return PropertyFilters(
        search=search or None,
        min_price=dollars_to_cents(min_price) if min_price is not None else None,
        max_price=dollars_to_cents(max_price) if max_price is not None else None,
        property_types=property_types,
        amenities=[a for a in amenities if a],
        max_distance=max_distance,
        university=university or None,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
    )


class Page:
    def __init__(
        self,
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        offset: int = Query(0, ge=0, le=INT4_MAX),
        sort_by: SortByEnum = Query(SortByEnum.price_low, alias="sortBy"),
    ):
        self.limit = limit
        self.offset = offset
        self.sort_by = sort_by
