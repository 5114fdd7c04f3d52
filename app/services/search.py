from typing import List, Optional

from sqlalchemy import ColumnElement, Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.models.property import Property
from app.models.types import array_contains
from app.schemas.property import PropertyCreate, PropertyFilters, PropertyUpdate, SortByEnum

logger = get_logger()

DEFAULT_LIMIT = 20

_ORDERINGS = {
    SortByEnum.price_low: (Property.price.asc(),),
    SortByEnum.price_high: (Property.price.desc(),),
    SortByEnum.distance: (Property.distance_to_campus.asc().nulls_last(),),
    SortByEnum.rating: (Property.rating.desc().nulls_last(),),
}


def compile_filters(filters: Optional[PropertyFilters] = None) -> List[ColumnElement]:
    """
    Translate search criteria into predicates over the properties table.

    The returned predicates are meant to be ANDed. The first one always
    restricts results to available listings; each criterion only contributes
    a predicate when it is set, and an empty list means "no restriction".
    """
    conditions = [Property.available.is_(True)]
    if filters is None:
        return conditions

    if filters.search:
        conditions.append(
            or_(
                Property.title.icontains(filters.search, autoescape=True),
                Property.description.icontains(filters.search, autoescape=True),
                Property.address.icontains(filters.search, autoescape=True),
            )
        )
    if filters.min_price is not None:
        conditions.append(Property.price >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(Property.price <= filters.max_price)
    if filters.property_types:
        conditions.append(Property.property_type.in_([t.value for t in filters.property_types]))
    if filters.university:
        conditions.append(Property.university == filters.university)
    # bedrooms is an exact match while bathrooms is a minimum
    if filters.bedrooms is not None:
        conditions.append(Property.bedrooms == filters.bedrooms)
    if filters.bathrooms is not None:
        conditions.append(Property.bathrooms >= filters.bathrooms)
    if filters.max_distance is not None:
        conditions.append(Property.distance_to_campus <= filters.max_distance)
    # every requested amenity must be present
    for amenity in filters.amenities:
        conditions.append(array_contains(Property.amenities, amenity))

    return conditions


def build_search_query(
    filters: Optional[PropertyFilters] = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    sort_by: SortByEnum = SortByEnum.price_low,
) -> Select:
    # id breaks ties so consecutive pages never overlap
    return (
        select(Property)
        .where(*compile_filters(filters))
        .order_by(*_ORDERINGS[sort_by], Property.id.asc())
        .limit(limit)
        .offset(offset)
    )


async def search_properties(
    db: AsyncSession,
    filters: Optional[PropertyFilters] = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    sort_by: SortByEnum = SortByEnum.price_low,
) -> List[Property]:
    query = build_search_query(filters, limit=limit, offset=offset, sort_by=sort_by)
    result = await db.execute(query)
    listings = list(result.scalars().all())
    logger.info("Property search executed", limit=limit, offset=offset, sort_by=sort_by.value, result_count=len(listings))
    return listings


async def get_property_by_id(db: AsyncSession, prop_id: int) -> Optional[Property]:
    return await db.get(Property, prop_id)


async def create_property(db: AsyncSession, data: PropertyCreate) -> Property:
    prop = Property(**data.model_dump())
    db.add(prop)
    await db.commit()
    await db.refresh(prop)
    logger.info("Property created", property_id=prop.id)
    return prop


async def update_property(db: AsyncSession, prop_id: int, data: PropertyUpdate) -> Optional[Property]:
    prop = await db.get(Property, prop_id)
    if prop is None:
        return None
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(prop, field, value)
    await db.commit()
    await db.refresh(prop)
    logger.info("Property updated", property_id=prop_id)
    return prop


async def delete_property(db: AsyncSession, prop_id: int) -> bool:
    result = await db.execute(delete(Property).where(Property.id == prop_id))
    await db.commit()
    return result.rowcount > 0
