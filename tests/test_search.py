import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from app.models.property import Property
from app.models.types import array_contains
from app.schemas.property import PropertyFilters, PropertyUpdate, SortByEnum
from app.services.search import (
    build_search_query,
    compile_filters,
    create_property,
    delete_property,
    get_property_by_id,
    search_properties,
    update_property,
)
from conftest import make_property


async def _titles(db, filters=None, **kwargs):
    return [p.title for p in await search_properties(db, filters, **kwargs)]


def test_unset_filters_only_restrict_availability():
    assert len(compile_filters(None)) == 1
    assert len(compile_filters(PropertyFilters())) == 1


def test_empty_lists_add_no_predicate():
    assert len(compile_filters(PropertyFilters(property_types=[], amenities=[]))) == 1


def test_one_predicate_per_amenity():
    filters = PropertyFilters(amenities=["WiFi Included", "Parking", "Gym"], min_price=100)
    assert len(compile_filters(filters)) == 1 + 1 + 3


def test_amenity_membership_renders_as_any_on_postgres():
    stmt = select(Property.id).where(array_contains(Property.amenities, "Parking"))
    sql = str(stmt.compile(dialect=postgresql.dialect()))
    assert "= ANY(properties.amenities)" in sql


def test_default_query_orders_by_price_then_id():
    sql = str(build_search_query().compile(dialect=postgresql.dialect()))
    assert "ORDER BY properties.price ASC, properties.id ASC" in sql


@pytest.mark.asyncio
async def test_no_filters_returns_available_sorted_by_price(db_session, listings):
    assert await _titles(db_session) == [
        "Shared House on Elm",
        "Campus Dorm Room",
        "Sunny Studio near Campus",
        "Two Bedroom Apartment",
        "Luxury Loft",
    ]


@pytest.mark.asyncio
async def test_min_price_in_cents(db_session, listings):
    results = await search_properties(db_session, PropertyFilters(min_price=100000))
    assert [p.title for p in results] == ["Two Bedroom Apartment", "Luxury Loft"]
    assert all(p.price >= 100000 for p in results)


@pytest.mark.asyncio
async def test_price_range_is_inclusive(db_session, listings):
    filters = PropertyFilters(min_price=70000, max_price=125000)
    assert await _titles(db_session, filters) == [
        "Campus Dorm Room",
        "Sunny Studio near Campus",
        "Two Bedroom Apartment",
    ]


@pytest.mark.asyncio
async def test_property_types_membership(db_session, listings):
    filters = PropertyFilters(property_types=["studio", "dorm"])
    assert await _titles(db_session, filters) == ["Campus Dorm Room", "Sunny Studio near Campus"]


@pytest.mark.asyncio
async def test_amenities_require_all(db_session, listings):
    filters = PropertyFilters(amenities=["WiFi Included", "Parking"])
    results = await search_properties(db_session, filters)
    assert [p.title for p in results] == ["Campus Dorm Room", "Two Bedroom Apartment", "Luxury Loft"]
    for prop in results:
        assert {"WiFi Included", "Parking"} <= set(prop.amenities)


@pytest.mark.asyncio
async def test_bedrooms_is_exact(db_session, listings):
    assert await _titles(db_session, PropertyFilters(bedrooms=1)) == ["Campus Dorm Room"]
    assert await _titles(db_session, PropertyFilters(bedrooms=2)) == ["Two Bedroom Apartment", "Luxury Loft"]


@pytest.mark.asyncio
async def test_bathrooms_is_a_minimum(db_session, listings):
    assert await _titles(db_session, PropertyFilters(bathrooms=1.5)) == [
        "Shared House on Elm",
        "Two Bedroom Apartment",
        "Luxury Loft",
    ]


@pytest.mark.asyncio
async def test_max_distance(db_session, listings):
    assert await _titles(db_session, PropertyFilters(max_distance=1.2)) == [
        "Campus Dorm Room",
        "Sunny Studio near Campus",
        "Two Bedroom Apartment",
    ]


@pytest.mark.asyncio
async def test_university_exact_match(db_session, listings):
    assert await _titles(db_session, PropertyFilters(university="Tech Institute")) == ["Luxury Loft"]
    assert await _titles(db_session, PropertyFilters(university="Tech")) == []


@pytest.mark.asyncio
async def test_search_matches_title_description_or_address(db_session, listings):
    assert await _titles(db_session, PropertyFilters(search="campus")) == [
        "Campus Dorm Room",
        "Sunny Studio near Campus",
    ]
    assert await _titles(db_session, PropertyFilters(search="DOWNTOWN")) == ["Shared House on Elm"]
    assert await _titles(db_session, PropertyFilters(search="river rd")) == ["Luxury Loft"]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(db_session, listings):
    assert await _titles(db_session, PropertyFilters(search="%")) == []


@pytest.mark.asyncio
async def test_filters_combine_conjunctively(db_session, listings):
    filters = PropertyFilters(amenities=["Parking"], max_price=100000, property_types=["dorm", "shared_house"])
    assert await _titles(db_session, filters) == ["Shared House on Elm", "Campus Dorm Room"]


@pytest.mark.asyncio
async def test_sort_options(db_session, listings):
    assert (await _titles(db_session, sort_by=SortByEnum.price_high))[0] == "Luxury Loft"
    assert (await _titles(db_session, sort_by=SortByEnum.distance))[0] == "Campus Dorm Room"
    assert (await _titles(db_session, sort_by=SortByEnum.rating))[0] == "Luxury Loft"


@pytest.mark.asyncio
async def test_pages_are_disjoint_and_cover_a_larger_page(db_session):
    # repeated prices exercise the id tie-breaker
    for i in range(45):
        await create_property(db_session, make_property(title=f"Listing {i}", price=50000 + (i % 7) * 1000))

    first = await search_properties(db_session, limit=20, offset=0)
    second = await search_properties(db_session, limit=20, offset=20)
    both = await search_properties(db_session, limit=40, offset=0)

    first_ids = [p.id for p in first]
    second_ids = [p.id for p in second]
    assert len(first_ids) == len(second_ids) == 20
    assert not set(first_ids) & set(second_ids)
    assert first_ids + second_ids == [p.id for p in both]


@pytest.mark.asyncio
async def test_default_limit_is_twenty(db_session):
    for i in range(25):
        await create_property(db_session, make_property(title=f"Listing {i}"))
    assert len(await search_properties(db_session)) == 20


@pytest.mark.asyncio
async def test_property_crud(db_session):
    prop = await create_property(db_session, make_property(title="New Listing", price=99900))
    assert prop.id is not None
    assert prop.review_count == 0
    assert prop.available is True

    updated = await update_property(db_session, prop.id, PropertyUpdate(price=95000, available=False))
    assert updated.price == 95000
    assert updated.available is False
    assert updated.title == "New Listing"

    assert await update_property(db_session, 9999, PropertyUpdate(price=1)) is None
    assert await delete_property(db_session, prop.id) is True
    assert await delete_property(db_session, prop.id) is False
    assert await get_property_by_id(db_session, prop.id) is None


def test_amenities_have_a_gin_index():
    indexes = {index.name: index for index in Property.__table__.indexes}
    amenities = indexes["idx_properties_amenities"]
    assert [column.name for column in amenities.columns] == ["amenities"]
    assert amenities.dialect_options["postgresql"]["using"] == "gin"


@pytest.mark.asyncio
async def test_update_location_and_reviews(db_session):
    prop = await create_property(db_session, make_property(title="Reviewed Listing"))
    changes = PropertyUpdate(latitude=40.1164, longitude=-88.2434, rating=4.5, review_count=12)
    updated = await update_property(db_session, prop.id, changes)
    assert float(updated.latitude) == pytest.approx(40.1164)
    assert float(updated.longitude) == pytest.approx(-88.2434)
    assert float(updated.rating) == 4.5
    assert updated.review_count == 12
