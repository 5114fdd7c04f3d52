"""
Shared fixtures.

Environment defaults are set before the application is imported so that
Settings never points at the production database or redis.
"""
import os

TEST_ENV_VARS = {
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "REDIS_URL": "redis://localhost:6379/15",
    "IDENTITY_PROVIDER_URL": "http://identity.test",
    "RATE_LIMIT_ENABLED": "false",
    "LOG_LEVEL": "WARNING",
}
for key, value in TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.dependencies.auth import get_current_user
from app.main import app
from app.models import Base
from app.schemas.property import PropertyCreate
from app.services.search import create_property
from app.schemas.user import UserClaims

MOCK_STUDENT = UserClaims(
    sub="student-1",
    email="sam@state.edu",
    first_name="Sam",
    last_name="Rivera",
    profile_image_url="https://img.example.com/sam.png",
)
OTHER_STUDENT = UserClaims(sub="student-2", email="alex@state.edu")


def make_property(**overrides) -> PropertyCreate:
    data = {
        "title": "Listing",
        "description": "A place to live",
        "price": 80000,
        "property_type": "apartment",
        "bedrooms": 1,
        "bathrooms": 1.0,
        "address": "100 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "distance_to_campus": 1.0,
        "university": "State University",
        "amenities": [],
    }
    data.update(overrides)
    return PropertyCreate(**data)


# Available listings in ascending price order:
#   Shared House on Elm (60000), Campus Dorm Room (70000),
#   Sunny Studio near Campus (85000), Two Bedroom Apartment (125000),
#   Luxury Loft (210000). "Hidden Studio" is unavailable.
SAMPLE_LISTINGS = [
    make_property(
        title="Sunny Studio near Campus", description="Bright and compact", price=85000,
        property_type="studio", bedrooms=0, bathrooms=1.0, distance_to_campus=0.5,
        address="12 College Ave", amenities=["WiFi Included", "Laundry"],
    ),
    make_property(
        title="Two Bedroom Apartment", description="Renovated kitchen", price=125000,
        property_type="apartment", bedrooms=2, bathrooms=1.5, distance_to_campus=1.2,
        address="40 Oak St", amenities=["WiFi Included", "Parking", "Gym"],
    ),
    make_property(
        title="Shared House on Elm", description="Quiet street on the Downtown bus line", price=60000,
        property_type="shared_house", bedrooms=4, bathrooms=2.0, distance_to_campus=2.5,
        address="7 Elm St", amenities=["Parking"],
    ),
    make_property(
        title="Campus Dorm Room", description="Meal plan available", price=70000,
        property_type="dorm", bedrooms=1, bathrooms=1.0, distance_to_campus=0.1,
        address="1 University Plaza", amenities=["WiFi Included", "Parking"],
    ),
    make_property(
        title="Luxury Loft", description="Rooftop views", price=210000,
        property_type="apartment", bedrooms=2, bathrooms=2.0, distance_to_campus=3.0,
        address="300 River Rd", university="Tech Institute", rating=4.8,
        amenities=["WiFi Included", "Parking", "Pool"],
    ),
    make_property(
        title="Hidden Studio", description="Already leased", price=50000,
        property_type="studio", bedrooms=0, bathrooms=1.0, distance_to_campus=0.3,
        address="5 College Ave", amenities=["WiFi Included", "Parking"], available=False,
    ),
]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def listings(db_session):
    created = {}
    for data in SAMPLE_LISTINGS:
        prop = await create_property(db_session, data)
        created[prop.title] = prop
    return created


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def student_auth_override():
    async def override():
        return MOCK_STUDENT

    app.dependency_overrides[get_current_user] = override
    yield MOCK_STUDENT
    app.dependency_overrides.pop(get_current_user, None)

