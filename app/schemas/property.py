from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_serializer

from app.models.types import INT4_MAX
from app.schemas.base import CamelModel
from app.utils.money import MAX_PRICE_CENTS, cents_to_dollars

class PropertyType(str, Enum):
    apartment = "apartment"
    studio = "studio"
    shared_house = "shared_house"
    dorm = "dorm"

class SortByEnum(str, Enum):
    price_low = "price_low"
    price_high = "price_high"
    distance = "distance"
    rating = "rating"

class PropertyFilters(BaseModel):
    """
    Search criteria for one listing query. Prices are in cents.

    Every field is optional; an unset field (or an empty list) adds no
    restriction. Instances are frozen so a filter cannot change while its
    query is being built.
    """
    search: Optional[str] = None
    min_price: Optional[int] = Field(None, ge=0, le=MAX_PRICE_CENTS)
    max_price: Optional[int] = Field(None, ge=0, le=MAX_PRICE_CENTS)
    property_types: List[PropertyType] = []
    amenities: List[str] = []
    max_distance: Optional[float] = Field(None, ge=0)
    university: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0, le=INT4_MAX)
    bathrooms: Optional[float] = Field(None, ge=0)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "search": "downtown",
                "min_price": 60000,
                "max_price": 120000,
                "property_types": ["studio", "apartment"],
                "amenities": ["WiFi Included", "Parking"],
                "max_distance": 1.5,
                "university": "State University",
                "bedrooms": 1,
                "bathrooms": 1.0
            }
        }

class PropertyBase(CamelModel):
    title: str
    description: Optional[str] = None
    price: int = Field(..., ge=0, le=MAX_PRICE_CENTS, description="Monthly rent in cents")
    property_type: PropertyType
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    square_footage: Optional[int] = None
    address: str
    city: str
    state: str
    zip_code: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance_to_campus: Optional[float] = None
    university: str
    image_urls: List[str] = []
    amenities: List[str] = []
    utilities: List[str] = []
    rating: Optional[float] = None
    review_count: int = 0
    available: bool = True
    available_date: Optional[datetime] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

class PropertyCreate(PropertyBase):
    pass

class PropertyUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0, le=MAX_PRICE_CENTS)
    property_type: Optional[PropertyType] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    square_footage: Optional[int] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance_to_campus: Optional[float] = None
    university: Optional[str] = None
    image_urls: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    utilities: Optional[List[str]] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    available: Optional[bool] = None
    available_date: Optional[datetime] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

class PropertyOut(PropertyBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # The only place a stored price is turned into dollars
    @field_serializer("price")
    def price_in_dollars(self, price: int) -> Union[int, float]:
        return cents_to_dollars(price)
