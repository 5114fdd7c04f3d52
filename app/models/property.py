from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, Numeric, String, Text, func
from app.models import Base
from app.models.types import StringArray

class Property(Base):
    __tablename__ = "properties"
    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Integer, nullable=False) # in cents
    property_type = Column(String(32), nullable=False) # apartment, studio, shared_house, dorm
    bedrooms = Column(Integer)
    bathrooms = Column(Numeric(3, 1))
    square_footage = Column(Integer)
    address = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    zip_code = Column(Text, nullable=False)
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    distance_to_campus = Column(Numeric(3, 1)) # in miles
    university = Column(Text, nullable=False)
    image_urls = Column(StringArray, default=list)
    amenities = Column(StringArray, default=list)
    utilities = Column(StringArray, default=list)
    rating = Column(Numeric(2, 1))
    review_count = Column(Integer, default=0)
    available = Column(Boolean, nullable=False, default=True)
    available_date = Column(DateTime(timezone=True))
    contact_email = Column(Text)
    contact_phone = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Listing queries always restrict on availability and order by price
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_properties_price_non_negative"),
        Index("idx_properties_available_price", "available", "price"),
        Index("idx_properties_university", "university"),
        Index("idx_properties_amenities", "amenities", postgresql_using="gin"),
    )
