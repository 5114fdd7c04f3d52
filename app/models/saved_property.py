from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models import Base

class SavedProperty(Base):
    __tablename__ = "saved_properties"
    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)  # identity provider subject; no FK to users
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    property = relationship("Property", lazy="raise")

    __table_args__ = (
        UniqueConstraint("user_id", "property_id", name="uq_saved_properties_user_property"),
    )
