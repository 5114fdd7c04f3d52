from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func
from app.models import Base

class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True)  # `sub` claim from the identity provider
    email = Column(String, unique=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
