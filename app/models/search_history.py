from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from app.models import Base
from app.models.types import JSONDocument

class SearchHistory(Base):
    __tablename__ = "search_history"
    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    search_query = Column(Text)
    filters = Column(JSONDocument)  # stored as sent by the client, never interpreted
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
