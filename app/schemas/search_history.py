from datetime import datetime
from typing import Any, Dict, Optional

from app.schemas.base import CamelModel

class SearchHistoryCreate(CamelModel):
    search_query: Optional[str] = None
    filters: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "searchQuery": "studio near campus",
                "filters": {"minPrice": 500, "maxPrice": 1200, "propertyTypes": ["studio"]}
            }
        }

class SearchHistoryOut(CamelModel):
    id: int
    user_id: str
    search_query: Optional[str] = None
    filters: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
