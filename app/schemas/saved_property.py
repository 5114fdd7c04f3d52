from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.types import INT4_MAX
from app.schemas.base import CamelModel
from app.schemas.property import PropertyOut

class SavePropertyRequest(CamelModel):
    property_id: int = Field(..., ge=1, le=INT4_MAX)

class SavedPropertyOut(CamelModel):
    id: int
    user_id: str
    property_id: int
    created_at: Optional[datetime] = None

class SavedPropertyWithProperty(SavedPropertyOut):
    property: PropertyOut

class SavedStatus(CamelModel):
    is_saved: bool
