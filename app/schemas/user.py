from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.base import CamelModel

class UserClaims(BaseModel):
    """Identity claims handed to every authenticated handler."""
    sub: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

class UserOut(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
