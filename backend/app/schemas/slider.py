"""Request/response contracts for homepage slides."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SliderFormFields(BaseModel):
    link_en: Optional[str] = None
    link_fr: Optional[str] = None
    club_id: Optional[str] = None
    status: Optional[int] = None


class SliderOut(BaseModel):
    id: int
    image_en: str
    image_fr: str
    link_en: Optional[str] = None
    link_fr: Optional[str] = None
    order: int
    status: int
    date_created: Optional[datetime] = None
    added_by: Optional[int] = None
    date_updated: Optional[datetime] = None
    updated_by: Optional[int] = None

    model_config = {"from_attributes": True}
