"""Request/response contracts for galleries and gallery images."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class GalleryBase(BaseModel):
    gallery_name_en: str
    gallery_name_fr: str
    description_en: Optional[str] = None
    description_fr: Optional[str] = None


class GalleryCreate(GalleryBase):
    order: Optional[int] = None
    member_only: Optional[int] = None


class GalleryUpdate(GalleryBase):
    order: Optional[int] = None
    member_only: Optional[int] = None


class GalleryOut(GalleryBase):
    id: int
    order: int
    member_only: int
    date_created: Optional[datetime] = None
    added_by: Optional[int] = None
    date_updated: Optional[datetime] = None
    updated_by: Optional[int] = None
    status: int

    model_config = {"from_attributes": True}


class GalleryImageOut(BaseModel):
    id: int
    gallery_id: int
    image_filename: str
    thumbnail_filename: str
    order: int
    date_created: Optional[datetime] = None
    added_by: Optional[int] = None
    status: int

    model_config = {"from_attributes": True}
