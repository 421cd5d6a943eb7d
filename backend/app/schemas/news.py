"""Request/response contracts for news and news content."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel


class NewsFormFields(BaseModel):
    """Text fields of the multipart news form. ``model_fields_set`` tells which were sent."""

    author: Optional[str] = None
    news_date: Optional[date] = None
    show_in_homepage: Optional[bool] = None
    order: Optional[int] = None
    post_to_public: Optional[bool] = None
    post_to_member: Optional[bool] = None
    club_id: Optional[str] = None
    title_en: Optional[str] = None
    summary_en: Optional[str] = None
    article_en: Optional[str] = None
    slug_en: Optional[str] = None
    title_fr: Optional[str] = None
    summary_fr: Optional[str] = None
    article_fr: Optional[str] = None
    slug_fr: Optional[str] = None


class NewsOut(BaseModel):
    id: int
    author: str
    news_date: date
    show_in_homepage: int
    order: int
    post_to_public: int
    post_to_member: int
    date_added: Optional[datetime] = None
    status: int
    content_en_id: Optional[int] = None
    language_en_id: Optional[int] = None
    title_en: Optional[str] = None
    summary_en: Optional[str] = None
    article_en: Optional[str] = None
    image_en: Optional[str] = None
    thumbnail_en: Optional[str] = None
    slug_en: Optional[str] = None
    content_fr_id: Optional[int] = None
    language_fr_id: Optional[int] = None
    title_fr: Optional[str] = None
    summary_fr: Optional[str] = None
    article_fr: Optional[str] = None
    image_fr: Optional[str] = None
    thumbnail_fr: Optional[str] = None
    slug_fr: Optional[str] = None


class PublicNewsOut(BaseModel):
    id: int
    author: str
    news_date: date
    show_in_homepage: int
    order: int
    post_to_public: int
    post_to_member: int
    date_added: Optional[datetime] = None
    status: int
    content_id: int
    language_id: int
    title: str
    summary: Optional[str] = None
    article: Optional[str] = None
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    slug: Optional[str] = None


class StoredAssetOut(BaseModel):
    filename: str
    url: str
    size: int


class AssetUploadResponse(BaseModel):
    success: bool = True
    url: str
    filename: str


class ImageListResponse(BaseModel):
    success: bool = True
    images: List[StoredAssetOut] = []


class FileListResponse(BaseModel):
    success: bool = True
    files: List[StoredAssetOut] = []
