"""SQLAlchemy model package; importing it registers every table on the metadata."""

from app.models.user import User
from app.models.news import News, NewsContent
from app.models.gallery import Gallery, GalleryImage
from app.models.slider import Slider
from app.models.page import Page, PageContent

__all__ = [
    "User",
    "News", "NewsContent",
    "Gallery", "GalleryImage",
    "Slider",
    "Page", "PageContent",
]
