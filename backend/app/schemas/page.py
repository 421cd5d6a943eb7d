"""Page contexts served to the public site's language-prefixed routes."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from app.schemas.menu import MenuItem
from app.schemas.news import PublicNewsOut


class ClubOut(BaseModel):
    id: str
    name: str
    title_prefix: str
    description: str


class SlideOut(BaseModel):
    id: int
    image: str
    link: Optional[str] = None


class PageContext(BaseModel):
    lang: str
    club: ClubOut
    translations: Dict[str, Any]
    menu: List[MenuItem] = []


class LandingPageOut(PageContext):
    slides: List[SlideOut] = []
    news: List[PublicNewsOut] = []


class NewsPageOut(PageContext):
    news: PublicNewsOut
