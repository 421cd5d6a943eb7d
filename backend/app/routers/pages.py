"""Language-prefixed page loaders for the public site."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.schemas.page import LandingPageOut, NewsPageOut, SlideOut
from app.services import menu_service, news_service, slider_service
from app.utils.clubs import get_club_config
from app.utils.i18n import is_supported, translations_for

router = APIRouter(tags=["pages"])

HOMEPAGE_NEWS_LIMIT = 3


def _require_language(lang: str) -> str:
    if not is_supported(lang):
        raise HTTPException(status_code=404, detail="Page not found")
    return lang


def _base_context(db: Session, lang: str) -> dict:
    return {
        "lang": lang,
        "club": get_club_config(settings.CLUB_ID).to_dict(),
        "translations": translations_for(lang),
        "menu": menu_service.get_menu(db, lang),
    }


def _slides(db: Session, lang: str) -> list[SlideOut]:
    club_id = get_club_config(settings.CLUB_ID).id
    return [
        SlideOut(
            id=slider.id,
            image=slider_service.slider_image_url(club_id, getattr(slider, f"image_{lang}")),
            link=getattr(slider, f"link_{lang}"),
        )
        for slider in slider_service.list_sliders(db, active_only=True)
    ]


@router.get("/{lang}", response_model=LandingPageOut, response_model_by_alias=True)
def landing_page(lang: str, db: Session = Depends(get_db)):
    lang = _require_language(lang)
    return LandingPageOut(
        **_base_context(db, lang),
        slides=_slides(db, lang),
        news=news_service.list_public_news(db, lang, homepage_only=True, limit=HOMEPAGE_NEWS_LIMIT),
    )


@router.get("/{lang}/accueil")
def accueil_redirect(lang: str):
    return RedirectResponse(f"/{_require_language(lang)}", status_code=302)


@router.get("/{lang}/default")
def default_redirect(lang: str):
    return RedirectResponse(f"/{_require_language(lang)}", status_code=302)


@router.get("/{lang}/news/{slug}", response_model=NewsPageOut, response_model_by_alias=True)
def news_page(lang: str, slug: str, db: Session = Depends(get_db)):
    lang = _require_language(lang)
    return NewsPageOut(**_base_context(db, lang), news=news_service.get_news_by_slug(db, slug, lang))
