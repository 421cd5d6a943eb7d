"""News Service: bilingual news rows, slug handling, images and editor uploads."""

import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.news import News, NewsContent
from app.models.user import User
from app.schemas.news import NewsFormFields
from app.services import storage_service
from app.services.storage_service import UploadedFile, UploadedImage
from app.utils.helpers import (
    LANGUAGE_IDS,
    STATUS_ACTIVE,
    STATUS_DELETED,
    generate_slug,
    is_blank,
    language_id_for,
)

logger = logging.getLogger(__name__)


def _news_ordering():
    return (News.order.asc(), News.news_date.desc(), News.id.desc())


def _base_row(news: News) -> dict:
    return {
        "id": news.id,
        "author": news.author,
        "news_date": news.news_date,
        "show_in_homepage": int(news.show_in_homepage or 0),
        "order": int(news.order or 0),
        "post_to_public": int(news.post_to_public or 0),
        "post_to_member": int(news.post_to_member or 0),
        "date_added": news.date_added,
        "status": int(news.status),
    }


def _bilingual_row(news: News, contents: Dict[int, NewsContent]) -> dict:
    row = _base_row(news)
    for code, language_id in LANGUAGE_IDS.items():
        content = contents.get(language_id)
        row[f"content_{code}_id"] = content.id if content else None
        row[f"language_{code}_id"] = content.language_id if content else None
        row[f"title_{code}"] = content.title if content else None
        row[f"summary_{code}"] = content.summary if content else None
        row[f"article_{code}"] = content.article if content else None
        row[f"image_{code}"] = content.image_filename if content else None
        row[f"thumbnail_{code}"] = content.image_thumbnail if content else None
        row[f"slug_{code}"] = content.slug_url if content else None
    return row


def _single_language_row(news: News, content: NewsContent) -> dict:
    row = _base_row(news)
    row.update(
        content_id=content.id,
        language_id=content.language_id,
        title=content.title,
        summary=content.summary,
        article=content.article,
        image=content.image_filename,
        thumbnail=content.image_thumbnail,
        slug=content.slug_url,
    )
    return row


def _contents_by_news(db: Session, news_ids: List[int]) -> Dict[int, Dict[int, NewsContent]]:
    grouped: Dict[int, Dict[int, NewsContent]] = {news_id: {} for news_id in news_ids}
    if not news_ids:
        return grouped
    rows = (
        db.query(NewsContent)
        .filter(NewsContent.news_id.in_(news_ids), NewsContent.status != STATUS_DELETED)
        .order_by(NewsContent.id.asc())
        .all()
    )
    for content in rows:
        # the first live row per language wins
        grouped[content.news_id].setdefault(content.language_id, content)
    return grouped


def _get_live_news(db: Session, news_id: int) -> News:
    news = db.query(News).filter(News.id == news_id, News.status != STATUS_DELETED).first()
    if not news:
        raise HTTPException(status_code=404, detail="News not found")
    return news


def list_news(db: Session) -> List[dict]:
    rows = db.query(News).filter(News.status != STATUS_DELETED).order_by(*_news_ordering()).all()
    contents = _contents_by_news(db, [row.id for row in rows])
    logger.info("[news] list returned %s items", len(rows))
    return [_bilingual_row(row, contents[row.id]) for row in rows]


def get_news(db: Session, news_id: int) -> dict:
    news = _get_live_news(db, news_id)
    return _bilingual_row(news, _contents_by_news(db, [news.id])[news.id])


def _public_query(db: Session, lang: Optional[str]):
    return (
        db.query(News, NewsContent)
        .join(
            NewsContent,
            (NewsContent.news_id == News.id)
            & (NewsContent.language_id == language_id_for(lang))
            & (NewsContent.status != STATUS_DELETED),
        )
        .filter(News.status != STATUS_DELETED, News.post_to_public == 1)
    )


def list_public_news(
    db: Session,
    lang: Optional[str],
    homepage_only: bool = False,
    limit: Optional[int] = None,
) -> List[dict]:
    query = _public_query(db, lang)
    if homepage_only:
        query = query.filter(News.show_in_homepage == 1)
    query = query.order_by(*_news_ordering())
    if limit is not None:
        query = query.limit(limit)
    rows = [_single_language_row(news, content) for news, content in query.all()]
    logger.info("[news] public list (lang=%s, homepage=%s) returned %s items", lang, homepage_only, len(rows))
    return rows


def get_news_by_slug(db: Session, slug: str, lang: Optional[str]) -> dict:
    found = _public_query(db, lang).filter(NewsContent.slug_url == slug).first()
    if not found:
        raise HTTPException(status_code=404, detail="News not found")
    news, content = found
    return _single_language_row(news, content)


def ensure_unique_slug(
    db: Session,
    base_slug: Optional[str],
    language_id: int,
    exclude_news_id: Optional[int] = None,
) -> Optional[str]:
    """Return ``base_slug`` or the first free ``base_slug-N`` (N >= 2) within the language."""
    if not base_slug or not base_slug.strip():
        return base_slug
    base = base_slug.strip()

    def _taken(candidate: str) -> bool:
        query = db.query(NewsContent.id).filter(
            NewsContent.slug_url == candidate,
            NewsContent.language_id == language_id,
            NewsContent.status != STATUS_DELETED,
        )
        if exclude_news_id is not None:
            query = query.filter(NewsContent.news_id != exclude_news_id)
        return query.first() is not None

    candidate = base
    counter = 1
    while _taken(candidate):
        counter += 1
        candidate = f"{base}-{counter}"
    return candidate


def _next_order(db: Session) -> int:
    max_order = db.query(func.max(News.order)).filter(News.status != STATUS_DELETED).scalar()
    return int(max_order or 0) + 1


def _base_slug(title: Optional[str], explicit_slug: Optional[str]) -> Optional[str]:
    if not is_blank(explicit_slug):
        return explicit_slug.strip()
    return generate_slug(title) or None


def _prepare_thumbnails(images: Dict[str, Optional[UploadedImage]]) -> Dict[str, Optional[bytes]]:
    """Check every upload and build the thumbnails before anything is written to disk."""
    thumbnails: Dict[str, Optional[bytes]] = {}
    for code in LANGUAGE_IDS:
        image = images.get(f"image_{code}")
        thumbnail = images.get(f"thumbnail_{code}")
        for upload in (image, thumbnail):
            if upload is not None:
                storage_service.verify_image(upload)
        source = thumbnail or image
        thumbnails[code] = (
            storage_service.build_thumbnail(source.content, source.extension) if source is not None else None
        )
    return thumbnails


def _store_language_images(
    club_id: str,
    code: str,
    image: Optional[UploadedImage],
    thumbnail: Optional[UploadedImage],
    thumbnail_data: Optional[bytes],
    batch: storage_service.FileBatch,
) -> tuple[Optional[str], Optional[str]]:
    """Save the main image and its thumbnail. Without an explicit thumbnail one is made from the image."""
    base_dir = storage_service.news_image_dir(club_id)
    thumb_dir = storage_service.news_thumbnail_dir(club_id)
    storage_service.ensure_dirs(base_dir, thumb_dir)

    thumbnail_name = None
    thumb_source = thumbnail or image
    if thumb_source is not None:
        thumbnail_name = batch.added(
            thumb_dir,
            storage_service.store_thumbnail(thumb_source, thumb_dir, f"thumb_{code}", data=thumbnail_data),
        )

    image_name = None
    if image is not None:
        image_name = batch.added(base_dir, storage_service.store_image(image, base_dir, f"news_{code}"))
    return image_name, thumbnail_name


def create_news(
    db: Session,
    fields: NewsFormFields,
    images: Dict[str, Optional[UploadedImage]],
    current_user: Optional[User] = None,
) -> int:
    club_id = storage_service.validate_club_id(fields.club_id)
    if is_blank(fields.author):
        raise HTTPException(status_code=400, detail="Author is required")
    thumbnails = _prepare_thumbnails(images)

    actor_id = current_user.user_id if current_user else None
    batch = storage_service.FileBatch()
    try:
        news = News(
            author=fields.author.strip(),
            news_date=fields.news_date or date.today(),
            show_in_homepage=1 if fields.show_in_homepage else 0,
            order=_next_order(db),
            post_to_public=1 if fields.post_to_public else 0,
            post_to_member=1 if fields.post_to_member else 0,
            status=STATUS_ACTIVE,
        )
        db.add(news)
        db.flush()

        for code, language_id in LANGUAGE_IDS.items():
            title = getattr(fields, f"title_{code}")
            if is_blank(title):
                continue
            image_name, thumbnail_name = _store_language_images(
                club_id,
                code,
                images.get(f"image_{code}"),
                images.get(f"thumbnail_{code}"),
                thumbnails[code],
                batch,
            )
            base_slug = _base_slug(title, getattr(fields, f"slug_{code}"))
            final_slug = ensure_unique_slug(db, base_slug, language_id) if base_slug else None
            db.add(
                NewsContent(
                    news_id=news.id,
                    language_id=language_id,
                    title=title,
                    summary=getattr(fields, f"summary_{code}") or None,
                    article=getattr(fields, f"article_{code}") or None,
                    image_filename=image_name,
                    image_thumbnail=thumbnail_name,
                    slug_url=final_slug,
                    added_by=actor_id,
                    status=STATUS_ACTIVE,
                )
            )
            logger.info("[news] created %s content for news %s (slug=%s)", code, news.id, final_slug)

        db.commit()
    except Exception:
        db.rollback()
        batch.discard()
        raise
    logger.info("[news] created news %s with order %s", news.id, news.order)
    return news.id


def _replace_language_images(
    club_id: str,
    code: str,
    content: NewsContent,
    image: Optional[UploadedImage],
    thumbnail: Optional[UploadedImage],
    thumbnail_data: Optional[bytes],
    batch: storage_service.FileBatch,
) -> None:
    if image is None and thumbnail is None:
        return
    image_name, thumbnail_name = _store_language_images(club_id, code, image, thumbnail, thumbnail_data, batch)
    if image_name:
        batch.replace(storage_service.news_image_dir(club_id), content.image_filename)
        content.image_filename = image_name
    if thumbnail_name:
        batch.replace(storage_service.news_thumbnail_dir(club_id), content.image_thumbnail)
        content.image_thumbnail = thumbnail_name


def _update_contents(
    db: Session,
    news: News,
    fields: NewsFormFields,
    images: Dict[str, Optional[UploadedImage]],
    thumbnails: Dict[str, Optional[bytes]],
    club_id: str,
    actor_id: Optional[int],
    batch: storage_service.FileBatch,
) -> None:
    sent = fields.model_fields_set
    existing = _contents_by_news(db, [news.id])[news.id]
    for code, language_id in LANGUAGE_IDS.items():
        title_key = f"title_{code}"
        slug_key = f"slug_{code}"
        content = existing.get(language_id)
        image = images.get(f"image_{code}")
        thumbnail = images.get(f"thumbnail_{code}")

        if content is not None:
            changed = image is not None or thumbnail is not None
            if title_key in sent:
                title = getattr(fields, title_key) or ""
                content.title = title
                base_slug = _base_slug(title, getattr(fields, slug_key))
                if slug_key in sent or base_slug:
                    content.slug_url = ensure_unique_slug(db, base_slug, language_id, news.id) if base_slug else None
                changed = True
            for column in ("summary", "article"):
                key = f"{column}_{code}"
                if key in sent:
                    setattr(content, column, getattr(fields, key) or None)
                    changed = True
            if not changed:
                continue
            _replace_language_images(club_id, code, content, image, thumbnail, thumbnails[code], batch)
            content.updated_by = actor_id
            content.date_updated = datetime.now()
            continue

        title = getattr(fields, title_key)
        if title_key not in sent or is_blank(title):
            if image is not None or thumbnail is not None:
                logger.info("[news] ignoring %s images for news %s without %s content", code, news.id, code)
            continue
        image_name, thumbnail_name = _store_language_images(
            club_id, code, image, thumbnail, thumbnails[code], batch
        )
        base_slug = _base_slug(title, getattr(fields, slug_key))
        db.add(
            NewsContent(
                news_id=news.id,
                language_id=language_id,
                title=title,
                summary=getattr(fields, f"summary_{code}") or None,
                article=getattr(fields, f"article_{code}") or None,
                image_filename=image_name,
                image_thumbnail=thumbnail_name,
                slug_url=ensure_unique_slug(db, base_slug, language_id, news.id) if base_slug else None,
                added_by=actor_id,
                status=STATUS_ACTIVE,
            )
        )
        logger.info("[news] added %s content to news %s", code, news.id)


def update_news(
    db: Session,
    news_id: int,
    fields: NewsFormFields,
    images: Dict[str, Optional[UploadedImage]],
    current_user: Optional[User] = None,
) -> None:
    club_id = storage_service.validate_club_id(fields.club_id)
    news = _get_live_news(db, news_id)
    sent = fields.model_fields_set
    actor_id = current_user.user_id if current_user else None
    if "author" in sent and is_blank(fields.author):
        raise HTTPException(status_code=400, detail="Author is required")
    thumbnails = _prepare_thumbnails(images)

    batch = storage_service.FileBatch()
    try:
        if "author" in sent:
            news.author = fields.author.strip()
        if "news_date" in sent and fields.news_date is not None:
            news.news_date = fields.news_date
        if "order" in sent and fields.order is not None:
            news.order = fields.order
        for flag in ("show_in_homepage", "post_to_public", "post_to_member"):
            if flag in sent:
                setattr(news, flag, 1 if getattr(fields, flag) else 0)

        _update_contents(db, news, fields, images, thumbnails, club_id, actor_id, batch)
        db.commit()
    except Exception:
        db.rollback()
        batch.discard()
        raise
    batch.finalize()
    logger.info("[news] updated news %s", news.id)


def delete_news(db: Session, news_id: int) -> None:
    news = _get_live_news(db, news_id)
    news.status = STATUS_DELETED
    db.query(NewsContent).filter(NewsContent.news_id == news.id).update(
        {"status": STATUS_DELETED},
        synchronize_session=False,
    )
    db.commit()
    logger.info("[news] soft deleted news %s", news_id)


def update_order(db: Session, news_id: int, order: int) -> None:
    news = _get_live_news(db, news_id)
    news.order = order
    db.commit()
    logger.info("[news] news %s moved to order %s", news_id, order)


def save_editor_image(club_id: str, image: UploadedImage) -> dict:
    club_id = storage_service.validate_club_id(club_id)
    folder = storage_service.news_image_dir(club_id)
    storage_service.ensure_dirs(folder, storage_service.news_thumbnail_dir(club_id))
    filename = storage_service.store_image(image, folder, "article")
    return {"url": storage_service.news_image_url(club_id, filename), "filename": filename}


def list_editor_images(club_id: str) -> List[dict]:
    club_id = storage_service.validate_club_id(club_id)
    return storage_service.list_directory(
        storage_service.news_image_dir(club_id),
        f"/images/clubs/{club_id}/news",
        extensions=storage_service.EDITOR_IMAGE_LIST_EXTENSIONS,
    )


def save_editor_file(club_id: str, upload: UploadedFile) -> dict:
    club_id = storage_service.validate_club_id(club_id)
    filename, version = storage_service.store_versioned_file(upload, storage_service.news_files_dir(club_id))
    if version > 1:
        logger.info("[news] stored editor file %s (version %s)", filename, version)
    return {"url": storage_service.news_file_url(club_id, filename), "filename": filename}


def list_editor_files(club_id: str) -> List[dict]:
    club_id = storage_service.validate_club_id(club_id)
    return storage_service.list_directory(
        storage_service.news_files_dir(club_id),
        f"/files/clubs/{club_id}/news",
    )
