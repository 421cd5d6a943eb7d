"""Gallery Service: bilingual gallery rows with ordering and soft delete."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.gallery import Gallery, GalleryImage
from app.models.user import User
from app.schemas.gallery import GalleryCreate, GalleryUpdate
from app.utils.helpers import STATUS_ACTIVE, STATUS_DELETED, blank_to_none, is_blank

logger = logging.getLogger(__name__)


def _validate_names(data: GalleryCreate | GalleryUpdate) -> None:
    if is_blank(data.gallery_name_en) or is_blank(data.gallery_name_fr):
        raise HTTPException(status_code=400, detail="Gallery name is required in English and French")


def _next_order(db: Session) -> int:
    max_order = db.query(func.max(Gallery.order)).filter(Gallery.status != STATUS_DELETED).scalar()
    return int(max_order or 0) + 1


def get_live_gallery(db: Session, gallery_id: int) -> Gallery:
    gallery = db.query(Gallery).filter(Gallery.id == gallery_id, Gallery.status != STATUS_DELETED).first()
    if not gallery:
        raise HTTPException(status_code=404, detail="Gallery not found")
    return gallery


def list_galleries(db: Session, include_member_only: bool = True) -> List[Gallery]:
    query = db.query(Gallery).filter(Gallery.status != STATUS_DELETED)
    if not include_member_only:
        query = query.filter(Gallery.member_only == 0)
    return query.order_by(Gallery.order.asc(), Gallery.id.asc()).all()


def create_gallery(db: Session, data: GalleryCreate, current_user: Optional[User] = None) -> int:
    _validate_names(data)
    gallery = Gallery(
        gallery_name_en=data.gallery_name_en.strip(),
        gallery_name_fr=data.gallery_name_fr.strip(),
        description_en=blank_to_none(data.description_en),
        description_fr=blank_to_none(data.description_fr),
        order=data.order if data.order is not None else _next_order(db),
        member_only=1 if data.member_only else 0,
        added_by=current_user.user_id if current_user else None,
        status=STATUS_ACTIVE,
    )
    db.add(gallery)
    db.commit()
    db.refresh(gallery)
    logger.info("[gallery] created gallery %s with order %s", gallery.id, gallery.order)
    return gallery.id


def update_gallery(db: Session, gallery_id: int, data: GalleryUpdate, current_user: Optional[User] = None) -> Gallery:
    gallery = get_live_gallery(db, gallery_id)
    _validate_names(data)
    gallery.gallery_name_en = data.gallery_name_en.strip()
    gallery.gallery_name_fr = data.gallery_name_fr.strip()
    sent = data.model_fields_set
    if "description_en" in sent:
        gallery.description_en = blank_to_none(data.description_en)
    if "description_fr" in sent:
        gallery.description_fr = blank_to_none(data.description_fr)
    if data.order is not None:
        gallery.order = data.order
    if data.member_only is not None:
        gallery.member_only = 1 if data.member_only else 0
    gallery.updated_by = current_user.user_id if current_user else None
    gallery.date_updated = datetime.now()
    db.commit()
    db.refresh(gallery)
    logger.info("[gallery] updated gallery %s", gallery.id)
    return gallery


def delete_gallery(db: Session, gallery_id: int) -> None:
    gallery = get_live_gallery(db, gallery_id)
    gallery.status = STATUS_DELETED
    db.query(GalleryImage).filter(GalleryImage.gallery_id == gallery.id).update(
        {"status": STATUS_DELETED},
        synchronize_session=False,
    )
    db.commit()
    logger.info("[gallery] soft deleted gallery %s and its images", gallery_id)


def update_order(db: Session, gallery_id: int, order: int) -> None:
    gallery = get_live_gallery(db, gallery_id)
    gallery.order = order
    db.commit()
    logger.info("[gallery] gallery %s moved to order %s", gallery_id, order)
