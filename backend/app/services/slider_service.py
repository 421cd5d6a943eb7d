"""Slider Service: homepage slides with one image and link per language."""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.slider import Slider
from app.models.user import User
from app.schemas.slider import SliderFormFields
from app.services import storage_service
from app.services.storage_service import UploadedImage
from app.utils.helpers import STATUS_ACTIVE, STATUS_DELETED, STATUS_INACTIVE, blank_to_none

logger = logging.getLogger(__name__)

EDITABLE_STATUSES = {STATUS_INACTIVE, STATUS_ACTIVE}


def slider_image_url(club_id: str, filename: str) -> str:
    return f"/images/clubs/{club_id}/slider/{filename}"


def _get_live_slider(db: Session, slider_id: int) -> Slider:
    slider = db.query(Slider).filter(Slider.id == slider_id, Slider.status != STATUS_DELETED).first()
    if not slider:
        raise HTTPException(status_code=404, detail="Slider not found")
    return slider


def _next_order(db: Session) -> int:
    max_order = db.query(func.max(Slider.order)).filter(Slider.status != STATUS_DELETED).scalar()
    return int(max_order or 0) + 1


def list_sliders(db: Session, active_only: bool = False) -> List[Slider]:
    query = db.query(Slider)
    if active_only:
        query = query.filter(Slider.status == STATUS_ACTIVE)
    else:
        query = query.filter(Slider.status != STATUS_DELETED)
    return query.order_by(Slider.order.asc(), Slider.id.asc()).all()


def get_slider(db: Session, slider_id: int) -> Slider:
    return _get_live_slider(db, slider_id)


def create_slider(
    db: Session,
    fields: SliderFormFields,
    images: Dict[str, Optional[UploadedImage]],
    current_user: Optional[User] = None,
) -> Slider:
    club_id = storage_service.validate_club_id(fields.club_id)
    image_en = images.get("image_en")
    image_fr = images.get("image_fr")
    if image_en is None or image_fr is None:
        raise HTTPException(status_code=400, detail="Both image_en and image_fr are required")

    folder = storage_service.slider_image_dir(club_id)
    storage_service.ensure_dirs(folder)
    storage_service.verify_image(image_en)
    storage_service.verify_image(image_fr)

    batch = storage_service.FileBatch()
    try:
        slider = Slider(
            image_en=batch.added(folder, storage_service.store_image(image_en, folder, "slider_en")),
            image_fr=batch.added(folder, storage_service.store_image(image_fr, folder, "slider_fr")),
            link_en=blank_to_none(fields.link_en),
            link_fr=blank_to_none(fields.link_fr),
            order=_next_order(db),
            status=STATUS_ACTIVE,
            added_by=current_user.user_id if current_user else None,
        )
        db.add(slider)
        db.commit()
    except Exception:
        db.rollback()
        batch.discard()
        raise
    db.refresh(slider)
    logger.info("[slider] created slider %s with order %s", slider.id, slider.order)
    return slider


def update_slider(
    db: Session,
    slider_id: int,
    fields: SliderFormFields,
    images: Dict[str, Optional[UploadedImage]],
    current_user: Optional[User] = None,
) -> Slider:
    club_id = storage_service.validate_club_id(fields.club_id)
    slider = _get_live_slider(db, slider_id)
    sent = fields.model_fields_set
    uploads = {code: images.get(f"image_{code}") for code in ("en", "fr")}
    for image in uploads.values():
        if image is not None:
            storage_service.verify_image(image)

    if "status" in sent and fields.status is not None:
        if fields.status not in EDITABLE_STATUSES:
            raise HTTPException(status_code=400, detail="Status must be 0 or 1")
        slider.status = fields.status
    if "link_en" in sent:
        slider.link_en = blank_to_none(fields.link_en)
    if "link_fr" in sent:
        slider.link_fr = blank_to_none(fields.link_fr)

    folder = storage_service.slider_image_dir(club_id)
    batch = storage_service.FileBatch()
    try:
        for code, image in uploads.items():
            if image is None:
                continue
            storage_service.ensure_dirs(folder)
            batch.replace(folder, getattr(slider, f"image_{code}"))
            new_name = storage_service.store_image(image, folder, f"slider_{code}")
            setattr(slider, f"image_{code}", batch.added(folder, new_name))

        slider.updated_by = current_user.user_id if current_user else None
        slider.date_updated = datetime.now()
        db.commit()
    except Exception:
        db.rollback()
        batch.discard()
        raise
    batch.finalize()
    db.refresh(slider)
    logger.info("[slider] updated slider %s", slider.id)
    return slider


def delete_slider(db: Session, slider_id: int) -> None:
    slider = _get_live_slider(db, slider_id)
    slider.status = STATUS_DELETED
    db.commit()
    logger.info("[slider] soft deleted slider %s", slider_id)


def update_order(db: Session, slider_id: int, order: int) -> None:
    slider = _get_live_slider(db, slider_id)
    slider.order = order
    db.commit()
    logger.info("[slider] slider %s moved to order %s", slider_id, order)
