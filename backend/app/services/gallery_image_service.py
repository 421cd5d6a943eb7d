"""Gallery Image Service: image files backing a gallery and their database rows."""

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.gallery import GalleryImage
from app.models.user import User
from app.services import gallery_service, storage_service
from app.services.storage_service import UploadedImage
from app.utils.helpers import STATUS_ACTIVE, STATUS_DELETED

logger = logging.getLogger(__name__)


def list_images(db: Session, gallery_id: int) -> List[GalleryImage]:
    gallery_service.get_live_gallery(db, gallery_id)
    return (
        db.query(GalleryImage)
        .filter(GalleryImage.gallery_id == gallery_id, GalleryImage.status != STATUS_DELETED)
        .order_by(GalleryImage.order.asc(), GalleryImage.id.asc())
        .all()
    )


def _next_order(db: Session, gallery_id: int) -> int:
    max_order = (
        db.query(func.max(GalleryImage.order))
        .filter(GalleryImage.gallery_id == gallery_id, GalleryImage.status != STATUS_DELETED)
        .scalar()
    )
    return int(max_order or 0) + 1


def add_image(
    db: Session,
    gallery_id: int,
    club_id: str,
    image: UploadedImage,
    current_user: Optional[User] = None,
) -> GalleryImage:
    club_id = storage_service.validate_club_id(club_id)
    gallery_service.get_live_gallery(db, gallery_id)

    image_dir = storage_service.gallery_image_dir(club_id, gallery_id)
    thumb_dir = storage_service.gallery_thumbnail_dir(club_id, gallery_id)
    storage_service.ensure_dirs(image_dir, thumb_dir)
    thumbnail_data = storage_service.build_thumbnail(image.content, image.extension)

    batch = storage_service.FileBatch()
    try:
        thumbnail_name = batch.added(
            thumb_dir, storage_service.store_thumbnail(image, thumb_dir, "thumb", data=thumbnail_data)
        )
        image_name = batch.added(image_dir, storage_service.store_image(image, image_dir, "gallery"))
        row = GalleryImage(
            gallery_id=gallery_id,
            image_filename=image_name,
            thumbnail_filename=thumbnail_name,
            order=_next_order(db, gallery_id),
            added_by=current_user.user_id if current_user else None,
            status=STATUS_ACTIVE,
        )
        db.add(row)
        db.commit()
    except Exception:
        db.rollback()
        batch.discard()
        raise
    db.refresh(row)
    logger.info("[gallery] image %s added to gallery %s", row.id, gallery_id)
    return row


def delete_image(db: Session, gallery_id: int, image_id: int, club_id: str) -> None:
    club_id = storage_service.validate_club_id(club_id)
    row = (
        db.query(GalleryImage)
        .filter(
            GalleryImage.id == image_id,
            GalleryImage.gallery_id == gallery_id,
            GalleryImage.status != STATUS_DELETED,
        )
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Gallery image not found")
    row.status = STATUS_DELETED
    db.commit()

    storage_service.remove_file(storage_service.gallery_image_dir(club_id, gallery_id), row.image_filename)
    storage_service.remove_file(storage_service.gallery_thumbnail_dir(club_id, gallery_id), row.thumbnail_filename)
    logger.info("[gallery] image %s removed from gallery %s", image_id, gallery_id)
