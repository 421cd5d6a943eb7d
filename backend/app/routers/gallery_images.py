"""Gallery image API router: upload, list and remove the pictures of one gallery."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.user import User
from app.schemas.common import ApiResponse, ClubRequest
from app.schemas.gallery import GalleryImageOut
from app.services import gallery_image_service, storage_service
from app.utils.permissions import ADMIN

router = APIRouter(prefix="/api/gallery/{gallery_id}/images", tags=["gallery"])


@router.get("", response_model=ApiResponse[List[GalleryImageOut]])
def list_images(gallery_id: int, db: Session = Depends(get_db)):
    rows = gallery_image_service.list_images(db, gallery_id)
    return ApiResponse(data=[GalleryImageOut.model_validate(row) for row in rows])


@router.post("", response_model=ApiResponse[GalleryImageOut])
async def upload_image(
    gallery_id: int,
    image: Optional[UploadFile] = File(None),
    club_id: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    if image is None or not image.filename:
        raise HTTPException(status_code=400, detail="No image file provided")
    storage_service.validate_club_id(club_id)
    uploaded = await storage_service.read_image_upload(image)
    row = gallery_image_service.add_image(db, gallery_id, club_id, uploaded, current_user)
    return ApiResponse(data=GalleryImageOut.model_validate(row))


@router.delete("/{image_id}", response_model=ApiResponse[None])
def delete_image(
    gallery_id: int,
    image_id: int,
    data: ClubRequest,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    gallery_image_service.delete_image(db, gallery_id, image_id, data.club_id)
    return ApiResponse()
