"""Gallery API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_optional_user, require_roles
from app.models.user import User
from app.schemas.common import ApiResponse, CreatedOut, OrderUpdate
from app.schemas.gallery import GalleryCreate, GalleryOut, GalleryUpdate
from app.services import gallery_service
from app.utils.permissions import ADMIN

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=ApiResponse[List[GalleryOut]])
def list_galleries(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    # member-only galleries stay hidden from anonymous visitors
    galleries = gallery_service.list_galleries(db, include_member_only=current_user is not None)
    return ApiResponse(data=[GalleryOut.model_validate(gallery) for gallery in galleries])


@router.get("/{gallery_id}", response_model=ApiResponse[GalleryOut])
def get_gallery(gallery_id: int, db: Session = Depends(get_db)):
    gallery = gallery_service.get_live_gallery(db, gallery_id)
    return ApiResponse(data=GalleryOut.model_validate(gallery))


@router.post("", response_model=ApiResponse[CreatedOut])
def create_gallery(
    data: GalleryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    return ApiResponse(data=CreatedOut(id=gallery_service.create_gallery(db, data, current_user)))


@router.put("/{gallery_id}", response_model=ApiResponse[GalleryOut])
def update_gallery(
    gallery_id: int,
    data: GalleryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    gallery = gallery_service.update_gallery(db, gallery_id, data, current_user)
    return ApiResponse(data=GalleryOut.model_validate(gallery))


@router.delete("/{gallery_id}", response_model=ApiResponse[None])
def delete_gallery(
    gallery_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    gallery_service.delete_gallery(db, gallery_id)
    return ApiResponse()


@router.put("/{gallery_id}/order", response_model=ApiResponse[None])
def update_gallery_order(
    gallery_id: int,
    data: OrderUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    gallery_service.update_order(db, gallery_id, data.order)
    return ApiResponse()
