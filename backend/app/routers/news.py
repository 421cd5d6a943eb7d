"""News API router: bilingual news CRUD plus the rich-text editor's image and file uploads."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.user import User
from app.schemas.common import ApiResponse, CreatedOut, OrderUpdate
from app.schemas.news import (
    AssetUploadResponse,
    FileListResponse,
    ImageListResponse,
    NewsFormFields,
    NewsOut,
    PublicNewsOut,
)
from app.services import news_service, storage_service
from app.utils.forms import read_multipart
from app.utils.permissions import ADMIN

router = APIRouter(prefix="/api/news", tags=["news"])

NEWS_IMAGE_KEYS = ("image_en", "thumbnail_en", "image_fr", "thumbnail_fr")


@router.get("", response_model=ApiResponse[List[NewsOut]])
def list_news(db: Session = Depends(get_db)):
    return ApiResponse(data=news_service.list_news(db))


@router.get("/public", response_model=ApiResponse[List[PublicNewsOut]])
def list_public_news(lang: Optional[str] = None, db: Session = Depends(get_db)):
    return ApiResponse(data=news_service.list_public_news(db, lang))


@router.get("/homepage", response_model=ApiResponse[List[PublicNewsOut]])
def list_homepage_news(
    lang: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    return ApiResponse(data=news_service.list_public_news(db, lang, homepage_only=True, limit=limit))


@router.get("/slug/{slug}", response_model=ApiResponse[PublicNewsOut])
def get_news_by_slug(slug: str, lang: Optional[str] = None, db: Session = Depends(get_db)):
    return ApiResponse(data=news_service.get_news_by_slug(db, slug, lang))


@router.post("/upload-image", response_model=AssetUploadResponse)
async def upload_editor_image(
    image: Optional[UploadFile] = File(None),
    club_id: Optional[str] = Form(None),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    if image is None or not image.filename:
        raise HTTPException(status_code=400, detail="No image file provided")
    storage_service.validate_club_id(club_id)
    stored = news_service.save_editor_image(club_id, await storage_service.read_image_upload(image))
    return AssetUploadResponse(**stored)


@router.get("/images", response_model=ImageListResponse)
def list_editor_images(club_id: Optional[str] = None):
    return ImageListResponse(images=news_service.list_editor_images(club_id))


@router.post("/upload-file", response_model=AssetUploadResponse)
async def upload_editor_file(
    file: Optional[UploadFile] = File(None),
    club_id: Optional[str] = Form(None),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")
    storage_service.validate_club_id(club_id)
    stored = news_service.save_editor_file(club_id, await storage_service.read_file_upload(file))
    return AssetUploadResponse(**stored)


@router.get("/files", response_model=FileListResponse)
def list_editor_files(club_id: Optional[str] = None):
    return FileListResponse(files=news_service.list_editor_files(club_id))


@router.get("/{news_id}", response_model=ApiResponse[NewsOut])
def get_news(news_id: int, db: Session = Depends(get_db)):
    return ApiResponse(data=news_service.get_news(db, news_id))


@router.post("", response_model=ApiResponse[CreatedOut])
async def create_news(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    fields, images = await read_multipart(request, NewsFormFields, NEWS_IMAGE_KEYS)
    news_id = news_service.create_news(db, fields, images, current_user)
    return ApiResponse(data=CreatedOut(id=news_id))


@router.put("/{news_id}", response_model=ApiResponse[None])
async def update_news(
    news_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    fields, images = await read_multipart(request, NewsFormFields, NEWS_IMAGE_KEYS)
    news_service.update_news(db, news_id, fields, images, current_user)
    return ApiResponse()


@router.delete("/{news_id}", response_model=ApiResponse[None])
def delete_news(
    news_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    news_service.delete_news(db, news_id)
    return ApiResponse()


@router.put("/{news_id}/order", response_model=ApiResponse[None])
def update_news_order(
    news_id: int,
    data: OrderUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    news_service.update_order(db, news_id, data.order)
    return ApiResponse()
