"""Slider API router: homepage slides."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.user import User
from app.schemas.common import ApiResponse, OrderUpdate
from app.schemas.slider import SliderFormFields, SliderOut
from app.services import slider_service
from app.utils.forms import read_multipart
from app.utils.permissions import ADMIN

router = APIRouter(prefix="/api/slider", tags=["slider"])

SLIDER_IMAGE_KEYS = ("image_en", "image_fr")


def _dump(sliders) -> List[SliderOut]:
    return [SliderOut.model_validate(slider) for slider in sliders]


@router.get("", response_model=ApiResponse[List[SliderOut]])
def list_sliders(db: Session = Depends(get_db)):
    return ApiResponse(data=_dump(slider_service.list_sliders(db)))


@router.get("/active", response_model=ApiResponse[List[SliderOut]])
def list_active_sliders(db: Session = Depends(get_db)):
    return ApiResponse(data=_dump(slider_service.list_sliders(db, active_only=True)))


@router.get("/{slider_id}", response_model=ApiResponse[SliderOut])
def get_slider(slider_id: int, db: Session = Depends(get_db)):
    return ApiResponse(data=SliderOut.model_validate(slider_service.get_slider(db, slider_id)))


@router.post("", response_model=ApiResponse[SliderOut])
async def create_slider(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    fields, images = await read_multipart(request, SliderFormFields, SLIDER_IMAGE_KEYS)
    slider = slider_service.create_slider(db, fields, images, current_user)
    return ApiResponse(data=SliderOut.model_validate(slider))


@router.put("/{slider_id}", response_model=ApiResponse[SliderOut])
async def update_slider(
    slider_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    fields, images = await read_multipart(request, SliderFormFields, SLIDER_IMAGE_KEYS)
    slider = slider_service.update_slider(db, slider_id, fields, images, current_user)
    return ApiResponse(data=SliderOut.model_validate(slider))


@router.delete("/{slider_id}", response_model=ApiResponse[None])
def delete_slider(
    slider_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    slider_service.delete_slider(db, slider_id)
    return ApiResponse()


@router.put("/{slider_id}/order", response_model=ApiResponse[None])
def update_slider_order(
    slider_id: int,
    data: OrderUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    slider_service.update_order(db, slider_id, data.order)
    return ApiResponse()
