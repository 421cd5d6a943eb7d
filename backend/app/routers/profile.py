"""Profile API router for the signed-in account."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.user import ProfileOut, ProfileUpdate
from app.services import user_service

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=ApiResponse[ProfileOut], response_model_by_alias=True)
def get_profile(current_user: User = Depends(get_current_user)):
    return ApiResponse(data=user_service.get_profile(current_user))


@router.put("", response_model=ApiResponse[ProfileOut], response_model_by_alias=True)
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ApiResponse(data=user_service.update_profile(db, current_user, data))
