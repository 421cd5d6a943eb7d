"""Menu API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.menu import MenuItem
from app.services import menu_service

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("", response_model=ApiResponse[List[MenuItem]], response_model_by_alias=True)
def get_menu(lang: Optional[str] = None, db: Session = Depends(get_db)):
    return ApiResponse(data=menu_service.get_menu(db, lang))
