"""Service layer package."""

from app.services import (
    auth_service,
    storage_service,
    news_service,
    gallery_service,
    gallery_image_service,
    slider_service,
    menu_service,
    user_service,
)
