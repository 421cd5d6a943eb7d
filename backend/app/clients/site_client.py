"""Typed HTTP client for the site API, used by the public site and admin tooling."""

import logging
import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import TypeAdapter

from app.config import settings
from app.schemas.common import CreatedOut
from app.schemas.gallery import GalleryCreate, GalleryImageOut, GalleryOut, GalleryUpdate
from app.schemas.menu import MenuItem
from app.schemas.news import AssetUploadResponse, NewsOut, PublicNewsOut, StoredAssetOut
from app.schemas.slider import SliderOut
from app.schemas.user import ProfileOut, ProfileUpdate, TokenResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

FilePart = Tuple[str, bytes, str]

_QUOTES_RE = re.compile(r"""^['"]+|['";]+$""")


class SiteApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def clean_base_url(raw: Optional[str]) -> str:
    """Strip surrounding quotes, a trailing semicolon and trailing slashes from a configured base URL."""
    value = _QUOTES_RE.sub("", (raw or "").strip())
    return value.rstrip("/") or "http://localhost:3001"


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _form_data(fields: Mapping[str, Any]) -> Dict[str, str]:
    return {key: _form_value(value) for key, value in fields.items() if value is not None}


class SiteApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = clean_base_url(base_url if base_url is not None else settings.API_BASE_URL)
        self.token = token
        self._http = httpx.Client(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout or settings.API_TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SiteApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _send(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("[client] %s %s failed: %s", method, path, exc)
            raise SiteApiError(f"Request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise SiteApiError(message or f"HTTP {response.status_code}", response.status_code)
        if isinstance(payload, dict) and payload.get("success") is False:
            raise SiteApiError(payload.get("error") or "Request failed", response.status_code)
        return payload

    def _data(self, method: str, path: str, schema: Type[T], **kwargs) -> T:
        payload = self._send(method, path, **kwargs)
        return TypeAdapter(schema).validate_python(payload.get("data"))

    # auth / profile

    def login(self, email: str, password: str) -> TokenResponse:
        payload = self._send("POST", "/api/auth/login", json={"email": email, "password": password})
        result = TokenResponse.model_validate(payload)
        self.token = result.access_token
        return result

    def get_profile(self) -> ProfileOut:
        return self._data("GET", "/api/profile", ProfileOut)

    def update_profile(self, data: ProfileUpdate) -> ProfileOut:
        body = data.model_dump(by_alias=True, exclude_unset=True)
        return self._data("PUT", "/api/profile", ProfileOut, json=body)

    # news

    def get_news(self) -> List[NewsOut]:
        return self._data("GET", "/api/news", List[NewsOut])

    def get_news_by_id(self, news_id: int) -> NewsOut:
        return self._data("GET", f"/api/news/{news_id}", NewsOut)

    def get_public_news(self, lang: str = "fr") -> List[PublicNewsOut]:
        return self._data("GET", "/api/news/public", List[PublicNewsOut], params={"lang": lang})

    def get_homepage_news(self, lang: str = "fr", limit: Optional[int] = None) -> List[PublicNewsOut]:
        params: Dict[str, Any] = {"lang": lang}
        if limit is not None:
            params["limit"] = limit
        return self._data("GET", "/api/news/homepage", List[PublicNewsOut], params=params)

    def get_news_by_slug(self, slug: str, lang: str = "fr") -> PublicNewsOut:
        return self._data("GET", f"/api/news/slug/{slug}", PublicNewsOut, params={"lang": lang})

    def create_news(self, fields: Mapping[str, Any], files: Optional[Mapping[str, FilePart]] = None) -> int:
        created = self._data(
            "POST", "/api/news", CreatedOut, data=_form_data(fields), files=dict(files or {}) or None,
        )
        return created.id

    def update_news(
        self,
        news_id: int,
        fields: Mapping[str, Any],
        files: Optional[Mapping[str, FilePart]] = None,
    ) -> None:
        self._send("PUT", f"/api/news/{news_id}", data=_form_data(fields), files=dict(files or {}) or None)

    def delete_news(self, news_id: int) -> None:
        self._send("DELETE", f"/api/news/{news_id}")

    def update_news_order(self, news_id: int, order: int) -> None:
        self._send("PUT", f"/api/news/{news_id}/order", json={"order": order})

    def upload_editor_image(self, club_id: str, image: FilePart) -> AssetUploadResponse:
        payload = self._send("POST", "/api/news/upload-image", data={"club_id": club_id}, files={"image": image})
        return AssetUploadResponse.model_validate(payload)

    def list_editor_images(self, club_id: str) -> List[StoredAssetOut]:
        payload = self._send("GET", "/api/news/images", params={"club_id": club_id})
        return TypeAdapter(List[StoredAssetOut]).validate_python(payload.get("images", []))

    def upload_editor_file(self, club_id: str, upload: FilePart) -> AssetUploadResponse:
        payload = self._send("POST", "/api/news/upload-file", data={"club_id": club_id}, files={"file": upload})
        return AssetUploadResponse.model_validate(payload)

    def list_editor_files(self, club_id: str) -> List[StoredAssetOut]:
        payload = self._send("GET", "/api/news/files", params={"club_id": club_id})
        return TypeAdapter(List[StoredAssetOut]).validate_python(payload.get("files", []))

    # gallery

    def get_galleries(self) -> List[GalleryOut]:
        return self._data("GET", "/api/gallery", List[GalleryOut])

    def get_gallery(self, gallery_id: int) -> GalleryOut:
        return self._data("GET", f"/api/gallery/{gallery_id}", GalleryOut)

    def create_gallery(self, data: GalleryCreate) -> int:
        created = self._data("POST", "/api/gallery", CreatedOut, json=data.model_dump(exclude_none=True))
        return created.id

    def update_gallery(self, gallery_id: int, data: GalleryUpdate) -> GalleryOut:
        return self._data("PUT", f"/api/gallery/{gallery_id}", GalleryOut, json=data.model_dump(exclude_unset=True))

    def delete_gallery(self, gallery_id: int) -> None:
        self._send("DELETE", f"/api/gallery/{gallery_id}")

    def update_gallery_order(self, gallery_id: int, order: int) -> None:
        self._send("PUT", f"/api/gallery/{gallery_id}/order", json={"order": order})

    def get_gallery_images(self, gallery_id: int) -> List[GalleryImageOut]:
        return self._data("GET", f"/api/gallery/{gallery_id}/images", List[GalleryImageOut])

    def upload_gallery_image(self, gallery_id: int, club_id: str, image: FilePart) -> GalleryImageOut:
        return self._data(
            "POST", f"/api/gallery/{gallery_id}/images", GalleryImageOut,
            data={"club_id": club_id}, files={"image": image},
        )

    def delete_gallery_image(self, gallery_id: int, image_id: int, club_id: str) -> None:
        self._send("DELETE", f"/api/gallery/{gallery_id}/images/{image_id}", json={"club_id": club_id})

    # slider

    def get_sliders(self) -> List[SliderOut]:
        return self._data("GET", "/api/slider", List[SliderOut])

    def get_active_sliders(self) -> List[SliderOut]:
        return self._data("GET", "/api/slider/active", List[SliderOut])

    def get_slider(self, slider_id: int) -> SliderOut:
        return self._data("GET", f"/api/slider/{slider_id}", SliderOut)

    def create_slider(self, fields: Mapping[str, Any], files: Mapping[str, FilePart]) -> SliderOut:
        return self._data("POST", "/api/slider", SliderOut, data=_form_data(fields), files=dict(files))

    def update_slider(
        self,
        slider_id: int,
        fields: Mapping[str, Any],
        files: Optional[Mapping[str, FilePart]] = None,
    ) -> SliderOut:
        return self._data(
            "PUT", f"/api/slider/{slider_id}", SliderOut,
            data=_form_data(fields), files=dict(files or {}) or None,
        )

    def delete_slider(self, slider_id: int) -> None:
        self._send("DELETE", f"/api/slider/{slider_id}")

    def update_slider_order(self, slider_id: int, order: int) -> None:
        self._send("PUT", f"/api/slider/{slider_id}/order", json={"order": order})

    # menu

    def fetch_menu(self, lang: str = "fr") -> List[MenuItem]:
        return self._data("GET", "/api/menu", List[MenuItem], params={"lang": lang})
