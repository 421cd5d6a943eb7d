"""Storage Service: per-club upload directories, validation, thumbnails and file cleanup."""

import logging
import os
import re
import time
from dataclasses import dataclass
from io import BytesIO
from typing import List, Optional

from fastapi import HTTPException, UploadFile
from PIL import Image, UnidentifiedImageError

from app.config import settings

logger = logging.getLogger(__name__)

CLUB_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")
EDITOR_IMAGE_LIST_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"}

PIL_FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
    "webp": "WEBP",
}


@dataclass
class UploadedImage:
    filename: str
    content_type: str
    content: bytes

    @property
    def extension(self) -> str:
        return _extension(self.filename)


@dataclass
class UploadedFile:
    filename: str
    content: bytes


def _extension(filename: str | None) -> str:
    name = filename or ""
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def validate_club_id(club_id: str | None) -> str:
    value = (club_id or "").strip()
    if not value:
        raise HTTPException(status_code=400, detail="Club ID is required")
    if not CLUB_ID_RE.match(value):
        raise HTTPException(status_code=400, detail="Invalid club ID")
    return value


def _club_root(kind: str, club_id: str) -> str:
    return os.path.join(settings.STATIC_DIR, kind, "clubs", validate_club_id(club_id))


def news_image_dir(club_id: str) -> str:
    return os.path.join(_club_root("images", club_id), "news")


def news_thumbnail_dir(club_id: str) -> str:
    return os.path.join(news_image_dir(club_id), "thumbnail")


def news_files_dir(club_id: str) -> str:
    return os.path.join(_club_root("files", club_id), "news")


def gallery_image_dir(club_id: str, gallery_id: int) -> str:
    return os.path.join(_club_root("images", club_id), "gallery", str(gallery_id))


def gallery_thumbnail_dir(club_id: str, gallery_id: int) -> str:
    return os.path.join(gallery_image_dir(club_id, gallery_id), "thumbnail")


def slider_image_dir(club_id: str) -> str:
    return os.path.join(_club_root("images", club_id), "slider")


def news_image_url(club_id: str, filename: str) -> str:
    return f"/images/clubs/{club_id}/news/{filename}"


def news_file_url(club_id: str, filename: str) -> str:
    return f"/files/clubs/{club_id}/news/{filename}"


def ensure_dirs(*paths: str) -> None:
    for path in paths:
        os.makedirs(path, exist_ok=True)


async def read_image_upload(file: UploadFile) -> UploadedImage:
    ext = _extension(file.filename)
    allowed = {value.lower() for value in settings.ALLOWED_IMAGE_EXTENSIONS}
    content_type = (file.content_type or "").lower()
    mime_subtype = content_type.split("/", 1)[-1] if content_type.startswith("image/") else ""
    if ext not in allowed or mime_subtype not in allowed:
        raise HTTPException(status_code=400, detail="Only image files are allowed")
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded image is empty")
    if len(content) > settings.MAX_IMAGE_SIZE:
        raise HTTPException(status_code=413, detail="Image exceeds the upload size limit")
    return UploadedImage(filename=file.filename, content_type=content_type, content=content)


async def read_file_upload(file: UploadFile) -> UploadedFile:
    ext = _extension(file.filename)
    allowed = {value.lower() for value in settings.ALLOWED_FILE_EXTENSIONS}
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"File type not allowed. Allowed types: {', '.join(sorted(allowed)).upper()}",
        )
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.MAX_FILE_SIZE:
        raise HTTPException(status_code=413, detail="File exceeds the upload size limit")
    return UploadedFile(filename=os.path.basename(file.filename), content=content)


def timestamped_filename(folder: str, prefix: str, ext: str) -> str:
    stamp = int(time.time() * 1000)
    suffix = f".{ext}" if ext else ""
    filename = f"{prefix}_{stamp}{suffix}"
    while os.path.exists(os.path.join(folder, filename)):
        stamp += 1
        filename = f"{prefix}_{stamp}{suffix}"
    return filename


def versioned_filename(folder: str, original_name: str) -> tuple[str, int]:
    stem, ext = os.path.splitext(os.path.basename(original_name))
    filename = f"{stem}{ext}"
    version = 1
    while os.path.exists(os.path.join(folder, filename)):
        version += 1
        filename = f"{stem}_v{version}{ext}"
    return filename, version


def save_bytes(folder: str, filename: str, content: bytes) -> str:
    ensure_dirs(folder)
    path = os.path.join(folder, filename)
    with open(path, "wb") as f:
        f.write(content)
    return path


def build_thumbnail(content: bytes, ext: str, size: Optional[int] = None) -> bytes:
    """Shrink an image to fit inside ``size`` x ``size`` keeping its ratio. Smaller images keep their size."""
    limit = size or settings.THUMBNAIL_SIZE
    try:
        with Image.open(BytesIO(content)) as img:
            img.load()
            thumb = img.copy()
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("[storage] unreadable image rejected: %s", exc)
        raise HTTPException(status_code=400, detail="Uploaded image could not be read")

    thumb.thumbnail((limit, limit))
    fmt = PIL_FORMATS.get(ext.lower(), "PNG")
    if fmt == "JPEG" and thumb.mode not in ("RGB", "L"):
        thumb = thumb.convert("RGB")
    out = BytesIO()
    thumb.save(out, format=fmt)
    return out.getvalue()


def store_image(image: UploadedImage, folder: str, prefix: str) -> str:
    filename = timestamped_filename(folder, prefix, image.extension)
    save_bytes(folder, filename, image.content)
    logger.info("[storage] saved image %s", os.path.join(folder, filename))
    return filename


def store_thumbnail(source: UploadedImage, folder: str, prefix: str, data: Optional[bytes] = None) -> str:
    """Save a thumbnail of ``source``. Pass ``data`` when it was already built with ``build_thumbnail``."""
    if data is None:
        data = build_thumbnail(source.content, source.extension)
    filename = timestamped_filename(folder, prefix, source.extension)
    save_bytes(folder, filename, data)
    logger.info("[storage] saved thumbnail %s", os.path.join(folder, filename))
    return filename


def store_versioned_file(upload: UploadedFile, folder: str) -> tuple[str, int]:
    ensure_dirs(folder)
    filename, version = versioned_filename(folder, upload.filename)
    save_bytes(folder, filename, upload.content)
    return filename, version


def list_directory(folder: str, url_prefix: str, extensions: Optional[set[str]] = None) -> List[dict]:
    if not os.path.isdir(folder):
        return []
    rows = []
    for filename in os.listdir(folder):
        path = os.path.join(folder, filename)
        if not os.path.isfile(path):
            continue
        if extensions is not None and os.path.splitext(filename)[1].lower() not in extensions:
            continue
        rows.append({
            "filename": filename,
            "url": f"{url_prefix}/{filename}",
            "size": os.path.getsize(path),
        })
    rows.sort(key=lambda row: row["filename"])
    return rows


def remove_file(folder: str, filename: str | None) -> bool:
    if not filename:
        return False
    path = os.path.join(folder, os.path.basename(filename))
    try:
        if os.path.exists(path):
            os.remove(path)
            return True
    except OSError as exc:
        logger.warning("[storage] failed to delete %s: %s", path, exc)
    return False


def verify_image(image: UploadedImage) -> None:
    try:
        with Image.open(BytesIO(image.content)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        logger.warning("[storage] unreadable image %s rejected: %s", image.filename, exc)
        raise HTTPException(status_code=400, detail="Uploaded image could not be read")


class FileBatch:
    """Files touched by one write request.

    New files are removed again by ``discard`` when the request fails.
    Files they replace are removed by ``finalize`` once the database commit
    went through, so a rejected request never loses live content.
    """

    def __init__(self) -> None:
        self.written: List[tuple[str, str]] = []
        self.replaced: List[tuple[str, str]] = []

    def added(self, folder: str, filename: str) -> str:
        self.written.append((folder, filename))
        return filename

    def replace(self, folder: str, filename: str | None) -> None:
        if filename:
            self.replaced.append((folder, filename))

    def discard(self) -> None:
        for folder, filename in self.written:
            remove_file(folder, filename)
        if self.written:
            logger.info("[storage] discarded %s files of a failed request", len(self.written))
        self.written = []
        self.replaced = []

    def finalize(self) -> None:
        for folder, filename in self.replaced:
            remove_file(folder, filename)
        self.written = []
        self.replaced = []
