import asyncio
import io

import pytest
from fastapi import HTTPException, UploadFile
from PIL import Image
from starlette.datastructures import Headers

from app.config import settings
from app.services import storage_service
from app.services.storage_service import UploadedFile, UploadedImage
from tests.conftest import make_image


def _upload(name: str, content: bytes, content_type: str) -> UploadFile:
    return UploadFile(io.BytesIO(content), filename=name, headers=Headers({"content-type": content_type}))


@pytest.mark.parametrize("club_id", ["", "   ", None, "../x", "club id", "a/b"])
def test_validate_club_id_rejects(club_id):
    with pytest.raises(HTTPException) as exc:
        storage_service.validate_club_id(club_id)
    assert exc.value.status_code == 400


def test_club_directories(static_dir):
    assert storage_service.news_thumbnail_dir("swimdorval") == str(
        static_dir / "images" / "clubs" / "swimdorval" / "news" / "thumbnail"
    )
    assert storage_service.news_files_dir("swimdorval") == str(static_dir / "files" / "clubs" / "swimdorval" / "news")
    assert storage_service.gallery_thumbnail_dir("swimdorval", 3).endswith("gallery/3/thumbnail")


def test_read_image_upload_checks_type_and_size(monkeypatch):
    image = asyncio.run(storage_service.read_image_upload(_upload("a.JPG", make_image(fmt="JPEG"), "image/jpeg")))
    assert image.extension == "jpg"

    with pytest.raises(HTTPException) as wrong_mime:
        asyncio.run(storage_service.read_image_upload(_upload("a.png", b"x", "application/pdf")))
    assert wrong_mime.value.status_code == 400

    with pytest.raises(HTTPException) as empty:
        asyncio.run(storage_service.read_image_upload(_upload("a.png", b"", "image/png")))
    assert empty.value.status_code == 400

    monkeypatch.setattr(settings, "MAX_IMAGE_SIZE", 10)
    with pytest.raises(HTTPException) as too_big:
        asyncio.run(storage_service.read_image_upload(_upload("a.png", make_image(), "image/png")))
    assert too_big.value.status_code == 413


def test_read_file_upload_strips_directories():
    upload = asyncio.run(storage_service.read_file_upload(_upload("../../minutes.docx", b"doc", "application/msword")))
    assert upload.filename == "minutes.docx"


def test_build_thumbnail_keeps_ratio():
    data = storage_service.build_thumbnail(make_image(1000, 250), "png")
    with Image.open(io.BytesIO(data)) as thumb:
        assert thumb.size == (300, 75)


def test_build_thumbnail_converts_for_jpeg():
    buffer = io.BytesIO()
    Image.new("RGBA", (500, 500), (0, 0, 0, 0)).save(buffer, format="PNG")
    data = storage_service.build_thumbnail(buffer.getvalue(), "jpg", size=100)
    with Image.open(io.BytesIO(data)) as thumb:
        assert thumb.format == "JPEG"
        assert thumb.size == (100, 100)


def test_build_thumbnail_rejects_garbage():
    with pytest.raises(HTTPException) as exc:
        storage_service.build_thumbnail(b"garbage", "png")
    assert exc.value.status_code == 400


def test_store_image_and_thumbnail(tmp_path):
    image = UploadedImage(filename="pool.png", content_type="image/png", content=make_image())
    name = storage_service.store_image(image, str(tmp_path), "news_en")
    thumb = storage_service.store_thumbnail(image, str(tmp_path / "thumbnail"), "thumb_en")
    assert name.startswith("news_en_") and name.endswith(".png")
    assert (tmp_path / name).exists()
    assert (tmp_path / "thumbnail" / thumb).exists()

    second = storage_service.store_image(image, str(tmp_path), "news_en")
    assert second != name


def test_versioned_filename(tmp_path):
    upload = UploadedFile(filename="results.xlsx", content=b"data")
    assert storage_service.store_versioned_file(upload, str(tmp_path)) == ("results.xlsx", 1)
    assert storage_service.store_versioned_file(upload, str(tmp_path)) == ("results_v2.xlsx", 2)
    assert storage_service.versioned_filename(str(tmp_path), "results.xlsx") == ("results_v3.xlsx", 3)


def test_list_directory_filters_and_sorts(tmp_path):
    for name in ("b.png", "a.jpg", "notes.txt"):
        (tmp_path / name).write_bytes(b"1234")
    (tmp_path / "thumbnail").mkdir()
    rows = storage_service.list_directory(
        str(tmp_path), "/images/x", extensions=storage_service.EDITOR_IMAGE_LIST_EXTENSIONS,
    )
    assert rows == [
        {"filename": "a.jpg", "url": "/images/x/a.jpg", "size": 4},
        {"filename": "b.png", "url": "/images/x/b.png", "size": 4},
    ]
    assert storage_service.list_directory(str(tmp_path / "missing"), "/images/x") == []


def test_remove_file(tmp_path):
    (tmp_path / "old.png").write_bytes(b"x")
    assert storage_service.remove_file(str(tmp_path), "old.png") is True
    assert storage_service.remove_file(str(tmp_path), "old.png") is False
    assert storage_service.remove_file(str(tmp_path), None) is False


def test_file_batch_discard_removes_only_new_files(tmp_path):
    (tmp_path / "old.png").write_bytes(b"old")
    (tmp_path / "new.png").write_bytes(b"new")
    batch = storage_service.FileBatch()
    batch.replace(str(tmp_path), "old.png")
    assert batch.added(str(tmp_path), "new.png") == "new.png"

    batch.discard()
    assert (tmp_path / "old.png").exists()
    assert not (tmp_path / "new.png").exists()


def test_file_batch_finalize_removes_replaced_files(tmp_path):
    (tmp_path / "old.png").write_bytes(b"old")
    (tmp_path / "new.png").write_bytes(b"new")
    batch = storage_service.FileBatch()
    batch.replace(str(tmp_path), "old.png")
    batch.replace(str(tmp_path), None)
    batch.added(str(tmp_path), "new.png")

    batch.finalize()
    assert not (tmp_path / "old.png").exists()
    assert (tmp_path / "new.png").exists()
