"""Multipart form parsing that keeps track of which fields the client actually sent."""

from typing import Dict, Iterable, Optional, Tuple, Type, TypeVar

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

from app.services import storage_service
from app.services.storage_service import UploadedImage
from app.utils.helpers import is_blank, parse_form_bool

M = TypeVar("M", bound=BaseModel)

NULLABLE_WHEN_BLANK = {"news_date", "order", "status"}


def _field_is_bool(model: Type[BaseModel], name: str) -> bool:
    annotation = model.model_fields[name].annotation
    return annotation is bool or annotation == Optional[bool]


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"Invalid value for {location}: {error.get('msg')}"


async def read_multipart(
    request: Request,
    model: Type[M],
    image_keys: Iterable[str] = (),
) -> Tuple[M, Dict[str, Optional[UploadedImage]]]:
    form = await request.form()

    values = {}
    for name in model.model_fields:
        if name not in form:
            continue
        raw = form.get(name)
        if isinstance(raw, UploadFile):
            continue
        if _field_is_bool(model, name):
            values[name] = parse_form_bool(raw)
        elif name in NULLABLE_WHEN_BLANK and is_blank(raw):
            values[name] = None
        else:
            values[name] = raw
    try:
        fields = model.model_validate(values)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=_first_error(exc))

    images: Dict[str, Optional[UploadedImage]] = {}
    for key in image_keys:
        upload = form.get(key)
        if isinstance(upload, UploadFile) and upload.filename:
            images[key] = await storage_service.read_image_upload(upload)
        else:
            images[key] = None
    return fields, images
