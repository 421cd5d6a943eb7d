"""FastAPI application entry point. Registers middleware, API routers, static mounts and error envelopes."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.database import Base, close_engine, get_engine
import app.models  # noqa: F401 - registers model metadata
from app.middleware.locale_middleware import LocaleRedirectMiddleware
from app.routers import (
    auth, gallery, gallery_images, menu, news, pages, profile, slider, system,
)
from app.utils.schema_sync import sync_missing_schema_objects

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Club Site API",
    description="Bilingual (EN/FR) club website backend: news, galleries, slider and menu",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(LocaleRedirectMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid value for {location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("[app] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc) or "Internal server error"})


# Register all routers; pages last so its /{lang} routes never shadow the API
app.include_router(system.router)
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(news.router)
app.include_router(gallery.router)
app.include_router(gallery_images.router)
app.include_router(slider.router)
app.include_router(menu.router)


@app.on_event("startup")
def ensure_schema():
    # creates missing tables, then adds columns and indexes added to the models since
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    sync_missing_schema_objects(engine, Base.metadata)
    logger.info("[app] schema ready, serving static files from %s", os.path.abspath(settings.STATIC_DIR))


@app.on_event("shutdown")
def dispose_engine():
    close_engine()


# Static file serving for uploads
for kind in ("images", "files"):
    os.makedirs(os.path.join(settings.STATIC_DIR, kind), exist_ok=True)
    app.mount(f"/{kind}", StaticFiles(directory=os.path.join(settings.STATIC_DIR, kind)), name=kind)

app.include_router(pages.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)
