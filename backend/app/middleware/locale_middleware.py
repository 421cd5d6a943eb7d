"""Redirects page requests without a language prefix to the French site."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from app.utils.i18n import DEFAULT_LANGUAGE, is_supported

SKIPPED_PREFIXES = ("/api", "/_app", "/.well-known", "/docs", "/redoc", "/images", "/files")


def needs_language_redirect(path: str) -> bool:
    if path.startswith(SKIPPED_PREFIXES) or "." in path:
        return False
    first_segment = path.split("/")[1] if path.count("/") else ""
    return not is_supported(first_segment)


def localized_path(path: str, lang: str = DEFAULT_LANGUAGE) -> str:
    return f"/{lang}" if path in ("", "/") else f"/{lang}{path}"


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if needs_language_redirect(path):
            target = localized_path(path)
            if request.url.query:
                target = f"{target}?{request.url.query}"
            return RedirectResponse(target, status_code=302)
        return await call_next(request)
