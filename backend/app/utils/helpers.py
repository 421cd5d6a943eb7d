"""Shared helpers for content rows: status and language constants, slugs and form values."""

import re
from typing import Any

STATUS_INACTIVE = 0
STATUS_ACTIVE = 1
STATUS_DELETED = 2

LANGUAGE_EN = 1
LANGUAGE_FR = 2
LANGUAGE_IDS = {"en": LANGUAGE_EN, "fr": LANGUAGE_FR}
SUPPORTED_LANGUAGES = ("en", "fr")

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")
_SLUG_SEPARATOR_RE = re.compile(r"[\s_-]+")

_TRUE_FORM_VALUES = {"1", "true", "on", "yes"}


def language_id_for(lang: str | None) -> int:
    # anything other than an explicit "en" falls back to French
    return LANGUAGE_EN if (lang or "").strip().lower() == "en" else LANGUAGE_FR


def generate_slug(title: Any) -> str:
    if not title or not isinstance(title, str):
        return ""
    slug = title.lower().strip()
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _SLUG_SEPARATOR_RE.sub("-", slug)
    return slug.strip("-")


def parse_form_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_FORM_VALUES


def blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value if value.strip() else None


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
