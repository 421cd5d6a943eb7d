import pytest

from app.utils.helpers import blank_to_none, generate_slug, language_id_for, parse_form_bool


@pytest.mark.parametrize(
    "title, slug",
    [
        ("Hello World", "hello-world"),
        ("  Spring Meet: Results!  ", "spring-meet-results"),
        ("multi   space__and--dash", "multi-space-and-dash"),
        ("--Leading and trailing--", "leading-and-trailing"),
        ("Début de saison", "début-de-saison"),
        ("!!!", ""),
        ("", ""),
        (None, ""),
        (42, ""),
    ],
)
def test_generate_slug(title, slug):
    assert generate_slug(title) == slug


@pytest.mark.parametrize(
    "lang, language_id",
    [("en", 1), ("EN", 1), ("fr", 2), ("de", 2), ("", 2), (None, 2)],
)
def test_language_id_for(lang, language_id):
    assert language_id_for(lang) == language_id


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), ("on", True), ("TRUE", True), ("0", False), ("false", False),
     ("", False), (None, False), (True, True)],
)
def test_parse_form_bool(value, expected):
    assert parse_form_bool(value) is expected


def test_blank_to_none():
    assert blank_to_none("  ") is None
    assert blank_to_none(None) is None
    assert blank_to_none("x") == "x"
