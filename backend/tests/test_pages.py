from datetime import date

import pytest

from app.middleware.locale_middleware import localized_path, needs_language_redirect
from app.models.news import News, NewsContent
from app.models.slider import Slider
from app.utils.clubs import get_club_config
from app.utils.i18n import get_language, t


@pytest.mark.parametrize(
    "pathname, expected",
    [("/en/news", "en"), ("/fr", "fr"), ("/de/news", "fr"), ("/", "fr"), ("", "fr"), ("/english", "fr")],
)
def test_get_language(pathname, expected):
    assert get_language(pathname) == expected


def test_translate():
    assert t("en", "nav.home") == "HOME"
    assert t("fr", "nav.coaches") == "ENTRAÎNEURS"
    assert t("fr", "hero.joinTeam") == "Joindre L'Équipe"
    assert t("en", "nav.missing") == "nav.missing"
    assert t("en", "nav") == "nav"
    assert t("de", "nav.home") == "nav.home"


def test_club_config_falls_back_to_default():
    assert get_club_config("swimdorval").name == "Dorval Swim Club"
    assert get_club_config("unknown").id == "swimdorval"
    assert get_club_config(None).title_prefix == "Swim Dorval"


@pytest.mark.parametrize(
    "path, redirect",
    [
        ("/", True),
        ("/news", True),
        ("/fr", False),
        ("/en/news/some-slug", False),
        ("/api/news", False),
        ("/_app/immutable/start.js", False),
        ("/.well-known/security.txt", False),
        ("/favicon.ico", False),
        ("/docs", False),
        ("/images/clubs/swimdorval/news/a", False),
    ],
)
def test_needs_language_redirect(path, redirect):
    assert needs_language_redirect(path) is redirect


def test_localized_path():
    assert localized_path("/") == "/fr"
    assert localized_path("/news") == "/fr/news"


def test_unprefixed_path_redirects_to_french(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/fr"

    resp = client.get("/gallery?page=2", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/fr/gallery?page=2"


def test_api_paths_are_not_redirected(client):
    resp = client.get("/api/health", follow_redirects=False)
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.parametrize("suffix", ["accueil", "default"])
def test_legacy_paths_redirect_to_landing(client, suffix):
    resp = client.get(f"/en/{suffix}", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/en"


def _seed_landing(db):
    db.add(Slider(image_en="slide_en.png", image_fr="slide_fr.png", link_en="/en/tryouts",
                  link_fr="/fr/essais", order=1, status=1))
    db.add(Slider(image_en="off_en.png", image_fr="off_fr.png", order=2, status=0))
    news = News(author="Coach", news_date=date(2025, 5, 1),
                show_in_homepage=1, post_to_public=1, order=1)
    db.add(news)
    db.flush()
    db.add(NewsContent(news_id=news.id, language_id=1, title="Season opener", slug_url="season-opener"))
    db.add(NewsContent(news_id=news.id, language_id=2, title="Début de saison", slug_url="debut-de-saison"))
    db.commit()


def test_landing_page_context(client, db):
    _seed_landing(db)
    resp = client.get("/fr")
    assert resp.status_code == 200
    page = resp.json()
    assert page["lang"] == "fr"
    assert page["club"]["id"] == "swimdorval"
    assert page["translations"]["nav"]["home"] == "ACCUEIL"
    assert page["slides"] == [
        {"id": 1, "image": "/images/clubs/swimdorval/slider/slide_fr.png", "link": "/fr/essais"},
    ]
    assert [item["title"] for item in page["news"]] == ["Début de saison"]
    assert page["menu"] == []


def test_news_page_context(client, db):
    _seed_landing(db)
    resp = client.get("/en/news/season-opener")
    assert resp.status_code == 200
    assert resp.json()["news"]["title"] == "Season opener"
    assert resp.json()["translations"]["news"]["readMore"] == "read more"
    assert client.get("/en/news/debut-de-saison").status_code == 404


def test_unknown_language_is_404(client):
    # the redirect middleware sends /de to /fr/de, which is no page
    resp = client.get("/de")
    assert resp.status_code == 404
