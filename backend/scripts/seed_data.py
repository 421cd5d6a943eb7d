"""Seed the database with an admin account, menu pages and sample content."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date
from app.database import Base, SessionLocal, close_engine, get_engine
import app.models  # noqa: F401

from app.models.gallery import Gallery
from app.models.news import News, NewsContent
from app.models.page import Page, PageContent
from app.models.user import User
from app.services.auth_service import hash_password
from app.utils.helpers import LANGUAGE_EN, LANGUAGE_FR, generate_slug
from app.utils.permissions import ADMIN, MEMBER

# (key, parent key, is main item, sort order, en title, en url, fr title, fr url)
MENU_PAGES = [
    ("home", None, True, 1, "HOME", "/en", "ACCUEIL", "/fr"),
    ("program", None, True, 2, "OUR PROGRAM", "/en/program", "NOTRE PROGRAMME", "/fr/programme"),
    ("tryouts", "program", False, 1, "TRYOUTS", "/en/tryouts", "ESSAIS", "/fr/essais"),
    ("coaches", "program", False, 2, "COACHES", "/en/coaches", "ENTRAÎNEURS", "/fr/entraineurs"),
    ("meets", None, True, 3, "OUR MEETS", "/en/meets", "NOS RENCONTRES", "/fr/rencontres"),
    ("records", "meets", False, 1, "CLUB RECORDS", "/en/records", "RECORDS DU CLUB", "/fr/records"),
    ("news", None, True, 4, "NEWS", "/en/news", "NOUVELLES", "/fr/nouvelles"),
    ("gallery", None, True, 5, "GALLERY", "/en/gallery", "GALERIE", "/fr/galerie"),
    ("contact", None, True, 6, "CONTACT US", "/en/contact", "NOUS CONTACTER", "/fr/contact"),
]


def seed():
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal(bind=engine)
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Users
        admin_password = os.environ.get("SEED_ADMIN_PASSWORD", "changeme123")
        users = [
            User(email="admin@swimdorval.ca", first_name="Site", last_name="Admin",
                 role=ADMIN, password_hash=hash_password(admin_password)),
            User(email="member@swimdorval.ca", first_name="Club", last_name="Member",
                 role=MEMBER, password_hash=hash_password(admin_password)),
        ]
        db.add_all(users)
        db.flush()

        # Menu pages
        pages = {}
        for key, parent_key, is_main, sort_order, en_title, en_url, fr_title, fr_url in MENU_PAGES:
            page = Page(
                parent_id=pages[parent_key].id if parent_key else None,
                page_type_id=1,
                sort_order=sort_order,
                is_main_item=1 if is_main else 0,
            )
            db.add(page)
            db.flush()
            pages[key] = page
            db.add_all([
                PageContent(page_id=page.id, language_id=LANGUAGE_EN, title=en_title, url=en_url),
                PageContent(page_id=page.id, language_id=LANGUAGE_FR, title=fr_title, url=fr_url),
            ])

        # News
        news = News(
            author="Dorval Swim Club",
            news_date=date.today(),
            show_in_homepage=1,
            order=1,
            post_to_public=1,
            post_to_member=1,
        )
        db.add(news)
        db.flush()
        for language_id, title, summary in (
            (LANGUAGE_EN, "New Platform", "Welcome to our new website."),
            (LANGUAGE_FR, "Nouvelle plateforme", "Bienvenue sur notre nouveau site."),
        ):
            db.add(NewsContent(
                news_id=news.id,
                language_id=language_id,
                title=title,
                summary=summary,
                article=f"<p>{summary}</p>",
                slug_url=generate_slug(title),
                added_by=users[0].user_id,
            ))

        # Gallery
        db.add(Gallery(
            gallery_name_en="Season Highlights",
            gallery_name_fr="Faits saillants de la saison",
            order=1,
            added_by=users[0].user_id,
        ))

        db.commit()
        print("Seed data inserted successfully.")
        print(f"  Admin login: admin@swimdorval.ca / {admin_password}")
    except Exception as e:
        db.rollback()
        print(f"Error seeding data: {e}")
        raise
    finally:
        db.close()
        close_engine()


if __name__ == "__main__":
    seed()
