import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_club_site.db"
TEST_PASSWORD = "swim-fast-2025"
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)
CLUB_ID = "swimdorval"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def static_dir(tmp_path, monkeypatch):
    root = tmp_path / "static"
    monkeypatch.setattr(settings, "STATIC_DIR", str(root))
    return root


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(email="admin@swimdorval.ca", first_name="Ada", last_name="Admin",
                      role="admin", password_hash=TEST_PASSWORD_HASH),
        "member": User(email="member@swimdorval.ca", first_name="Max", last_name="Member",
                       phone="514-555-0100", role="member", password_hash=TEST_PASSWORD_HASH),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def make_image(width: int = 640, height: int = 480, fmt: str = "PNG", color=(30, 120, 200)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def png_upload(name: str = "photo.png", width: int = 640, height: int = 480):
    return (name, make_image(width, height), "image/png")


def get_token(client, email: str, password: str = TEST_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str = "admin@swimdorval.ca") -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
