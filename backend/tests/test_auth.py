from tests.conftest import TEST_PASSWORD, auth_headers, get_token


def test_login_success(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": "admin@swimdorval.ca", "password": TEST_PASSWORD})
    assert resp.status_code == 200
    data = resp.json()
    assert "access_token" in data
    assert data["user"]["role"] == "admin"
    assert "password_hash" not in data["user"]


def test_login_is_case_insensitive_on_email(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": " Admin@SwimDorval.ca ", "password": TEST_PASSWORD})
    assert resp.status_code == 200


def test_login_wrong_password(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": "admin@swimdorval.ca", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid email or password"}


def test_login_inactive_user(client, db, seed_users):
    seed_users["member"].is_active = False
    db.commit()
    resp = client.post("/api/auth/login", json={"email": "member@swimdorval.ca", "password": TEST_PASSWORD})
    assert resp.status_code == 401


def test_me(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "member@swimdorval.ca"


def test_me_without_token(client, seed_users):
    resp = client.get("/api/auth/me")
    assert resp.status_code in (401, 403)
    assert resp.json()["success"] is False


def test_invalid_token(client, seed_users):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid or expired token"


def test_member_cannot_write(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.post(
        "/api/gallery",
        json={"gallery_name_en": "Meets", "gallery_name_fr": "Rencontres"},
        headers=headers,
    )
    assert resp.status_code == 403
    assert resp.json()["error"] == "Requires role: admin"


def test_get_profile(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.get("/api/profile", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "firstName": "Max",
        "lastName": "Member",
        "email": "member@swimdorval.ca",
        "phone": "514-555-0100",
        "role": "member",
    }


def test_update_profile_and_password(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.put(
        "/api/profile",
        json={
            "firstName": "Maxime",
            "lastName": "Membre",
            "email": "maxime@swimdorval.ca",
            "phone": "",
            "password": "new-password-42",
        },
        headers=headers,
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["firstName"] == "Maxime"
    assert data["email"] == "maxime@swimdorval.ca"
    assert data["phone"] == ""

    assert get_token(client, "maxime@swimdorval.ca", "new-password-42")
    old = client.post("/api/auth/login", json={"email": "maxime@swimdorval.ca", "password": TEST_PASSWORD})
    assert old.status_code == 401


def test_update_profile_keeps_password_when_omitted(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.put(
        "/api/profile",
        json={"firstName": "Max", "lastName": "Member", "email": "member@swimdorval.ca"},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["phone"] == "514-555-0100"
    assert get_token(client, "member@swimdorval.ca")


def test_update_profile_rejects_taken_email(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.put(
        "/api/profile",
        json={"firstName": "Max", "lastName": "Member", "email": "admin@swimdorval.ca"},
        headers=headers,
    )
    assert resp.status_code == 409


def test_update_profile_rejects_short_password(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.put(
        "/api/profile",
        json={"firstName": "Max", "lastName": "Member", "email": "member@swimdorval.ca", "password": "short"},
        headers=headers,
    )
    assert resp.status_code == 400


def test_update_profile_missing_fields_is_400(client, seed_users):
    headers = auth_headers(client, "member@swimdorval.ca")
    resp = client.put("/api/profile", json={"firstName": "Max"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["success"] is False
