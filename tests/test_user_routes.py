from internship_portal.core.auth import decode_token, hash_password
from tests.support import unique_violation, user_row

SIGNUP = {"email": "a@b.com", "password": "x", "user_type": "student"}


def test_signup_returns_user_without_password(client, fake_db, settings):
    fake_db.queue([user_row()])

    response = client.post("/api/users/signup", json=SIGNUP)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["user"] == {"id": 1, "email": "a@b.com", "user_type": "student",
                            "created_at": "2025-01-15T10:30:00Z"}
    assert "password" not in body["user"]
    assert decode_token(body["access_token"], settings)["sub"] == "1"


def test_signup_stores_a_hash_not_the_password(client, fake_db):
    fake_db.queue([user_row()])

    client.post("/api/users/signup", json=SIGNUP)

    stored = fake_db.last_params["password"]
    assert stored != "x"
    assert stored.startswith("$2")
    assert "RETURNING id, email, user_type, created_at" in fake_db.last_sql


def test_duplicate_signup_is_a_conflict(client, fake_db):
    fake_db.queue(unique_violation())

    response = client.post("/api/users/signup", json=SIGNUP)

    assert response.status_code == 400
    assert response.json() == {"detail": "User already exists"}


def test_signup_rejects_unknown_user_type(client, fake_db):
    response = client.post("/api/users/signup", json={**SIGNUP, "user_type": "admin"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("user_type:")
    assert fake_db.calls == []


def test_signup_requires_all_fields(client, fake_db):
    response = client.post("/api/users/signup", json={"email": "a@b.com"})

    assert response.status_code == 400
    assert fake_db.calls == []


def test_login_success(client, fake_db):
    fake_db.queue([user_row(password=hash_password("x"))])

    response = client.post("/api/users/login", json={"email": "a@b.com", "password": "x"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == 1
    assert "password" not in body["user"]
    assert body["token_type"] == "bearer"


def test_login_unknown_email_is_not_found(client):
    response = client.post("/api/users/login", json={"email": "nobody@b.com", "password": "x"})

    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_login_wrong_password_is_unauthorized(client, fake_db):
    fake_db.queue([user_row(password=hash_password("right"))])

    response = client.post("/api/users/login", json={"email": "a@b.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid password"}


def test_list_users_ordered_by_id(client, fake_db):
    fake_db.queue([user_row(id=1), user_row(id=2, email="c@d.com", user_type="startup")])

    response = client.get("/api/users")

    assert response.status_code == 200
    assert [u["id"] for u in response.json()["users"]] == [1, 2]
    assert fake_db.last_sql.endswith("ORDER BY id")
    assert "password" not in fake_db.last_sql


def test_get_user_includes_linked_ids(client, fake_db):
    fake_db.queue([user_row(student_profile_id=3, startup_id=None)])

    response = client.get("/api/users/1")

    assert response.status_code == 200
    assert response.json()["user"]["student_profile_id"] == 3


def test_get_missing_user(client):
    assert client.get("/api/users/99").status_code == 404


def test_update_requires_a_field(client, fake_db):
    response = client.put("/api/users/1", json={})

    assert response.status_code == 400
    assert fake_db.calls == []


def test_update_rehashes_password(client, fake_db):
    fake_db.queue([user_row()])

    response = client.put("/api/users/1", json={"password": "new-secret"})

    assert response.status_code == 200
    assert fake_db.last_sql.startswith("UPDATE users SET password = :password WHERE id = :_key")
    assert fake_db.last_params["password"].startswith("$2")


def test_update_duplicate_email_is_a_conflict(client, fake_db):
    fake_db.queue(unique_violation())

    response = client.put("/api/users/1", json={"email": "taken@b.com"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Email already in use"}


def test_update_rejects_bad_user_type(client, fake_db):
    response = client.put("/api/users/1", json={"user_type": "admin"})

    assert response.status_code == 400
    assert fake_db.calls == []


def test_delete_user(client, fake_db):
    fake_db.queue([{"id": 1}])

    response = client.delete("/api/users/1")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted", "id": 1}


def test_delete_missing_user(client):
    assert client.delete("/api/users/1").status_code == 404
